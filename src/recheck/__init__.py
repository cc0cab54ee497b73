# SPDX-License-Identifier: MIT

from recheck.cleanup import register_cleanup
from recheck.initialize import initialize
from recheck.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
