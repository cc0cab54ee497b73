# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum


class Window(NamedTuple):
    """Half-open UTC interval [start, end)."""

    start: pendulum.DateTime
    end: pendulum.DateTime

    def contains(self, instant: pendulum.DateTime) -> bool:
        return self.start <= instant < self.end


class WeekWindow(NamedTuple):
    start: pendulum.DateTime
    end: pendulum.DateTime
    label: str

    def contains(self, instant: pendulum.DateTime) -> bool:
        return self.start <= instant < self.end
