# SPDX-License-Identifier: MIT


class EntityType:
    ITEM = "item"
    CHECK_IN = "check_in"
