# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from recheck.model.entity_id import EntityId

IdKind = Literal["items", "check_ins"]


class SyntheticIds(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]


class IdMap(TypedDict):
    """
    Short numbers shown in tables, mapped back to stored ids.

    The numbers are handed out in display order and only stay valid until
    the next list view clears them:

        id_map["items"]["synthetic_to_real"][2]  # "3f0c..."
    """

    items: SyntheticIds
    check_ins: SyntheticIds
