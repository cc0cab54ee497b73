# SPDX-License-Identifier: MIT

from recheck.model.id_map import IdMap, SyntheticIds


def __empty() -> SyntheticIds:
    return {"synthetic_to_real": {}, "real_to_synthetic": {}}


def get_id_map_template() -> IdMap:
    return {"items": __empty(), "check_ins": __empty()}
