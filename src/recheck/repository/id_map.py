# SPDX-License-Identifier: MIT

from typing import Optional, get_args

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from recheck import configuration
from recheck.model.entity_id import EntityId
from recheck.model.id_map import IdKind, IdMap, SyntheticIds
from recheck.template.id_map import get_id_map_template

ID_KINDS: tuple[str, ...] = get_args(IdKind)


class IdMapRepository:
    def __init__(self) -> None:
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        if configuration.DATA_ID_MAP_PATH.is_file():
            self._id_map = load(
                configuration.DATA_ID_MAP_PATH.read_text(), Loader=Loader
            )
        if self._id_map is None:
            self._id_map = get_id_map_template()

    def __save_data(self, id_map: IdMap) -> None:
        configuration.DATA_ID_MAP_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_ID_MAP_PATH.write_text(dump(dict(id_map), Dumper=Dumper))

    def flush(self) -> bool:
        if self._id_map is not None and self.is_dirty:
            self.__save_data(self._id_map)
            self.is_dirty = False
            return True
        return False

    def __ids(self, kind: str) -> SyntheticIds:
        if kind not in ID_KINDS:
            raise TypeError(f"Unknown id kind {kind!r}, expected one of {ID_KINDS}")
        return self.id_map[kind]  # type: ignore[literal-required]

    def clear_ids(self) -> None:
        self.is_dirty = True
        self._id_map = get_id_map_template()

    def associate_id(self, kind: str, entity_id: EntityId) -> int:
        """Return the synthetic id of an entity, numbering it if it has none yet."""
        ids = self.__ids(kind)
        existing = ids["real_to_synthetic"].get(entity_id)
        if existing is not None:
            return existing

        self.is_dirty = True
        synthetic_id = len(ids["real_to_synthetic"]) + 1
        ids["real_to_synthetic"][entity_id] = synthetic_id
        ids["synthetic_to_real"][synthetic_id] = entity_id
        return synthetic_id

    def get_real_id(self, kind: str, synthetic_id: int) -> EntityId:
        """Raises KeyError when the synthetic id was never handed out."""
        return self.__ids(kind)["synthetic_to_real"][synthetic_id]


ID_MAP_REPO = IdMapRepository()
