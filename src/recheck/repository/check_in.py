# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from loguru import logger
from yaml import dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from recheck import configuration, time
from recheck.model.check_in import CheckIn
from recheck.model.entity_id import EntityId, generate_entity_id
from recheck.model.window import Window


class CheckInNotFoundError(LookupError):
    """Raised when no stored check-in has the requested id."""

    pass


class CheckInRepository:
    """
    Append-only store of check-ins, one YAML file per event.

    There is no modify operation: a stored check-in never changes.
    """

    def __init__(self) -> None:
        self._check_ins: Optional[list[CheckIn]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def check_ins(self) -> list[CheckIn]:
        if self._check_ins is None:
            self.__load_data()
        if self._check_ins is None:
            raise ValueError()
        return self._check_ins

    def __load_data(self) -> None:
        self._check_ins = []
        if not configuration.DATA_CHECK_INS_DIR.is_dir():
            return
        for file_path in configuration.DATA_CHECK_INS_DIR.iterdir():
            if file_path.suffix != ".yaml" or file_path.name == ".gitkeep":
                continue
            raw_check_in = load(file_path.read_text(), Loader=Loader)
            if raw_check_in is not None:
                self._check_ins.append(
                    self.__convert_check_in_for_deserialization(raw_check_in)
                )
        logger.debug("Loaded {} check-ins", len(self._check_ins))

    def __save_data(self) -> None:
        configuration.DATA_CHECK_INS_DIR.mkdir(parents=True, exist_ok=True)

        for check_in in self.check_ins:
            if check_in["id"] in self._dirty_ids:
                serializable_check_in = self.__convert_check_in_for_serialization(
                    deepcopy(check_in)
                )
                file_path = configuration.DATA_CHECK_INS_DIR / f"{check_in['id']}.yaml"
                file_path.write_text(dump(serializable_check_in, Dumper=Dumper))

        logger.debug("Flushed {} check-ins", len(self._dirty_ids))
        self._dirty_ids.clear()

    def flush(self) -> bool:
        if self._check_ins is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_check_in_for_serialization(self, check_in: CheckIn) -> dict[str, Any]:
        serializable_check_in = cast(dict[str, Any], check_in)
        serializable_check_in["occurred_at"] = time.datetime_to_iso_str(
            serializable_check_in["occurred_at"]
        )
        serializable_check_in["created"] = time.datetime_to_iso_str(
            serializable_check_in["created"]
        )
        return serializable_check_in

    def __convert_check_in_for_deserialization(
        self, check_in: dict[str, Any]
    ) -> CheckIn:
        deserializable_check_in = check_in
        deserializable_check_in["occurred_at"] = time.datetime_from_str(
            deserializable_check_in["occurred_at"]
        )
        deserializable_check_in["created"] = time.datetime_from_str(
            deserializable_check_in["created"]
        )
        deserializable_check_in.setdefault("photo_ref", None)
        return cast(CheckIn, deserializable_check_in)

    def save_new_check_in(self, check_in: CheckIn) -> EntityId:
        self.is_dirty = True

        check_in["id"] = generate_entity_id()
        self.check_ins.append(check_in)
        self._dirty_ids.add(check_in["id"])
        logger.info(
            "Recorded check-in {} for item {}", check_in["id"], check_in["item_id"]
        )

        return check_in["id"]

    def fetch_events(
        self,
        item_id: Optional[EntityId] = None,
        window: Optional[Window] = None,
    ) -> list[CheckIn]:
        events = [
            check_in
            for check_in in self.check_ins
            if (item_id is None or check_in["item_id"] == item_id)
            and (window is None or window.contains(check_in["occurred_at"]))
        ]
        return deepcopy(events)

    def get_all_check_ins(self) -> list[CheckIn]:
        return deepcopy(self.check_ins)

    def get_check_in(self, id: EntityId) -> CheckIn:
        for check_in in self.check_ins:
            if check_in["id"] == id:
                return deepcopy(check_in)
        raise CheckInNotFoundError(f"No check-in with id {id}")


CHECK_IN_REPO = CheckInRepository()
