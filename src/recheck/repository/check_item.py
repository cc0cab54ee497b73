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
from recheck.model.check_item import CheckItem
from recheck.model.entity_id import EntityId, generate_entity_id


class ItemNotFoundError(LookupError):
    """Raised when no stored item has the requested id."""

    pass


class CheckItemRepository:
    def __init__(self) -> None:
        self._items: Optional[list[CheckItem]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def items(self) -> list[CheckItem]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        self._items = []
        if not configuration.DATA_ITEMS_DIR.is_dir():
            return
        for file_path in configuration.DATA_ITEMS_DIR.iterdir():
            if file_path.suffix != ".yaml" or file_path.name == ".gitkeep":
                continue
            raw_item = load(file_path.read_text(), Loader=Loader)
            if raw_item is not None:
                self._items.append(self.__convert_item_for_deserialization(raw_item))
        logger.debug("Loaded {} items", len(self._items))

    def __save_data(self) -> None:
        configuration.DATA_ITEMS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for item in self.items:
            if item["id"] in self._dirty_ids:
                serializable_item = self.__convert_item_for_serialization(
                    deepcopy(item)
                )
                file_path = configuration.DATA_ITEMS_DIR / f"{item['id']}.yaml"
                file_path.write_text(dump(serializable_item, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_ITEMS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        logger.debug(
            "Flushed {} items, removed {}", len(self._dirty_ids), len(self._deleted_ids)
        )
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._items is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_item_for_serialization(self, item: CheckItem) -> dict[str, Any]:
        serializable_item = cast(dict[str, Any], item)
        serializable_item["created"] = time.datetime_to_iso_str(
            serializable_item["created"]
        )
        serializable_item["updated"] = time.datetime_to_iso_str(
            serializable_item["updated"]
        )
        return serializable_item

    def __convert_item_for_deserialization(self, item: dict[str, Any]) -> CheckItem:
        deserializable_item = item
        deserializable_item["created"] = time.datetime_from_str(
            deserializable_item["created"]
        )
        deserializable_item["updated"] = time.datetime_from_str(
            deserializable_item["updated"]
        )
        deserializable_item.setdefault("icon", None)
        deserializable_item.setdefault("archived", False)
        return cast(CheckItem, deserializable_item)

    def __find(self, id: EntityId) -> CheckItem:
        for item in self.items:
            if item["id"] == id:
                return item
        raise ItemNotFoundError(f"No item with id {id}")

    def __next_sort_order(self) -> int:
        return max((item["sort_order"] for item in self.items), default=-1) + 1

    def save_new_item(self, item: CheckItem) -> EntityId:
        self.is_dirty = True

        item["id"] = generate_entity_id()
        item["sort_order"] = self.__next_sort_order()

        self.items.append(item)
        self._dirty_ids.add(item["id"])
        logger.info("Added item {} ({})", item["name"], item["id"])

        return item["id"]

    def modify_item(
        self,
        id: EntityId,
        name: Optional[str] = None,
        icon: Optional[str] = None,
        sort_order: Optional[int] = None,
        archived: Optional[bool] = None,
        remove_icon: bool = False,
    ) -> None:
        item = self.__find(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        item["updated"] = time.now_utc()
        if name is not None:
            item["name"] = name
        if icon is not None:
            item["icon"] = icon
        if sort_order is not None:
            item["sort_order"] = sort_order
        if archived is not None:
            item["archived"] = archived

        if remove_icon:
            item["icon"] = None

    def move_item(self, id: EntityId, position: int) -> None:
        """
        Move an item to a 0-based position among the active items and
        renumber the sort order of every item so it stays contiguous.
        """
        moving = self.__find(id)
        active = [
            item
            for item in sorted(self.items, key=lambda i: i["sort_order"])
            if not item["archived"] and item["id"] != id
        ]
        archived = [
            item
            for item in sorted(self.items, key=lambda i: i["sort_order"])
            if item["archived"] and item["id"] != id
        ]
        position = max(0, min(position, len(active)))
        active.insert(position, moving)

        for sort_order, item in enumerate(active + archived):
            if item["sort_order"] != sort_order:
                self.modify_item(cast(EntityId, item["id"]), sort_order=sort_order)

    def delete_item(self, id: EntityId) -> None:
        """Remove the item entirely. Its check-ins remain and show as deleted."""
        item = self.__find(id)

        self.is_dirty = True
        self.items.remove(item)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        logger.info("Deleted item {} ({})", item["name"], id)

    def fetch_items(self, include_archived: bool) -> list[CheckItem]:
        items = [
            item for item in self.items if include_archived or not item["archived"]
        ]
        return deepcopy(sorted(items, key=lambda item: item["sort_order"]))

    def get_item(self, id: EntityId) -> CheckItem:
        return deepcopy(self.__find(id))


CHECK_ITEM_REPO = CheckItemRepository()
