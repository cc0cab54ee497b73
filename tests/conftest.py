# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable, Optional

import pendulum
import pytest

from recheck import configuration
from recheck.model.check_in import CheckIn
from recheck.model.check_item import CheckItem
from recheck.model.entity_type import EntityType
from recheck.repository.check_in import CHECK_IN_REPO
from recheck.repository.check_item import CHECK_ITEM_REPO
from recheck.repository.configuration import CONFIGURATION_REPO
from recheck.repository.id_map import ID_MAP_REPO
from recheck.time import CivilTime

# Wednesday 2025-03-12 12:00 in UTC+9
NOW = pendulum.datetime(2025, 3, 12, 3, 0, 0, tz="UTC")


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every config and data path at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_path / "id_map.yaml")
    monkeypatch.setattr(configuration, "DATA_ITEMS_DIR", data_path / "items")
    monkeypatch.setattr(configuration, "DATA_CHECK_INS_DIR", data_path / "check_ins")
    monkeypatch.setattr(configuration, "DATA_PHOTOS_DIR", data_path / "photos")

    for repository in (CONFIGURATION_REPO, ID_MAP_REPO, CHECK_ITEM_REPO, CHECK_IN_REPO):
        repository.__init__()  # type: ignore[misc]

    return tmp_path


@pytest.fixture
def now() -> pendulum.DateTime:
    return NOW


@pytest.fixture
def civil() -> CivilTime:
    return CivilTime(9)


@pytest.fixture
def make_item() -> Callable[..., CheckItem]:
    def _make_item(
        id: str,
        name: str,
        icon: Optional[str] = None,
        sort_order: int = 0,
        archived: bool = False,
    ) -> CheckItem:
        return {
            "id": id,
            "entity_type": EntityType.ITEM,
            "name": name,
            "icon": icon,
            "sort_order": sort_order,
            "archived": archived,
            "created": NOW,
            "updated": NOW,
        }

    return _make_item


@pytest.fixture
def make_event() -> Callable[..., CheckIn]:
    def _make_event(
        item_id: str,
        occurred_at: pendulum.DateTime,
        photo_ref: Optional[str] = None,
    ) -> CheckIn:
        return {
            "id": None,
            "entity_type": EntityType.CHECK_IN,
            "item_id": item_id,
            "occurred_at": occurred_at,
            "photo_ref": photo_ref,
            "created": occurred_at,
        }

    return _make_event
