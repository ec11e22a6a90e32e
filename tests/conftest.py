# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import pytest

from laneline import configuration
from laneline.model.work_item import Priority, Status, WorkItem
from laneline.repository.configuration import CONFIGURATION_REPO


def day(value: str) -> pendulum.DateTime:
    return pendulum.parse(value, tz="UTC")


def make_item(
    id: str,
    start: str,
    end: str,
    category: str = "Tech",
    sub_category: Optional[str] = None,
    owner: str = "Ada",
    priority: Priority = Priority.MEDIUM,
    status: Status = Status.IN_PROGRESS,
) -> WorkItem:
    return WorkItem(
        id=id,
        title=f"Item {id}",
        start=day(start),
        end=day(end),
        category=category,
        sub_category=sub_category,
        owner=owner,
        priority=priority,
        status=status,
    )


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_ITEMS_PATH", tmp_path / "items.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return config_path
