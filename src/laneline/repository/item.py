# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from laneline.model.work_item import WorkItemRecord


class ItemRepository:
    """
    Read-only access to a snapshot of work items stored as YAML.

    The file holds either a list of item mappings or a mapping with an
    `items` key containing that list.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._records: Optional[list[WorkItemRecord]] = None

    @property
    def records(self) -> list[WorkItemRecord]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        raw = load(self.path.read_text(), Loader=Loader)
        if raw is None:
            self._records = []
            return
        if isinstance(raw, dict):
            raw = raw.get("items") or []
        if not isinstance(raw, list):
            raise ValueError(f"{self.path} does not contain a list of work items")
        self._records = [
            cast(WorkItemRecord, record) for record in raw if isinstance(record, dict)
        ]

    def get_all_records(self) -> list[dict[str, Any]]:
        return [dict(record) for record in self.records]
