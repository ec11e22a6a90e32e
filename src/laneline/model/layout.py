# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping, Optional

import pendulum

from laneline.model.work_item import WorkItem
from laneline.model.zoom_level import ZoomLevel


@dataclass(frozen=True)
class Slot:
    label: str
    sub_label: str
    start: pendulum.DateTime
    end: pendulum.DateTime


@dataclass(frozen=True)
class TimeWindow:
    """
    Contiguous slots covering the half-open span [start, end).

    `end` is exclusive: a quarter window anchored in March 2025 ends at
    2025-07-01 00:00, so `last_day` (2025-06-30) is the final visible day.
    """

    zoom: ZoomLevel
    anchor: pendulum.Date
    slots: tuple[Slot, ...]

    @property
    def start(self) -> pendulum.DateTime:
        return self.slots[0].start

    @property
    def end(self) -> pendulum.DateTime:
        return self.slots[-1].end

    @property
    def last_day(self) -> pendulum.Date:
        return self.end.subtract(days=1).date()

    @property
    def total_seconds(self) -> float:
        return (self.end - self.start).total_seconds()


@dataclass(frozen=True)
class Group:
    category: str
    sub_category: Optional[str]
    items: tuple[WorkItem, ...]


@dataclass(frozen=True)
class CategoryGroup:
    category: str
    unassigned: Group
    sub_groups: tuple[Group, ...]

    @property
    def item_count(self) -> int:
        return len(self.unassigned.items) + sum(len(g.items) for g in self.sub_groups)


@dataclass(frozen=True)
class LaneAssignment:
    """Lane index of each item of a group, in the group's item order."""

    lanes: tuple[int, ...]
    lane_count: int


@dataclass(frozen=True)
class ItemStyle:
    icon: str
    at_risk: bool
    done: bool


@dataclass(frozen=True)
class PositionedItem:
    """
    An item placed in a row.

    `left` and `width` are percentages of the window. `left` is the offset of
    the clipped start, except for a bar widened to the minimum width near the
    window end: it is shifted left so that `left + width` stays within 100.
    """

    item: WorkItem
    left: float
    width: float
    lane_index: int
    top: int
    clipped_left: bool
    clipped_right: bool
    style: ItemStyle


class RowKind(StrEnum):
    CATEGORY = "category"
    SUB_CATEGORY = "sub_category"
    HEADER = "header"


@dataclass(frozen=True)
class Row:
    kind: RowKind
    label: str
    category: str
    sub_category: Optional[str]
    height: int
    lane_count: int
    item_count: int
    items: tuple[PositionedItem, ...]


@dataclass(frozen=True)
class FilterSummary:
    shown: int
    total: int

    @property
    def filtered(self) -> bool:
        return self.shown != self.total

    def __str__(self) -> str:
        if self.filtered:
            return f"Filtered: {self.shown} of {self.total} items"
        return f"Showing {self.shown} of {self.total} items"


@dataclass(frozen=True)
class LayoutSettings:
    row_unit_height: int = 36
    row_padding: int = 24
    min_row_height: int = 80
    lane_margin: int = 12
    header_row_height: int = 40
    min_width_percent: float = 0.5

    @classmethod
    def from_configuration(cls, config: Mapping[str, Any]) -> "LayoutSettings":
        defaults = cls()

        def value(key: str) -> Any:
            configured = config.get(key)
            return getattr(defaults, key) if configured is None else configured

        return cls(
            row_unit_height=value("row_unit_height"),
            row_padding=value("row_padding"),
            min_row_height=value("min_row_height"),
            lane_margin=value("lane_margin"),
            header_row_height=value("header_row_height"),
            min_width_percent=value("min_width_percent"),
        )


@dataclass(frozen=True)
class Layout:
    title: str
    window: TimeWindow
    rows: tuple[Row, ...]
    marker: Optional[float]
    summary: FilterSummary

    @property
    def slots(self) -> tuple[Slot, ...]:
        return self.window.slots

    def positioned_items(self) -> list[PositionedItem]:
        return [positioned for row in self.rows for positioned in row.items]
