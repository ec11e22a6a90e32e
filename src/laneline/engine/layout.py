# SPDX-License-Identifier: MIT

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

import pendulum

from laneline.engine.filter import filter_items, filter_summary
from laneline.engine.group import group_items
from laneline.engine.items import parse_items
from laneline.engine.lane import pack_lanes, row_height
from laneline.engine.marker import locate_marker
from laneline.engine.position import position_item
from laneline.engine.window import generate_window, period_title
from laneline.model.filter import TimelineFilter
from laneline.model.layout import (
    Group,
    Layout,
    LayoutSettings,
    PositionedItem,
    Row,
    RowKind,
    TimeWindow,
)
from laneline.model.work_item import WorkItem
from laneline.model.zoom_level import ZoomLevel

logger = logging.getLogger(__name__)


def compute_layout(
    items: Sequence[WorkItem],
    zoom: ZoomLevel,
    anchor: pendulum.Date,
    filters: TimelineFilter,
    now: pendulum.DateTime,
    settings: Optional[LayoutSettings] = None,
    tz: str = "UTC",
) -> Layout:
    """
    Lay out work items on a timeline.

    The window is generated from the zoom level and anchor, items are
    filtered, grouped by category and sub-category, packed into lanes per
    group and finally mapped onto the window. The result depends only on the
    arguments.

    Args:
        items: Snapshot of work items
        zoom: Zoom level of the window
        anchor: Any date inside the period to display
        filters: Quick filters, all combined with AND
        now: Current instant, used for the marker and blocked/late checks
        settings: Row geometry (defaults to LayoutSettings())
        tz: Timezone the window boundaries are expressed in

    Returns:
        The window, the ordered rows and the optional now-marker position
    """
    if settings is None:
        settings = LayoutSettings()

    window = generate_window(zoom, anchor, tz)
    filtered = filter_items(items, filters, now)
    groups = group_items(filtered)
    logger.debug(
        "Laying out %d of %d items in %d categories",
        len(filtered),
        len(items),
        len(groups),
    )

    rows: list[Row] = []
    for category_group in groups:
        has_sub_groups = len(category_group.sub_groups) > 0
        if not has_sub_groups or category_group.unassigned.items:
            rows.append(
                _build_row(
                    RowKind.CATEGORY, category_group.unassigned, window, now, settings
                )
            )
        else:
            rows.append(
                Row(
                    kind=RowKind.HEADER,
                    label=category_group.category,
                    category=category_group.category,
                    sub_category=None,
                    height=settings.header_row_height,
                    lane_count=0,
                    item_count=category_group.item_count,
                    items=(),
                )
            )
        for sub_group in category_group.sub_groups:
            rows.append(
                _build_row(RowKind.SUB_CATEGORY, sub_group, window, now, settings)
            )

    return Layout(
        title=period_title(zoom, anchor),
        window=window,
        rows=tuple(rows),
        marker=locate_marker(window, now),
        summary=filter_summary(filtered, items),
    )


def compute_layout_from_records(
    records: Iterable[Mapping[str, Any]],
    zoom: ZoomLevel,
    anchor: pendulum.Date,
    filters: TimelineFilter,
    now: pendulum.DateTime,
    settings: Optional[LayoutSettings] = None,
    tz: str = "UTC",
) -> Layout:
    """Parse raw records, skipping unparseable ones, then lay them out."""
    return compute_layout(
        parse_items(records, tz), zoom, anchor, filters, now, settings, tz
    )


def _build_row(
    kind: RowKind,
    group: Group,
    window: TimeWindow,
    now: pendulum.DateTime,
    settings: LayoutSettings,
) -> Row:
    assignment = pack_lanes(group.items)

    positioned: list[PositionedItem] = []
    for item, lane_index in sorted(
        zip(group.items, assignment.lanes),
        key=lambda pair: (pair[0].start, pair[0].end, pair[0].id, pair[1]),
    ):
        positioned_item = position_item(item, lane_index, window, now, settings)
        if positioned_item is not None:
            positioned.append(positioned_item)

    return Row(
        kind=kind,
        label=group.sub_category or group.category,
        category=group.category,
        sub_category=group.sub_category,
        height=row_height(assignment.lane_count, settings),
        lane_count=assignment.lane_count,
        item_count=len(group.items),
        items=tuple(positioned),
    )


def activate(layout: Layout, item_id: str, callback: Callable[[str], Any]) -> bool:
    """
    Invoke `callback` with `item_id` if that item is rendered in the layout.

    Returns:
        True if the callback was invoked
    """
    for positioned in layout.positioned_items():
        if positioned.item.id == item_id:
            callback(item_id)
            return True
    return False
