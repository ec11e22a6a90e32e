# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from laneline.engine.style import item_style
from laneline.model.layout import LayoutSettings, PositionedItem, TimeWindow
from laneline.model.work_item import WorkItem
from laneline.time import span_percent


def is_visible(item: WorkItem, window: TimeWindow) -> bool:
    return not (item.end < window.start or item.start > window.end)


def position_item(
    item: WorkItem,
    lane_index: int,
    window: TimeWindow,
    now: pendulum.DateTime,
    settings: LayoutSettings,
) -> Optional[PositionedItem]:
    """
    Map an item onto the window as percentages of the window span.

    Items entirely outside the window are not positioned. The width never
    drops below the configured floor, so zero-length and reversed ranges stay
    visible; such a floored bar is shifted left when it would overflow the
    right edge.

    Returns:
        The positioned item, or None if the item is not visible
    """
    if not is_visible(item, window):
        return None

    effective_start = max(item.start, window.start)
    effective_end = min(item.end, window.end)

    left = span_percent(effective_start, window.start, window.end)
    width = max(
        settings.min_width_percent,
        span_percent(effective_end, window.start, window.end) - left,
    )
    left = min(left, 100 - width)

    return PositionedItem(
        item=item,
        left=left,
        width=width,
        lane_index=lane_index,
        top=settings.lane_margin + lane_index * settings.row_unit_height,
        clipped_left=item.start < window.start,
        clipped_right=item.end > window.end,
        style=item_style(item, now),
    )
