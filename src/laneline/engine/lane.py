# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum

from laneline.model.layout import LaneAssignment, LayoutSettings
from laneline.model.work_item import WorkItem


def pack_lanes(items: Sequence[WorkItem]) -> LaneAssignment:
    """
    Assign each item of one group to a lane so that items sharing a lane
    never overlap as half-open intervals [start, end).

    Items are placed by start ascending, ties broken by end descending so the
    longer item takes the lower lane. Each item goes into the lowest lane
    whose last end is at or before its start, or into a new lane.

    The end-descending tie-break is a heuristic: with equal starts it can
    use more lanes than the maximum concurrency of the group. The lane count
    is never lower than that concurrency.

    An item whose end precedes its start occupies a single instant.

    Returns:
        Lane indices in the same order as `items`
    """
    ordered = sorted(
        range(len(items)),
        key=lambda position: (
            items[position].start,
            -_end(items[position]).int_timestamp,
        ),
    )

    lane_ends: list[pendulum.DateTime] = []
    lanes = [0] * len(items)
    for position in ordered:
        item = items[position]
        end = _end(item)
        for index, lane_end in enumerate(lane_ends):
            if lane_end <= item.start:
                lane_ends[index] = end
                lanes[position] = index
                break
        else:
            lanes[position] = len(lane_ends)
            lane_ends.append(end)

    return LaneAssignment(lanes=tuple(lanes), lane_count=len(lane_ends))


def _end(item: WorkItem) -> pendulum.DateTime:
    return max(item.start, item.end)


def max_concurrency(items: Sequence[WorkItem]) -> int:
    """The largest number of items active at any single instant."""
    events: list[tuple[pendulum.DateTime, int]] = []
    for item in items:
        end = _end(item)
        if end > item.start:
            events.append((item.start, 1))
            events.append((end, -1))
    # ends sort before starts at the same instant (half-open intervals)
    events.sort(key=lambda event: (event[0], event[1]))

    active = 0
    peak = 0
    for _, delta in events:
        active += delta
        peak = max(peak, active)
    return peak


def row_height(lane_count: int, settings: LayoutSettings) -> int:
    height = max(lane_count, 1) * settings.row_unit_height + settings.row_padding
    return max(height, settings.min_row_height)
