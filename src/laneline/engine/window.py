# SPDX-License-Identifier: MIT

import pendulum

from laneline.model.layout import Slot, TimeWindow
from laneline.model.zoom_level import ZoomLevel
from laneline.time import start_of_day

YEAR_SLOT_COUNT = 12
QUARTER_SLOT_COUNT = 6


def generate_window(zoom: ZoomLevel, anchor: pendulum.Date, tz: str) -> TimeWindow:
    """
    Generate the contiguous slots visible for a zoom level around an anchor.

    - year: 12 monthly slots from January of the anchor's year
    - quarter: 6 monthly slots from the first month of the anchor's quarter
    - month: one slot per calendar day of the anchor's month

    Args:
        zoom: The zoom level
        anchor: Any date inside the period to display
        tz: Timezone the slot boundaries are expressed in

    Returns:
        The time window; its span is [first slot start, last slot end)
    """
    match zoom:
        case ZoomLevel.YEAR:
            window_start = pendulum.datetime(anchor.year, 1, 1, tz=tz)
            slots = _month_slots(window_start, YEAR_SLOT_COUNT, "MMM")
        case ZoomLevel.QUARTER:
            quarter_start_month = (anchor.month - 1) // 3 * 3 + 1
            window_start = pendulum.datetime(anchor.year, quarter_start_month, 1, tz=tz)
            slots = _month_slots(window_start, QUARTER_SLOT_COUNT, "MMMM")
        case ZoomLevel.MONTH:
            window_start = pendulum.datetime(anchor.year, anchor.month, 1, tz=tz)
            slots = _day_slots(window_start, tz)
        case _:
            raise ValueError(f"Unknown zoom level: {zoom}")

    return TimeWindow(zoom=zoom, anchor=anchor, slots=tuple(slots))


def _month_slots(
    window_start: pendulum.DateTime, count: int, label_format: str
) -> list[Slot]:
    slots = []
    current = window_start
    for _ in range(count):
        next_start = current.add(months=1)
        slots.append(
            Slot(
                label=current.format(label_format),
                sub_label=str(current.year),
                start=current,
                end=next_start,
            )
        )
        current = next_start
    return slots


def _day_slots(window_start: pendulum.DateTime, tz: str) -> list[Slot]:
    slots = []
    for day in range(1, window_start.days_in_month + 1):
        current = start_of_day(window_start.date().replace(day=day), tz)
        slots.append(
            Slot(
                label=str(day),
                sub_label=current.format("dddd")[0],
                start=current,
                end=start_of_day(current.date().add(days=1), tz),
            )
        )
    return slots


def step_anchor(zoom: ZoomLevel, anchor: pendulum.Date, steps: int) -> pendulum.Date:
    """Move the anchor by whole years, quarters or months."""
    match zoom:
        case ZoomLevel.YEAR:
            return anchor.add(years=steps)
        case ZoomLevel.QUARTER:
            return anchor.add(months=3 * steps)
        case ZoomLevel.MONTH:
            return anchor.add(months=steps)
    raise ValueError(f"Unknown zoom level: {zoom}")


def reset_anchor(now: pendulum.DateTime) -> pendulum.Date:
    return now.date()


def period_title(zoom: ZoomLevel, anchor: pendulum.Date) -> str:
    match zoom:
        case ZoomLevel.YEAR:
            return str(anchor.year)
        case ZoomLevel.QUARTER:
            return f"Q{(anchor.month - 1) // 3 + 1} {anchor.year}"
        case ZoomLevel.MONTH:
            return anchor.format("MMMM YYYY")
    raise ValueError(f"Unknown zoom level: {zoom}")
