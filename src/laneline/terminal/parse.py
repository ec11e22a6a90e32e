# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from laneline.model.work_item import Priority
from laneline.model.zoom_level import ZoomLevel
from laneline.time import now_in, parse_calendar_date_str


def parse_date(date_param: Optional[str], tz: str) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date_param):
        try:
            return parse_calendar_date_str(date_param)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date_param):
        return now_in(tz).date().add(days=int(date_param))

    if date_param == "today" or date_param == "t":
        return now_in(tz).date()
    if date_param == "yesterday" or date_param == "y":
        return now_in(tz).date().subtract(days=1)
    if date_param == "tomorrow" or date_param == "o":
        return now_in(tz).date().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_now(now_param: Optional[str], tz: str) -> pendulum.DateTime:
    """
    Parse the instant used as "now".

    Args:
        now_param: An ISO 8601 datetime or date, or None for the wall clock
        tz: Timezone for values without an offset

    Raises:
        typer.BadParameter: If the value is not a datetime
    """
    if now_param is None:
        return now_in(tz)
    try:
        parsed = pendulum.parse(now_param, tz=tz)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid datetime: {e}")
    if not isinstance(parsed, pendulum.DateTime):
        raise typer.BadParameter("Incorrect datetime format")
    return parsed.in_tz(tz)


def parse_zoom(zoom_param: str) -> ZoomLevel:
    value = zoom_param.strip().lower()
    for zoom in ZoomLevel:
        if zoom.value == value or zoom.value[0] == value:
            return zoom
    raise typer.BadParameter("Zoom must be one of: month, quarter, year")


def parse_priority(priority_param: Optional[str]) -> Optional[Priority]:
    if priority_param is None:
        return None
    try:
        return Priority(priority_param.strip().title())
    except ValueError:
        raise typer.BadParameter(
            "Priority must be one of: " + ", ".join(p.value for p in Priority)
        )
