# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from laneline.model.layout import TimeWindow
from laneline.time import span_percent


def locate_marker(window: TimeWindow, now: pendulum.DateTime) -> Optional[float]:
    """Position of `now` in the window, or None when it falls outside."""
    if now < window.start or now > window.end:
        return None
    return span_percent(now, window.start, window.end)
