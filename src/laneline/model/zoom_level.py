# SPDX-License-Identifier: MIT

from enum import StrEnum


class ZoomLevel(StrEnum):
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
