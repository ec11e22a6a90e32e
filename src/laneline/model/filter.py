# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Optional

from laneline.model.work_item import Priority


@dataclass(frozen=True)
class TimelineFilter:
    """
    Quick filters applied before grouping. Every field left at its default
    matches all items; a default-constructed filter is the cleared state.
    """

    owner: Optional[str] = None
    sub_category: Optional[str] = None
    priority: Optional[Priority] = None
    blocked_or_late: bool = False

    def is_active(self) -> bool:
        return (
            self.owner is not None
            or self.sub_category is not None
            or self.priority is not None
            or self.blocked_or_late
        )
