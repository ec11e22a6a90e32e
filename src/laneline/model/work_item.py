# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from enum import StrEnum
from typing import NotRequired, Optional, TypedDict

import pendulum


class Status(StrEnum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    DONE = "Done"
    BLOCKED = "Blocked"
    PAUSED = "Paused"


class Priority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class WorkItemRecord(TypedDict):
    """A work item as it arrives from the data store, dates still unparsed."""

    id: str
    title: NotRequired[str]
    start: str
    end: str
    category: str
    sub_category: NotRequired[Optional[str]]
    owner: NotRequired[str]
    priority: NotRequired[str]
    status: NotRequired[str]


@dataclass(frozen=True)
class WorkItem:
    id: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    category: str
    sub_category: Optional[str]
    owner: str
    priority: Priority
    status: Status
    title: str = ""

    def is_blocked_or_late(self, now: pendulum.DateTime) -> bool:
        overdue = now > self.end and self.status != Status.DONE
        return self.status == Status.BLOCKED or overdue
