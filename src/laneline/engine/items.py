# SPDX-License-Identifier: MIT

import logging
from typing import Any, Iterable, Mapping, Optional

from laneline.model.work_item import Priority, Status, WorkItem
from laneline.time import parse_calendar_date

logger = logging.getLogger(__name__)


def parse_items(records: Iterable[Mapping[str, Any]], tz: str) -> list[WorkItem]:
    """
    Convert raw data store records into immutable work items.

    A record whose dates cannot be parsed is skipped and logged; the
    remaining records are still converted.
    """
    items: list[WorkItem] = []
    for record in records:
        item = parse_item(record, tz)
        if item is not None:
            items.append(item)
    return items


def parse_item(record: Mapping[str, Any], tz: str) -> Optional[WorkItem]:
    raw_id = record.get("id")
    item_id = str(raw_id).strip() if raw_id is not None else ""
    if not item_id:
        logger.warning("Skipping work item without an id: %r", record)
        return None

    try:
        start = parse_calendar_date(record.get("start"), tz)
        end = parse_calendar_date(record.get("end"), tz)
    except ValueError as e:
        logger.warning("Skipping work item %r: %s", item_id, e)
        return None

    sub_category = record.get("sub_category")
    return WorkItem(
        id=item_id,
        title=str(record.get("title") or ""),
        start=start,
        end=end,
        category=str(record.get("category") or ""),
        sub_category=str(sub_category) if sub_category else None,
        owner=str(record.get("owner") or ""),
        priority=_parse_priority(record.get("priority")),
        status=_parse_status(record.get("status")),
    )


def _parse_priority(value: Any) -> Priority:
    if value is None:
        return Priority.MEDIUM
    try:
        return Priority(str(value).strip().title())
    except ValueError:
        logger.warning("Unknown priority %r, using %s", value, Priority.MEDIUM)
        return Priority.MEDIUM


def _parse_status(value: Any) -> Status:
    if value is None:
        return Status.NOT_STARTED
    try:
        return Status(str(value).strip().title())
    except ValueError:
        logger.warning("Unknown status %r, using %s", value, Status.NOT_STARTED)
        return Status.NOT_STARTED
