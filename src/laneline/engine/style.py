# SPDX-License-Identifier: MIT

import pendulum

from laneline.model.layout import ItemStyle
from laneline.model.work_item import Priority, Status, WorkItem

PRIORITY_ICONS = {
    Priority.CRITICAL: "🔥",
    Priority.HIGH: "3️⃣",
    Priority.MEDIUM: "2️⃣",
    Priority.LOW: "1️⃣",
}
AT_RISK_ICON = "⚠️"
DONE_ICON = "✅"


def item_style(item: WorkItem, now: pendulum.DateTime) -> ItemStyle:
    at_risk = item.is_blocked_or_late(now)
    done = item.status == Status.DONE

    icon = PRIORITY_ICONS.get(item.priority, PRIORITY_ICONS[Priority.MEDIUM])
    if at_risk:
        icon = AT_RISK_ICON
    if done:
        icon = DONE_ICON

    return ItemStyle(icon=icon, at_risk=at_risk, done=done)
