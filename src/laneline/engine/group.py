# SPDX-License-Identifier: MIT

from typing import Sequence

from laneline.model.layout import CategoryGroup, Group
from laneline.model.work_item import WorkItem


def group_items(items: Sequence[WorkItem]) -> list[CategoryGroup]:
    """
    Partition items by category, then by sub-category.

    Items without a sub-category land in the category's unassigned group.
    Categories and sub-categories are ordered ascending; items keep their
    input order inside each group.
    """
    by_category: dict[str, dict[str, list[WorkItem]]] = {}
    unassigned: dict[str, list[WorkItem]] = {}

    for item in items:
        by_category.setdefault(item.category, {})
        unassigned.setdefault(item.category, [])
        if item.sub_category:
            by_category[item.category].setdefault(item.sub_category, []).append(item)
        else:
            unassigned[item.category].append(item)

    groups = []
    for category in sorted(by_category):
        sub_groups = by_category[category]
        groups.append(
            CategoryGroup(
                category=category,
                unassigned=Group(
                    category=category,
                    sub_category=None,
                    items=tuple(unassigned[category]),
                ),
                sub_groups=tuple(
                    Group(
                        category=category,
                        sub_category=sub_category,
                        items=tuple(sub_groups[sub_category]),
                    )
                    for sub_category in sorted(sub_groups)
                ),
            )
        )
    return groups
