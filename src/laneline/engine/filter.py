# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Sequence

import pendulum

from laneline.model.filter import TimelineFilter
from laneline.model.layout import FilterSummary
from laneline.model.work_item import Priority, WorkItem


def generate_filter(filter: TimelineFilter, now: pendulum.DateTime) -> "Predicate":
    """Build the conjunction of every active quick filter."""
    filter_obj = And()
    if filter.owner is not None:
        filter_obj.add_predicate(OwnerEquals(filter.owner))
    if filter.sub_category is not None:
        filter_obj.add_predicate(SubCategoryEquals(filter.sub_category))
    if filter.priority is not None:
        filter_obj.add_predicate(PriorityEquals(filter.priority))
    if filter.blocked_or_late:
        filter_obj.add_predicate(BlockedOrLate(now))
    return filter_obj


def filter_items(
    items: Sequence[WorkItem], filter: TimelineFilter, now: pendulum.DateTime
) -> list[WorkItem]:
    return generate_filter(filter, now).filter(items)


class Predicate(ABC):
    @abstractmethod
    def include(self, item: WorkItem) -> bool: ...

    def filter(self, items: Sequence[WorkItem]) -> list[WorkItem]:
        return [item for item in items if self.include(item)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, item: WorkItem) -> bool:
        return all(predicate.include(item) for predicate in self.predicates)


class OwnerEquals(Predicate):
    def __init__(self, owner: str) -> None:
        self.owner = owner

    def include(self, item: WorkItem) -> bool:
        return item.owner == self.owner


class SubCategoryEquals(Predicate):
    def __init__(self, sub_category: str) -> None:
        self.sub_category = sub_category

    def include(self, item: WorkItem) -> bool:
        return item.sub_category == self.sub_category


class PriorityEquals(Predicate):
    def __init__(self, priority: Priority) -> None:
        self.priority = priority

    def include(self, item: WorkItem) -> bool:
        return item.priority == self.priority


class BlockedOrLate(Predicate):
    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def include(self, item: WorkItem) -> bool:
        return item.is_blocked_or_late(self.now)


def filter_options(items: Sequence[WorkItem]) -> tuple[list[str], list[str]]:
    """
    Collect the values the owner and sub-category filters can take.

    Returns:
        Sorted unique owners and sorted unique sub-categories
    """
    owners = {item.owner for item in items if item.owner}
    sub_categories = {item.sub_category for item in items if item.sub_category}
    return sorted(owners), sorted(sub_categories)


def filter_summary(shown: Sequence[WorkItem], total: Sequence[WorkItem]) -> FilterSummary:
    return FilterSummary(shown=len(shown), total=len(total))
