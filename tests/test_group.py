# SPDX-License-Identifier: MIT

from conftest import make_item
from laneline.engine.group import group_items


class TestGroupItems:
    """Tests for the category / sub-category hierarchy."""

    def test_categories_and_sub_categories_are_sorted(self):
        """Groups come out in ascending order regardless of input order."""
        items = [
            make_item("1", "2025-01-01", "2025-01-05", category="Sales", sub_category="EMEA"),
            make_item("2", "2025-01-01", "2025-01-05", category="Marketing", sub_category="Social"),
            make_item("3", "2025-01-01", "2025-01-05", category="Sales", sub_category="APAC"),
            make_item("4", "2025-01-01", "2025-01-05", category="Marketing", sub_category="Events"),
        ]

        groups = group_items(items)

        assert [group.category for group in groups] == ["Marketing", "Sales"]
        assert [g.sub_category for g in groups[0].sub_groups] == ["Events", "Social"]
        assert [g.sub_category for g in groups[1].sub_groups] == ["APAC", "EMEA"]

    def test_missing_sub_category_goes_to_unassigned(self):
        """Items without a sub-category are kept in the unassigned group."""
        items = [
            make_item("1", "2025-01-01", "2025-01-05", category="Tech"),
            make_item("2", "2025-01-01", "2025-01-05", category="Tech", sub_category="Web"),
            make_item("3", "2025-01-01", "2025-01-05", category="Tech"),
        ]

        (group,) = group_items(items)

        assert [item.id for item in group.unassigned.items] == ["1", "3"]
        assert group.unassigned.sub_category is None
        assert [item.id for item in group.sub_groups[0].items] == ["2"]
        assert group.item_count == 3

    def test_empty_input(self):
        """No items means no groups."""
        assert group_items([]) == []
