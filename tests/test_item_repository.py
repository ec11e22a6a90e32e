# SPDX-License-Identifier: MIT

import pytest

from laneline.repository.item import ItemRepository

ITEMS_YAML = """
items:
  - id: "1"
    title: Payments revamp
    start: 2025-01-06
    end: 2025-03-28
    category: Tech
    sub_category: Platform
  - id: "2"
    start: "2025-02-01"
    end: "2025-02-14"
    category: Sales
"""


class TestItemRepository:
    """Tests for reading the work item snapshot."""

    def test_items_mapping(self, tmp_path):
        """A mapping with an items key is read."""
        path = tmp_path / "items.yaml"
        path.write_text(ITEMS_YAML)

        records = ItemRepository(path).records

        assert [record["id"] for record in records] == ["1", "2"]

    def test_plain_list(self, tmp_path):
        """A top-level list is read as the items."""
        path = tmp_path / "items.yaml"
        path.write_text('- {id: "1", start: 2025-01-01, end: 2025-01-02, category: Tech}\n')

        assert len(ItemRepository(path).get_all_records()) == 1

    def test_empty_file(self, tmp_path):
        """An empty file is an empty snapshot."""
        path = tmp_path / "items.yaml"
        path.write_text("")

        assert ItemRepository(path).records == []

    def test_invalid_top_level(self, tmp_path):
        """A scalar document is rejected."""
        path = tmp_path / "items.yaml"
        path.write_text("just a string\n")

        with pytest.raises(ValueError):
            ItemRepository(path).records
