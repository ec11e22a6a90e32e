# SPDX-License-Identifier: MIT

import random

import pendulum
import pytest

from conftest import make_item
from laneline.engine.layout import activate, compute_layout, compute_layout_from_records
from laneline.model.filter import TimelineFilter
from laneline.model.layout import LayoutSettings, RowKind
from laneline.model.work_item import Priority, Status, WorkItem
from laneline.model.zoom_level import ZoomLevel

NOW = pendulum.datetime(2025, 2, 10, 12, tz="UTC")
ANCHOR = pendulum.date(2025, 1, 15)


def _layout(items, filters=TimelineFilter(), zoom=ZoomLevel.QUARTER, now=NOW):
    return compute_layout(items, zoom, ANCHOR, filters, now)


def _random_items(seed: int) -> list[WorkItem]:
    rng = random.Random(seed)
    base = pendulum.datetime(2024, 11, 1, tz="UTC")
    items = []
    for index in range(60):
        start = base.add(days=rng.randint(0, 300))
        items.append(
            WorkItem(
                id=str(index),
                title=f"Item {index}",
                start=start,
                end=start.add(days=rng.randint(0, 90)),
                category=rng.choice(["Tech", "Sales", "Marketing"]),
                sub_category=rng.choice([None, "Alpha", "Beta"]),
                owner=rng.choice(["Ada", "Grace", "Linus"]),
                priority=rng.choice(list(Priority)),
                status=rng.choice(list(Status)),
            )
        )
    return items


class TestComputeLayout:
    """Tests for the whole layout pipeline."""

    def test_scenario_lanes(self):
        """Overlap forces a second lane; a freed lane is reused."""
        items = [
            make_item("A", "2025-01-01", "2025-01-10"),
            make_item("B", "2025-01-05", "2025-01-20"),
            make_item("C", "2025-01-11", "2025-01-15"),
        ]

        layout = _layout(items)

        (row,) = layout.rows
        lanes = {p.item.id: p.lane_index for p in row.items}
        assert lanes == {"A": 0, "B": 1, "C": 0}
        assert row.lane_count == 2
        assert row.height == 2 * 36 + 24
        assert row.kind == RowKind.CATEGORY

    def test_empty_collection_still_has_slots(self):
        """No items gives the full header and zero rows."""
        layout = _layout([])

        assert len(layout.slots) == 6
        assert layout.rows == ()
        assert str(layout.summary) == "Showing 0 of 0 items"

    def test_row_kinds(self):
        """Categories produce category, header and sub-category rows."""
        items = [
            make_item("1", "2025-01-01", "2025-01-10", category="Tech"),
            make_item("2", "2025-01-01", "2025-01-10", category="Tech", sub_category="Web"),
            make_item("3", "2025-01-01", "2025-01-10", category="Sales", sub_category="EMEA"),
            make_item("4", "2025-01-01", "2025-01-10", category="Sales", sub_category="APAC"),
            make_item("5", "2025-01-01", "2025-01-10", category="Ops"),
        ]

        layout = _layout(items)

        assert [(row.kind, row.label) for row in layout.rows] == [
            (RowKind.CATEGORY, "Ops"),
            (RowKind.HEADER, "Sales"),
            (RowKind.SUB_CATEGORY, "APAC"),
            (RowKind.SUB_CATEGORY, "EMEA"),
            (RowKind.CATEGORY, "Tech"),
            (RowKind.SUB_CATEGORY, "Web"),
        ]
        header = layout.rows[1]
        assert header.item_count == 2
        assert header.height == LayoutSettings().header_row_height
        assert header.items == ()

    def test_filtered_items_do_not_take_lanes(self):
        """Excluded items are removed before packing."""
        items = [
            make_item("A", "2025-01-01", "2025-01-20", owner="Ada"),
            make_item("B", "2025-01-05", "2025-01-25", owner="Grace"),
        ]

        layout = _layout(items, TimelineFilter(owner="Grace"))

        (row,) = layout.rows
        assert row.lane_count == 1
        assert row.items[0].item.id == "B"
        assert row.items[0].lane_index == 0
        assert layout.summary.filtered

    def test_invisible_items_count_but_are_not_positioned(self):
        """Items outside the window stay in the row count only."""
        items = [
            make_item("A", "2025-01-01", "2025-01-20"),
            make_item("B", "2025-09-01", "2025-09-20"),
        ]

        (row,) = _layout(items).rows

        assert row.item_count == 2
        assert [p.item.id for p in row.items] == ["A"]

    def test_marker(self):
        """The now marker is present inside the window and omitted outside."""
        assert _layout([]).marker is not None
        later = pendulum.datetime(2026, 1, 1, tz="UTC")
        assert _layout([], now=later).marker is None

    def test_title(self):
        """The layout carries the period title."""
        assert _layout([]).title == "Q1 2025"
        assert _layout([], zoom=ZoomLevel.YEAR).title == "2025"

    def test_records_with_bad_dates_are_skipped(self):
        """One unparseable record does not stop the layout."""
        records = [
            {"id": "1", "start": "2025-01-01", "end": "2025-01-10", "category": "Tech"},
            {"id": "2", "start": "2025-13-45", "end": "2025-01-10", "category": "Tech"},
        ]

        layout = compute_layout_from_records(
            records, ZoomLevel.QUARTER, ANCHOR, TimelineFilter(), NOW
        )

        assert [p.item.id for p in layout.positioned_items()] == ["1"]

    def test_duplicate_ids_do_not_share_a_lane(self):
        """Overlapping records with the same id are stacked in lanes 0 and 1."""
        records = [
            {"id": "dup", "start": "2025-01-01", "end": "2025-01-20", "category": "Tech"},
            {"id": "dup", "start": "2025-01-05", "end": "2025-01-25", "category": "Tech"},
        ]

        layout = compute_layout_from_records(
            records, ZoomLevel.QUARTER, ANCHOR, TimelineFilter(), NOW
        )

        (row,) = layout.rows
        assert sorted(p.lane_index for p in row.items) == [0, 1]
        assert sorted(p.top for p in row.items) == [12, 12 + 36]
        assert row.lane_count == 2

    def test_custom_settings(self):
        """Geometry follows the supplied settings."""
        items = [
            make_item("A", "2025-01-01", "2025-01-10"),
            make_item("B", "2025-01-05", "2025-01-20"),
        ]
        settings = LayoutSettings(row_unit_height=10, row_padding=5, min_row_height=0)

        layout = compute_layout(
            items, ZoomLevel.QUARTER, ANCHOR, TimelineFilter(), NOW, settings
        )

        (row,) = layout.rows
        assert row.height == 25
        assert [p.top for p in row.items] == [12, 22]


class TestLayoutProperties:
    """Property checks over generated snapshots."""

    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("zoom", list(ZoomLevel))
    def test_coordinates_in_bounds(self, seed, zoom):
        """Every bar lies within the window and respects the width floor."""
        layout = _layout(_random_items(seed), zoom=zoom)

        for positioned in layout.positioned_items():
            assert 0 <= positioned.left <= 100
            assert positioned.width >= LayoutSettings().min_width_percent
            assert positioned.left + positioned.width <= 100 + 1e-9

    @pytest.mark.parametrize("seed", range(10))
    def test_no_overlap_within_rows(self, seed):
        """Positioned items sharing a lane in a row never overlap."""
        layout = _layout(_random_items(seed), zoom=ZoomLevel.YEAR)

        for row in layout.rows:
            for a in row.items:
                for b in row.items:
                    if a is b or a.lane_index != b.lane_index:
                        continue
                    assert a.item.end <= b.item.start or b.item.end <= a.item.start

    @pytest.mark.parametrize("seed", range(5))
    def test_idempotent(self, seed):
        """The same inputs give the same layout."""
        items = _random_items(seed)
        filters = TimelineFilter(blocked_or_late=True)

        assert _layout(items, filters) == _layout(items, filters)


class TestActivate:
    """Tests for the activation callback."""

    def test_callback_receives_item_id(self):
        """Selecting a rendered item invokes the callback with its id."""
        layout = _layout([make_item("A", "2025-01-01", "2025-01-10")])
        selected = []

        assert activate(layout, "A", selected.append)
        assert selected == ["A"]

    def test_unknown_item(self):
        """Ids not on the timeline do not invoke the callback."""
        layout = _layout([make_item("A", "2025-09-01", "2025-09-10")])
        selected = []

        assert not activate(layout, "A", selected.append)
        assert selected == []
