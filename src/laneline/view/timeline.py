# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from laneline.color import AT_RISK_COLOR, DONE_COLOR, MARKER_COLOR, get_category_color
from laneline.model.layout import Layout, PositionedItem, Row, RowKind, TimeWindow
from laneline.time import date_to_display_str, span_percent


def timeline_view(
    layout: Layout,
    console: Optional[Console] = None,
    left_column_width: int = 40,
) -> None:
    """
    Print a layout as a terminal timeline.

    Args:
        layout: The computed layout
        console: Console to print to (defaults to a new Console)
        left_column_width: Width of the left column for row labels
    """
    if console is None:
        console = Console()

    date_range_str = (
        f"{date_to_display_str(layout.window.start)} to "
        f"{layout.window.last_day.format('YYYY-MM-DD')}"
    )
    console.print(
        f"\n[bold]{layout.title}[/bold] {date_range_str} "
        f"(zoom: {layout.window.zoom})"
    )
    console.print(f"[dim]{layout.summary}[/dim]\n")

    chart = build_timeline(layout, console.width, left_column_width)
    console.print(Padding(chart, (0, 0, 1, 0)))

    if len(layout.rows) == 0:
        console.print("[dim]No work items to display[/dim]\n")


def build_timeline(layout: Layout, width: int, left_column_width: int = 40) -> Group:
    """
    Build the header lines and one block of lines per row.

    Each lane of a row is one line. Bars are drawn from ◄ to ►; an edge
    clipped by the window is drawn as a plain continuation instead.
    """
    available_width = max(width - left_column_width, 1)
    marker_column = _marker_column(layout.marker, available_width)

    chart_elements: list[Text] = []
    chart_elements.extend(
        _build_header(layout.window, available_width, left_column_width)
    )
    chart_elements.append(Text("─" * (left_column_width + available_width), style="dim"))

    for row in layout.rows:
        chart_elements.extend(
            _build_row(row, available_width, left_column_width, marker_column)
        )

    return Group(*chart_elements)


def _to_column(percent: float, available_width: int) -> int:
    return min(max(int(math.floor(percent / 100 * available_width)), 0), available_width)


def _marker_column(marker: Optional[float], available_width: int) -> Optional[int]:
    if marker is None:
        return None
    return min(_to_column(marker, available_width), available_width - 1)


def _build_header(
    window: TimeWindow, available_width: int, left_column_width: int
) -> list[Text]:
    labels = [" "] * available_width
    sub_labels = [" "] * available_width

    next_free = 0
    for slot in window.slots:
        column = _to_column(
            span_percent(slot.start, window.start, window.end), available_width
        )
        if column < next_free:
            continue
        text = slot.label
        if column + len(text) > available_width:
            break
        for offset, char in enumerate(text):
            labels[column + offset] = char
        for offset, char in enumerate(slot.sub_label[: available_width - column]):
            if column + offset < available_width:
                sub_labels[column + offset] = char
        next_free = column + max(len(text), len(slot.sub_label)) + 1

    label_row = Text(" " * left_column_width)
    label_row.append("".join(labels), style="bold")
    sub_label_row = Text(" " * left_column_width)
    sub_label_row.append("".join(sub_labels), style="dim")
    return [label_row, sub_label_row]


def _format_left_column(text: str, left_column_width: int) -> str:
    if len(text) > left_column_width - 1:
        return text[: left_column_width - 4] + "... "
    return text.ljust(left_column_width)


def _build_row(
    row: Row,
    available_width: int,
    left_column_width: int,
    marker_column: Optional[int],
) -> list[Text]:
    color = get_category_color(row.category)
    count_str = f"{row.item_count} items"

    if row.kind == RowKind.HEADER:
        line = Text()
        line.append("● ", style=color)
        line.append(
            _format_left_column(f"{row.label} ({count_str})", left_column_width - 2),
            style="bold",
        )
        line.append(_empty_lane(available_width, marker_column))
        return [line]

    if row.kind == RowKind.SUB_CATEGORY:
        labels = [f"  ◦ {row.label}", f"    {count_str}"]
    else:
        labels = [f"● {row.label}", f"  {count_str}"]

    lanes: list[list[PositionedItem]] = [[] for _ in range(max(row.lane_count, 1))]
    for positioned in row.items:
        lanes[positioned.lane_index].append(positioned)

    lines = []
    for index in range(max(len(lanes), len(labels))):
        line = Text()
        left = labels[index] if index < len(labels) else ""
        line.append(
            _format_left_column(left, left_column_width),
            style=color if index == 0 else "dim",
        )
        if index < len(lanes):
            line.append(_build_lane(lanes[index], available_width, marker_column, color))
        else:
            line.append(_empty_lane(available_width, marker_column))
        lines.append(line)
    return lines


def _empty_lane(available_width: int, marker_column: Optional[int]) -> Text:
    return _build_lane([], available_width, marker_column, "")


def _build_lane(
    items: list[PositionedItem],
    available_width: int,
    marker_column: Optional[int],
    color: str,
) -> Text:
    chars = [" "] * available_width
    styles = [""] * available_width

    if marker_column is not None:
        chars[marker_column] = "│"
        styles[marker_column] = MARKER_COLOR

    for positioned in items:
        start = min(_to_column(positioned.left, available_width), available_width - 1)
        end = _to_column(positioned.left + positioned.width, available_width)
        end = min(max(end, start + 1), available_width)

        style = color
        if positioned.style.at_risk:
            style = f"bold {AT_RISK_COLOR}"
        if positioned.style.done:
            style = f"dim {DONE_COLOR}"

        for column in range(start, end):
            chars[column] = "━"
            styles[column] = style
        if end - start == 1:
            chars[start] = "●"
        else:
            if not positioned.clipped_left:
                chars[start] = "◄"
            if not positioned.clipped_right:
                chars[end - 1] = "►"

        title = positioned.item.title or positioned.item.id
        if end - start > len(title) + 2:
            for offset, char in enumerate(title):
                chars[start + 1 + offset] = char

    lane = Text()
    for char, style in zip(chars, styles):
        lane.append(char, style=style)
    return lane
