# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from laneline import configuration
from laneline.engine.filter import filter_options
from laneline.engine.items import parse_items
from laneline.engine.layout import activate, compute_layout
from laneline.engine.window import reset_anchor, step_anchor
from laneline.model.filter import TimelineFilter
from laneline.model.layout import Layout, LayoutSettings
from laneline.model.work_item import WorkItem
from laneline.repository.configuration import CONFIGURATION_REPO
from laneline.repository.item import ItemRepository
from laneline.terminal.parse import parse_date, parse_now, parse_priority, parse_zoom
from laneline.time import date_to_display_str
from laneline.view.timeline import timeline_view


console = Console()


def _load_items(items_path: Optional[Path], tz: str) -> list[WorkItem]:
    config = CONFIGURATION_REPO.get_config()
    path = items_path if items_path is not None else configuration.items_path(config)
    if not path.is_file():
        console.print(f"[red]Work item file not found: {path}[/red]")
        raise typer.Exit(code=1)
    repository = ItemRepository(path)
    return parse_items(repository.records, tz)


def view(
    zoom: Annotated[
        Optional[str],
        typer.Option("--zoom", "-z", help="Zoom level: month, quarter or year"),
    ] = None,
    anchor: Annotated[
        Optional[str],
        typer.Option(
            "--anchor",
            "-a",
            help="Date inside the period to show (YYYY-MM-DD, today, or day offset)",
        ),
    ] = None,
    step: Annotated[
        int,
        typer.Option("--step", "-s", help="Move the window by N zoom units"),
    ] = 0,
    today: Annotated[
        bool, typer.Option("--today", "-t", help="Reset the anchor to now")
    ] = False,
    owner: Annotated[
        Optional[str], typer.Option("--owner", "-o", help="Only items of this owner")
    ] = None,
    team: Annotated[
        Optional[str],
        typer.Option("--team", help="Only items of this sub-category"),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option("--priority", "-p", help="Only items of this priority"),
    ] = None,
    blocked_late: Annotated[
        bool,
        typer.Option("--blocked-late", "-b", help="Only blocked or late items"),
    ] = False,
    items: Annotated[
        Optional[Path],
        typer.Option("--items", "-i", help="Work item YAML file"),
    ] = None,
    now: Annotated[
        Optional[str],
        typer.Option("--now", help="Instant used as now (ISO 8601)"),
    ] = None,
    select: Annotated[
        Optional[str],
        typer.Option("--select", help="Show details of a rendered item by id"),
    ] = None,
) -> None:
    """Display work items on a timeline grouped by category and team."""
    config = CONFIGURATION_REPO.get_config()
    tz = config["timezone"]

    current = parse_now(now, tz)
    zoom_level = parse_zoom(zoom if zoom is not None else config["default_zoom"])

    anchor_date = parse_date(anchor, tz)
    if anchor_date is None or today:
        anchor_date = reset_anchor(current)
    if step != 0:
        anchor_date = step_anchor(zoom_level, anchor_date, step)

    filters = TimelineFilter(
        owner=owner,
        sub_category=team,
        priority=parse_priority(priority),
        blocked_or_late=blocked_late,
    )

    work_items = _load_items(items, tz)
    layout = compute_layout(
        work_items,
        zoom_level,
        anchor_date,
        filters,
        current,
        LayoutSettings.from_configuration(config),
        tz,
    )
    timeline_view(layout, console, config["left_column_width"])

    if select is not None:
        if not activate(layout, select, lambda item_id: _show_item(layout, item_id)):
            console.print(f"[yellow]Item {select} is not on this timeline[/yellow]")


def _show_item(layout: Layout, item_id: str) -> None:
    for positioned in layout.positioned_items():
        if positioned.item.id != item_id:
            continue
        item = positioned.item
        style = positioned.style

        table = Table(show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="magenta")
        table.add_row("id", item.id)
        table.add_row("title", f"{style.icon} {item.title}")
        table.add_row("category", item.category)
        table.add_row("team", item.sub_category or "")
        table.add_row("owner", item.owner)
        table.add_row("priority", str(item.priority))
        table.add_row("status", str(item.status))
        table.add_row("start", date_to_display_str(item.start))
        table.add_row("end", date_to_display_str(item.end))
        table.add_row("lane", str(positioned.lane_index))
        console.print(table)
        return


def filters(
    items: Annotated[
        Optional[Path],
        typer.Option("--items", "-i", help="Work item YAML file"),
    ] = None,
) -> None:
    """List the owners and teams the view can be filtered by."""
    config = CONFIGURATION_REPO.get_config()
    owners, teams = filter_options(_load_items(items, config["timezone"]))

    table = Table()
    table.add_column("Owners", style="cyan")
    table.add_column("Teams", style="magenta")
    for index in range(max(len(owners), len(teams))):
        table.add_row(
            owners[index] if index < len(owners) else "",
            teams[index] if index < len(teams) else "",
        )
    console.print(table)
