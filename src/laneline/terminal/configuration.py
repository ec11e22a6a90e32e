# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from laneline import configuration
from laneline.repository.configuration import CONFIGURATION_REPO
from laneline.terminal.custom_typer import AliasedTyperGroup
from laneline.terminal.parse import parse_zoom

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("timezone", config["timezone"])
    table.add_row("default_zoom", config["default_zoom"])
    table.add_row("data_path", str(configuration.items_path(config)))
    table.add_row("left_column_width", str(config["left_column_width"]))
    for key in (
        "row_unit_height",
        "row_padding",
        "min_row_height",
        "lane_margin",
        "header_row_height",
        "min_width_percent",
    ):
        table.add_row(key, str(config.get(key)))

    console.print(table)


@app.command("set, s")
def set(
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", help="Timezone for dates, e.g. Europe/London"),
    ] = None,
    default_zoom: Annotated[
        Optional[str],
        typer.Option("--default-zoom", help="Zoom used when none is given"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Work item YAML file"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="Use the default item file")
    ] = False,
    left_column_width: Annotated[
        Optional[int],
        typer.Option("--left-column-width", help="Width of the row label column"),
    ] = None,
    row_unit_height: Annotated[
        Optional[int], typer.Option("--row-unit-height", help="Height of one lane")
    ] = None,
    row_padding: Annotated[
        Optional[int], typer.Option("--row-padding", help="Extra height per row")
    ] = None,
    min_row_height: Annotated[
        Optional[int], typer.Option("--min-row-height", help="Minimum row height")
    ] = None,
    lane_margin: Annotated[
        Optional[int], typer.Option("--lane-margin", help="Offset of the first lane")
    ] = None,
    header_row_height: Annotated[
        Optional[int],
        typer.Option("--header-row-height", help="Height of category header rows"),
    ] = None,
    min_width_percent: Annotated[
        Optional[float],
        typer.Option("--min-width-percent", help="Minimum bar width in percent"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if timezone is not None:
        try:
            pendulum.timezone(timezone)
        except Exception as e:
            raise typer.BadParameter(f"Unknown timezone: {timezone} ({e})")
    if default_zoom is not None:
        default_zoom = str(parse_zoom(default_zoom))

    CONFIGURATION_REPO.update_config(
        timezone=timezone,
        default_zoom=default_zoom,
        data_path=data_path,
        remove_data_path=remove_data_path,
        left_column_width=left_column_width,
        row_unit_height=row_unit_height,
        row_padding=row_padding,
        min_row_height=min_row_height,
        lane_margin=lane_margin,
        header_row_height=header_row_height,
        min_width_percent=min_width_percent,
    )
    CONFIGURATION_REPO.flush()
    view()
