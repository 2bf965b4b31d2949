# ABOUTME: Rich table utilities for the CLI's status displays
# ABOUTME: Provides a key-value table generator and the logging status table

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table


def create_key_value_table(
    title: str,
    data: dict[str, Any],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary from get_logging_status

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "Installed": "yes" if status["installed"] else "no",
        "Level": status["level"],
        "Mode": status["mode"].title(),
        "Target Prefix": status["prefix"],
        "Stdlib Logging Bridged": "yes" if status["stdlib_intercepted"] else "no",
        "Spinner Tick": f"{status['progress_tick_ms']} ms",
    }
    if status["progress_active"]:
        logging_data["Spinner"] = "active"

    return create_key_value_table(
        title="Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()  # Add spacing before
    console.print(table)
    console.print()  # Add spacing after
