"""
Main entry point for the train booking manager.

Usage:
    trainbook                          # Start the interactive menu
    trainbook --env-file prod.env      # Load settings from a specific .env file
    trainbook --log-level INFO         # Show registry activity on stderr
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from trainbook.services.booking_registry import BookingRegistry
from trainbook.shell import BookingShell
from trainbook.utils.config import load_config

app = typer.Typer(
    help="Interactive train booking manager",
    add_completion=False
)
console = Console()


@app.command()
def main(
    env_file: Optional[str] = typer.Option(
        None,
        "--env-file",
        help="Path to a .env file with TRAINBOOK_* settings"
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the configured logging level"
    ),
):
    """Run the train booking menu until the user chooses Exit."""
    try:
        config = load_config(env_file)
        if log_level:
            config = config.model_validate({**config.model_dump(), "log_level": log_level})
    except ValueError as e:
        console.print(f"[red]✗ Failed to load configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    registry = BookingRegistry(seat_capacity=config.seat_capacity)
    shell = BookingShell(registry, console=console, bookings_file=config.bookings_file)
    shell.run()


if __name__ == "__main__":
    app()
