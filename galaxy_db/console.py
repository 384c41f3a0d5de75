"""Interactive console for the galaxy catalog.

Reads one command per line, executes it and prints the report.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.text import Text

from galaxy_db.catalog import Catalog
from galaxy_db.executor import CommandExecutor, ExecutionResult, Notice
from galaxy_db.parser import CommandParser
from galaxy_db.rendering import render
from galaxy_db.settings import GalaxyDBSettings, get_settings

logger = logging.getLogger(__name__)

_NOTICE_STYLES = {"error": "red", "warning": "yellow"}


def configure_logging(log_level: str = "WARNING", log_format: str = "simple") -> None:
    """Configure logging on stderr so log lines stay out of the reports."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    if log_format == "simple":
        format_str = "%(levelname)s: %(message)s"
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_str, stream=sys.stderr, force=True)
    logging.getLogger("galaxy_db").setLevel(level)


class Repl:
    """Read-parse-execute-print loop over a single catalog."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        console: Optional[Console] = None,
        settings: Optional[GalaxyDBSettings] = None,
    ):
        self.catalog = catalog if catalog is not None else Catalog()
        self.settings = settings or get_settings()
        self.console = console or Console(
            highlight=False,
            soft_wrap=True,
            no_color=not self.settings.color,
        )
        self.parser = CommandParser(self.catalog)
        self.executor = CommandExecutor(self.catalog)

    def handle_line(self, line: Optional[str]) -> bool:
        """Process one line; returns False once the loop should stop."""
        result = self.executor.execute(self.parser.parse(line))
        self.show(result)
        return result.keep_running

    def show(self, result: ExecutionResult) -> None:
        style = None
        if isinstance(result.payload, Notice) and self.settings.color:
            style = _NOTICE_STYLES[result.payload.severity]
        for line in render(result.payload):
            self.console.print(Text(line, style=style or ""))

    def run(self, stream: TextIO) -> None:
        """Run until an exit command or end of input."""
        logger.info("Console started")
        while True:
            if self.settings.prompt:
                self.console.print(self.settings.prompt, end="", markup=False)
            line = stream.readline()
            if not self.handle_line(line.rstrip("\r\n") if line else None):
                break
        logger.info(f"Console stopped with {len(self.catalog)} bodies recorded")


@click.command()
@click.option("--prompt", default=None, help="Prompt shown before each line")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def main(prompt: Optional[str], log_level: Optional[str]):
    """Record and browse galaxies, stars, planets and moons."""
    settings = get_settings()
    overrides = {}
    if prompt is not None:
        overrides["prompt"] = prompt
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level, settings.log_format)
    Repl(settings=settings).run(click.get_text_stream("stdin"))


if __name__ == "__main__":
    main()
