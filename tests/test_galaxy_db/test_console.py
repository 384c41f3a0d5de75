"""Tests for galaxy_db.console module."""

import io
import logging

import pytest
from click.testing import CliRunner
from rich.console import Console

from galaxy_db.catalog import Catalog
from galaxy_db.console import Repl, configure_logging, main
from galaxy_db.models import BodyKind
from galaxy_db.settings import GalaxyDBSettings

SESSION = """\
add galaxy [Milky Way] spiral 13.6B
add star [Milky Way] [Sol] 1.0 1.39 5778 1.0
add planet [Sol] [Earth] terrestrial yes
add planet [Sol] [Jupiter] giant planet no
add moon [Earth] [Moon]
add galaxy [Milky Way] elliptical 1B
list galaxies
stats
print [Milky Way]
exit
list stars
"""


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging changes made by a test."""
    root = logging.getLogger()
    package = logging.getLogger("galaxy_db")
    handlers, root_level, package_level = root.handlers[:], root.level, package.level

    yield

    root.handlers[:] = handlers
    root.setLevel(root_level)
    package.setLevel(package_level)


def make_repl(catalog=None):
    output = io.StringIO()
    console = Console(file=output, highlight=False, soft_wrap=True, no_color=True)
    settings = GalaxyDBSettings(prompt="", color=False)
    return Repl(catalog=catalog, console=console, settings=settings), output


class TestRepl:
    """Test suite for the Repl class."""

    def test_session(self):
        """Test a full session, stopping at exit."""
        repl, output = make_repl()
        repl.run(io.StringIO(SESSION))

        lines = output.getvalue().splitlines()
        assert lines == [
            "Galaxy Milky Way already exists.",
            "--- List of all researched galaxies ---",
            "Milky Way",
            "--- End of galaxies list ---",
            "--- Stats ---",
            "Galaxies: 1",
            "Stars: 1",
            "Planets: 2",
            "Moons: 1",
            "--- End of stats ---",
            "--- Data for Milky Way galaxy ---",
            "Type: spiral",
            "Age: 13.6B",
            "Stars:",
            "- Name: Sol",
            "  Class: G (1, 0.695, 5778, 1)",
            "  Planets:",
            "  - Name: Earth",
            "    Type: terrestrial",
            "    Supports life: yes",
            "    Moons:",
            "    - Moon",
            "  - Name: Jupiter",
            "    Type: giant planet",
            "    Supports life: no",
            "    Moons:",
            "--- End of data for Milky Way galaxy ---",
        ]

    def test_end_of_input_stops(self):
        """Test the loop ends when input runs out without exit."""
        catalog = Catalog()
        repl, output = make_repl(catalog)
        repl.run(io.StringIO("add galaxy [A] spiral 1B\n"))

        assert catalog.list_names(BodyKind.GALAXY) == ["A"]
        assert output.getvalue() == ""

    def test_errors_do_not_stop_loop(self):
        """Test bad input is reported and the next line still runs."""
        repl, output = make_repl()
        repl.run(io.StringIO("frobnicate\n\nstats\n"))

        lines = output.getvalue().splitlines()
        assert lines[0] == "Unknown command: frobnicate"
        assert lines[1] == "--- Stats ---"

    def test_bracketed_names_print_verbatim(self):
        """Test names are not treated as console markup."""
        repl, output = make_repl()
        repl.handle_line("add galaxy [[red Nebula] spiral 1B")
        repl.handle_line("list galaxies")

        assert "[red Nebula" in output.getvalue()

    def test_handle_line_exit(self):
        repl, _ = make_repl()
        assert repl.handle_line("stats") is True
        assert repl.handle_line("exit") is False


class TestMain:
    """Test suite for the click entry point."""

    def test_main_runs_session(self):
        runner = CliRunner()
        result = runner.invoke(
            main, ["--prompt", ""], input="add galaxy [A] spiral 1B\nlist galaxies\n"
        )

        assert result.exit_code == 0
        assert "--- List of all researched galaxies ---" in result.output
        assert "\nA\n" in result.output

    def test_main_prompt_from_environment(self, monkeypatch):
        monkeypatch.setenv("GALAXYDB_PROMPT", "galaxy> ")
        runner = CliRunner()
        result = runner.invoke(main, [], input="exit\n")

        assert result.exit_code == 0
        assert result.output.startswith("galaxy>")

    def test_main_rejects_unknown_log_level(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--log-level", "LOUD"], input="exit\n")
        assert result.exit_code != 0


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_sets_package_level(self):
        configure_logging("DEBUG")
        assert logging.getLogger("galaxy_db").level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger("galaxy_db").level == logging.WARNING

    def test_unknown_level_falls_back_to_warning(self):
        configure_logging("CHATTY")
        assert logging.getLogger("galaxy_db").level == logging.WARNING
