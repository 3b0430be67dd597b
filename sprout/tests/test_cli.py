"""
Tests for the command-line interface.
"""

import logging

import pytest

from ..cli import main


@pytest.fixture(autouse=True)
def restore_logging():
    """main() installs its own handler; put the sprout logger back afterwards."""
    logger = logging.getLogger("sprout")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSimulate:

    def test_quiet_game_prints_result(self, capsys):
        assert main(["simulate", "--players", "ann", "ben", "--seed", "3", "-q"]) == 0

        out = capsys.readouterr().out
        assert "[Turn" not in out
        assert "ann:" in out
        assert "ben:" in out
        assert "Winner: " in out

    def test_full_log(self, capsys):
        assert main(["simulate", "--seed", "8", "--grid-size", "3", "--swarm"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("[Turn 1] Game started with alice, bob")
        assert "Game over! Winner:" in out

    def test_same_seed_same_output(self, capsys):
        main(["simulate", "--seed", "12"])
        first = capsys.readouterr().out
        main(["simulate", "--seed", "12"])
        assert capsys.readouterr().out == first

    def test_bad_players(self, capsys):
        assert main(["simulate", "--players", "solo"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "simulate" in capsys.readouterr().out


class TestLogging:

    def test_verbose_sets_debug(self):
        main(["--verbose", "simulate", "--players", "solo"])
        logger = logging.getLogger("sprout")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_terminal_formatter_colors_level(self):
        from ..logging_config import TerminalFormatter

        record = logging.LogRecord("sprout.x", logging.WARNING, __file__, 1, "careful", None, None)
        line = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)

        assert line == "\033[33mWARNING\033[0m careful"
        assert record.levelname == "WARNING"
