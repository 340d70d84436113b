"""Unit tests for console command parsing."""

import pytest

from threadview.interface.console.commands import (
    COMMANDS,
    Command,
    help_text,
    parse_command,
)
from threadview.interface.error import CommandError


class TestParseCommand:
    """Tests for parse_command."""

    def test_blank_line_is_nothing(self):
        assert parse_command("   \n") is None

    def test_numeric_argument(self):
        assert parse_command("open 12\n") == Command(
            name="open", argument="12", number=12
        )

    def test_free_text_argument_keeps_inner_spaces(self):
        command = parse_command("new  hello   world \n")

        assert command == Command(name="new", argument="hello   world")

    def test_search_without_text(self):
        assert parse_command("search") == Command(name="search", argument="")

    def test_names_are_case_insensitive(self):
        assert parse_command("DELETE 3").name == "delete"

    @pytest.mark.parametrize("alias", ["q", "exit"])
    def test_quit_aliases(self, alias):
        assert parse_command(alias).name == "quit"

    def test_unknown_command(self):
        with pytest.raises(CommandError, match="Unknown command: frobnicate"):
            parse_command("frobnicate 1")

    def test_numeric_command_needs_number(self):
        with pytest.raises(CommandError, match="Usage: reply ID"):
            parse_command("reply abc")


class TestHelpText:
    """Tests for help_text."""

    def test_lists_every_command(self):
        text = help_text()

        assert len(text.splitlines()) == len(COMMANDS)
        for name in COMMANDS:
            assert name in text
