"""
Unit tests for command parsing.
"""
import pytest
from minesweeper import Action, Command, CommandError, parse_command
from minesweeper.commands import is_valid_command


class TestParseCommand:
    """Test parsing of well-formed lines."""

    def test_free_command(self) -> None:
        assert parse_command("3 5 free") == Command(Action.FREE, (3, 5))

    def test_mine_keyword_is_flag(self) -> None:
        assert parse_command("1 2 mine") == Command(Action.FLAG, (1, 2))

    @pytest.mark.parametrize("line", ["reveal", "REVEAL", "Reveal now"])
    def test_reveal_command(self, line: str) -> None:
        assert parse_command(line) == Command(Action.REVEAL_ALL)

    @pytest.mark.parametrize("line", ["exit", "Exit", "  eXiT  "])
    def test_exit_command(self, line: str) -> None:
        assert parse_command(line) == Command(Action.EXIT)

    def test_keywords_are_case_insensitive(self) -> None:
        assert parse_command("4 4 FrEe").action is Action.FREE

    def test_extra_whitespace_and_tokens(self) -> None:
        """Tokens past the third are ignored."""
        assert parse_command("  2   7  mine extra") == Command(
            Action.FLAG, (2, 7)
        )

    def test_coordinates_dropped_for_exit(self) -> None:
        assert parse_command("1 1 exit") == Command(Action.EXIT)

    def test_bounds_are_not_checked(self) -> None:
        assert parse_command("99 42 free").coords == (99, 42)

    @pytest.mark.parametrize(
        "line, action",
        [("0 0 exit", Action.EXIT), ("-1 3 reveal", Action.REVEAL_ALL)],
    )
    def test_any_integers_before_reveal_or_exit(
        self, line: str, action: Action
    ) -> None:
        """Coordinates that are thrown away need not be positive."""
        assert is_valid_command(line) is True
        assert parse_command(line) == Command(action)

    def test_signed_coordinates(self) -> None:
        assert parse_command("+2 3 free") == Command(Action.FREE, (2, 3))


class TestInvalidCommands:
    """Test rejection of malformed lines."""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "free",
            "mine",
            "3 5",
            "a 5 free",
            "3 b free",
            "3 5 dig",
            "0 5 free",
            "3 -1 mine",
            "1_0 2 free",
            "٣ 2 free",
            "2.0 2 free",
            "0 0 dig",
            "hello",
        ],
    )
    def test_invalid_lines(self, line: str) -> None:
        assert is_valid_command(line) is False
        with pytest.raises(CommandError):
            parse_command(line)

    def test_command_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_command("nope")


class TestAction:
    """Test the action enum."""

    @pytest.mark.parametrize(
        "keyword, action",
        [
            ("free", Action.FREE),
            ("MINE", Action.FLAG),
            ("Reveal", Action.REVEAL_ALL),
            ("exit", Action.EXIT),
        ],
    )
    def test_from_keyword(self, keyword: str, action: Action) -> None:
        assert Action.from_keyword(keyword) is action

    def test_unknown_keyword_is_none(self) -> None:
        assert Action.from_keyword("flag") is None

    def test_needs_coordinates(self) -> None:
        assert Action.FREE.needs_coordinates
        assert Action.FLAG.needs_coordinates
        assert not Action.REVEAL_ALL.needs_coordinates
        assert not Action.EXIT.needs_coordinates
