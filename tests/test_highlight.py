"""Unit tests for match location and output formatters."""

import io
import re

import pytest

from grepr.errors import NoMatchError
from grepr.highlight import (
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RESET,
    AnsiFormatter,
    PlainFormatter,
    locate_first_match,
    make_formatter,
    split_match,
)
from grepr.models import MatchSpan


@pytest.mark.unit
class TestLocateFirstMatch:
    def test_returns_leftmost_span(self):
        assert locate_first_match("a fox and a fox\n", re.compile("fox")) == MatchSpan(2, 5)

    def test_respects_case_insensitive_pattern(self):
        assert locate_first_match("The FOX\n", re.compile("fox", re.IGNORECASE)) == MatchSpan(4, 7)

    def test_raises_when_line_does_not_match(self):
        with pytest.raises(NoMatchError):
            locate_first_match("nothing here\n", re.compile("fox"))


@pytest.mark.unit
class TestSplitMatch:
    @pytest.mark.parametrize(
        ("line", "pattern"),
        [
            ("fox\n", "fox"),
            ("the quick brown fox\r\n", r"qu\w+"),
            ("ends without newline fox", "fox$"),
            ("   leading\n", r"^\s+"),
            ("abc\n", "x*"),
        ],
    )
    def test_parts_rebuild_the_line(self, line, pattern):
        prefix, match, suffix = split_match(line, re.compile(pattern))

        assert prefix + match + suffix == line

    def test_terminator_lands_in_suffix(self):
        prefix, match, suffix = split_match("say fox please\n", re.compile("fox"))

        assert (prefix, match, suffix) == ("say ", "fox", " please\n")

    def test_empty_match_at_start(self):
        assert split_match("abc\n", re.compile("x*")) == ("", "", "abc\n")


@pytest.mark.unit
class TestFormatters:
    def test_plain_formatter_is_identity(self):
        f = PlainFormatter()

        assert f.emphasize("fox") == "fox"
        assert f.label("a.txt:") == "a.txt:"

    def test_ansi_formatter_wraps_text(self):
        f = AnsiFormatter()

        assert f.emphasize("fox") == f"{ANSI_GREEN}fox{ANSI_RESET}"
        assert f.label("a.txt:") == f"{ANSI_DIM}a.txt:{ANSI_RESET}"

    def test_always_and_never_ignore_the_stream(self):
        assert isinstance(make_formatter("always", io.StringIO()), AnsiFormatter)
        assert isinstance(make_formatter("never", io.StringIO()), PlainFormatter)

    def test_auto_colors_only_a_tty(self):
        class _Tty(io.StringIO):
            def isatty(self):
                return True

        assert isinstance(make_formatter("auto", io.StringIO()), PlainFormatter)
        assert isinstance(make_formatter("auto", _Tty()), AnsiFormatter)
