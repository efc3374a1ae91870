"""
Tests for command line tokenizing

Tests cover:
- Empty and whitespace-only input
- Space splitting and collapsing
- Double-quote grouping
- Unmatched quotes
"""
import pytest

from linecli.cli.parser import parse_input


class TestEmptyInput:
    """Tests for lines with nothing to dispatch"""

    @pytest.mark.parametrize("line", ["", " ", "    ", "\t", " \n"])
    def test_empty_or_whitespace_line(self, line):
        """Test empty and whitespace-only lines yield no command and no args"""
        assert parse_input(line) == ("", [])

    def test_quoted_only_line_has_no_command(self):
        """Test a line made only of a quoted segment has no command"""
        command, args = parse_input('"quoted words"')
        assert command == ""
        assert args == ["quoted words"]


class TestUnquotedTokens:
    """Tests for plain space-separated tokens"""

    def test_command_only(self):
        """Test a single word becomes the command"""
        assert parse_input("help") == ("help", [])

    def test_command_with_arguments(self):
        """Test later words become arguments in order"""
        assert parse_input("move a b c") == ("move", ["a", "b", "c"])

    def test_runs_of_spaces_collapse(self):
        """Test repeated spaces do not produce empty arguments"""
        assert parse_input("  move   a    b  ") == ("move", ["a", "b"])

    def test_case_is_preserved(self):
        """Test the tokenizer does not change case"""
        assert parse_input("Start NOW") == ("Start", ["NOW"])


class TestQuotedTokens:
    """Tests for double-quote grouping"""

    def test_calculate_example(self):
        """Test quoted segment is kept as one argument among plain ones"""
        command, args = parse_input('calculate "complex calculation" 1 + 1')
        assert command == "calculate"
        assert args == ["complex calculation", "1", "+", "1"]

    def test_internal_spaces_preserved_in_quotes(self):
        """Test spaces inside quotes are kept verbatim"""
        _, args = parse_input('say "  two  spaces  "')
        assert args == ["  two  spaces  "]

    def test_adjacent_quoted_segments(self):
        """Test back-to-back quoted segments become separate arguments"""
        _, args = parse_input('pair "a b" "c d"')
        assert args == ["a b", "c d"]

    def test_empty_quotes_give_empty_argument(self):
        """Test an empty quoted segment is passed through as an empty argument"""
        assert parse_input('set name ""') == ("set", ["name", ""])

    def test_quote_inside_word_splits_it(self):
        """Test a quote in the middle of a word starts a quoted segment"""
        assert parse_input('cmd ab"cd ef"gh') == ("cmd", ["ab", "cd ef", "gh"])

    def test_quoted_segment_before_command(self):
        """Test a leading quoted segment is an argument, not the command"""
        command, args = parse_input('"first" second third')
        assert command == "second"
        assert args == ["first", "third"]


class TestUnmatchedQuotes:
    """Tests for quotes with no closing partner"""

    def test_trailing_quote_runs_to_end(self):
        """Test an unmatched quote groups everything after it"""
        _, args = parse_input('echo "rest of the line')
        assert args == ["rest of the line"]

    def test_trailing_whitespace_trimmed_before_split(self):
        """Test the line is trimmed before an unmatched quote is closed"""
        _, args = parse_input('echo "rest   ')
        assert args == ["rest"]

    def test_third_quote_opens_new_segment(self):
        """Test an odd number of quotes leaves the last segment quoted"""
        _, args = parse_input('cmd "a" b "c d')
        assert args == ["a", "b", "c d"]
