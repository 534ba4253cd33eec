"""Tests for the interactive menu, driven through scripted input."""

from itemcounter.console import render_result, run_menu, split_line
from itemcounter.counting.engine import count
from itemcounter.counting.kinds import SupportedKind


def run_script(*lines: str) -> list[str]:
    """Feed lines to the menu; EOF after the last one."""
    pending = list(lines)
    output: list[str] = []

    def read(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    run_menu(read=read, write=output.append)
    return output


class TestSplitLine:
    def test_whitespace_split(self):
        assert split_line("  a  b\tc ", SupportedKind.TEXT) == ["a", "b", "c"]

    def test_character_keeps_whole_line(self):
        assert split_line("a b", SupportedKind.CHARACTER) == ["a b"]

    def test_blank_line_gives_no_items(self):
        assert split_line("   ", SupportedKind.INTEGER) == []
        assert split_line("", SupportedKind.CHARACTER) == []


class TestRenderResult:
    def test_table_lines(self):
        lines = render_result(count(["a", "b", "a"], "text"))
        assert lines == ["a: 2 occurrence(s)", "b: 1 occurrence(s)"]

    def test_error_line(self):
        lines = render_result(count(["x"], "unknown"))
        assert len(lines) == 1
        assert lines[0].startswith("Unsupported data type: unknown")


class TestMenu:
    def test_exit(self):
        output = run_script("8")
        assert "=== Item Counter ===" in "".join(output)
        assert output[-1] == "Goodbye!"

    def test_eof_exits(self):
        output = run_script()
        assert output[-1] == "Goodbye!"

    def test_invalid_option(self):
        output = run_script("9", "8")
        assert "Invalid option. Please try again." in output

    def test_count_words(self):
        output = run_script("1", "red blue red", "8")
        assert "\nCounting strings:" in output
        assert "red: 2 occurrence(s)" in output
        assert "blue: 1 occurrence(s)" in output

    def test_count_characters(self):
        output = run_script("4", "abba", "8")
        assert "a: 2 occurrence(s)" in output
        assert "b: 2 occurrence(s)" in output

    def test_empty_input(self):
        output = run_script("2", "   ", "8")
        assert "No input provided." in output

    def test_invalid_integer_rejects_line(self):
        output = run_script("2", "1 2 x", "8")
        assert any("'x' is not a valid integer value" in line for line in output)
        assert not any("occurrence(s)" in line for line in output)

    def test_dates_show_example(self):
        output = run_script("6", "01/15/2024 2024-01-15", "8")
        assert "Example: 01/15/2024 2024-12-25 03/10/2023" in output
        assert "2024-01-15: 2 occurrence(s)" in output

    def test_start_api_hint(self):
        output = run_script("7", "8")
        assert any("itemcounter serve" in line for line in output)
