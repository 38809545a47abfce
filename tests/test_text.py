import pytest

from matrixcalc.console import BOX_SIDE, BOX_WIDTH, TextFormat
from matrixcalc.text import clear_screen, format_text, leave_blank_line, print_text


@pytest.mark.parametrize("fmt", list(TextFormat))
def test_external_call_uses_spaces_for_sides(fmt):
    line = format_text("hello", True, fmt)
    assert line[0] == " " and line[-1] == " "
    assert len(line) == BOX_WIDTH


def test_left_alignment():
    line = format_text("hello", False, TextFormat.LEFT)
    assert line.startswith(BOX_SIDE + " hello")
    assert line[len("# hello"):-1].strip() == ""


def test_right_alignment():
    line = format_text("hello", False, TextFormat.RIGHT)
    assert line.endswith("hello " + BOX_SIDE)
    assert line[1:-len("hello #")].strip() == ""


@pytest.mark.parametrize("text", ["odd", "even", "centered text"])
def test_center_alignment_is_balanced(text):
    line = format_text(text, False, TextFormat.CENTER)
    inner = line[1:-1]
    left = len(inner) - len(inner.lstrip(" "))
    right = len(inner) - len(inner.rstrip(" "))
    assert inner.strip() == text
    assert 0 <= right - left <= 1


@pytest.mark.parametrize("fmt", list(TextFormat))
def test_long_text_has_no_padding(fmt):
    text = "y" * (BOX_WIDTH + 10)
    line = format_text(text, False, fmt)
    expected_body = {
        TextFormat.LEFT: " " + text,
        TextFormat.RIGHT: text + " ",
        TextFormat.CENTER: text,
    }[fmt]
    assert line == BOX_SIDE + expected_body + BOX_SIDE


def test_unknown_format_prints_only_sides():
    assert format_text("ignored", False, 99) == BOX_SIDE + BOX_SIDE


def test_print_text_writes_line(capsys):
    print_text("abc", False, TextFormat.CENTER)
    assert capsys.readouterr().out == format_text("abc", False, TextFormat.CENTER) + "\n"


def test_clear_screen_emits_clear_sequence(capsys):
    clear_screen()
    assert "\033[2J" in capsys.readouterr().out


def test_leave_blank_line(capsys):
    leave_blank_line()
    assert capsys.readouterr().out == "\n"