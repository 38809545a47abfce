from matrixcalc.boxes import (
    box_line,
    box_side,
    format_box,
    print_box,
    print_box_lines,
    print_box_side,
)
from matrixcalc.console import BOX_WIDTH, TextFormat
from matrixcalc.text import format_text


def test_box_side_shape():
    side = box_side()
    assert len(side) == BOX_WIDTH
    assert side == "#" + " " * (BOX_WIDTH - 2) + "#"


def test_box_line_shape():
    assert box_line() == "#" + "-" * (BOX_WIDTH - 2) + "#"


def test_format_box_wraps_centered_lines():
    lines = ["Matrix", "Calculator"]
    rows = format_box(lines).split("\n")
    assert len(rows) == len(lines) + 2
    assert rows[0] == box_line() and rows[-1] == box_line()
    assert rows[1:-1] == [format_text(line, False, TextFormat.CENTER) for line in lines]


def test_format_box_empty():
    assert format_box([]) == box_line() + "\n" + box_line()


def test_format_box_accepts_generator():
    rows = format_box(str(n) for n in range(3)).split("\n")
    assert all(len(row) == BOX_WIDTH for row in rows)
    assert len(rows) == 5


def test_print_box_side(capsys):
    print_box_side()
    assert capsys.readouterr().out == box_side()


def test_print_box_lines(capsys):
    print_box_lines()
    assert capsys.readouterr().out == box_line() + "\n"


def test_print_box(capsys):
    print_box(["hello"])
    assert capsys.readouterr().out == format_box(["hello"]) + "\n"