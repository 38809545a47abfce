"""Command that shows a sample matrix and the results computed from it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from matrixcalc.matrix import Matrix

CELL_WIDTH = 10
_SAMPLE = [[1, 3, 4], [2, 5, 1], [1, 2, 3]]


def _border(left: str, joint: str, right: str, cols: int) -> str:
    return left + joint.join("─" * CELL_WIDTH for _ in range(cols)) + right


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Return the matrix drawn as a grid with four decimals per cell."""
    cols = len(matrix[0]) if matrix else 0
    lines = [_border("┌", "┬", "┐", cols)]
    for index, row in enumerate(matrix):
        lines.append("│" + "".join(f" {value:{CELL_WIDTH - 2}.4f} │" for value in row))
        if index < len(matrix) - 1:
            lines.append(_border("├", "┼", "┤", cols))
    lines.append(_border("└", "┴", "┘", cols))
    return "\n".join(lines)


def print_matrix(matrix: Sequence[Sequence[float]]) -> None:
    """Print the matrix grid preceded by two blank lines."""
    print("\n\n" + format_matrix(matrix))


def main(argv: Sequence[str] | None = None) -> int:
    """Compute and print the determinant, transpose, minors, cofactors and inverse."""
    parser = argparse.ArgumentParser(
        prog="matrixcalc",
        description="Show a sample 3x3 matrix and the results computed from it.",
    )
    parser.parse_args(argv)

    m = Matrix.from_rows(_SAMPLE)
    m.calculate_determinant()
    sys.stdout.write(f"{m.determinant:f}")

    print_matrix(m.matrix)
    print_matrix(m.transpose())
    print_matrix(m.calculate_minor_complementaries())
    print_matrix(m.calculate_algebrical_complementaries())
    print_matrix(m.calculate_inverted_matrix())
    return 0


if __name__ == "__main__":
    sys.exit(main())