"""A matrix with its derived forms: transpose, determinant, cofactors, inverse."""

from __future__ import annotations

from collections.abc import Sequence


def _zeros(rows: int, cols: int) -> list[list[float]]:
    return [[0.0] * cols for _ in range(rows)]


def _minor(matrix: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(matrix)
        if r != skip_row
    ]


def laplace_determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a square matrix by Laplace expansion on the first row.

    An empty matrix has determinant 0.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("determinant needs a square matrix")
    if size == 0:
        return 0.0
    if size == 1:
        return float(matrix[0][0])

    total = 0.0
    for col, value in enumerate(matrix[0]):
        sign = 1.0 if col % 2 == 0 else -1.0
        total += sign * value * laplace_determinant(_minor(matrix, 0, col))
    return total


class Matrix:
    """A rows x cols matrix together with the results computed from it."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("a matrix needs at least one row and one column")
        self.rows = rows
        self.cols = cols

        self.matrix = _zeros(rows, cols)
        self.transposed_matrix = _zeros(cols, rows)
        self.inverted_matrix = _zeros(rows, cols)
        self.minor_complementaries = _zeros(rows, cols)
        self.algebrical_complementaries = _zeros(rows, cols)

        self.rank = 0
        self.determinant = 0.0

        self.is_diagonal = False
        self.is_upper_triangular = False
        self.is_lower_triangular = False
        self.null_matrix = False

        self.is_square = rows == cols
        self.determinant_exists = self.is_square

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        result = cls(len(rows), width)
        result.matrix = [[float(value) for value in row] for row in rows]
        return result

    def check_null(self) -> bool:
        """Record and return whether every entry is zero."""
        self.null_matrix = all(value == 0 for row in self.matrix for value in row)
        return self.null_matrix

    def transpose(self) -> list[list[float]]:
        """Fill and return the transposed matrix."""
        self.transposed_matrix = [list(column) for column in zip(*self.matrix)]
        return self.transposed_matrix

    def calculate_determinant(self) -> float | None:
        """Compute the determinant; return None and leave it unchanged if not square."""
        if not self.determinant_exists:
            return None
        self.determinant = laplace_determinant(self.matrix)
        return self.determinant

    def calculate_minor_complementaries(self) -> list[list[float]]:
        """Fill the matrix of complementary minors of a square matrix."""
        if self.is_square:
            self.minor_complementaries = [
                [laplace_determinant(_minor(self.matrix, i, j)) for j in range(self.cols)]
                for i in range(self.rows)
            ]
        return self.minor_complementaries

    def calculate_algebrical_complementaries(self) -> list[list[float]]:
        """Fill the cofactor matrix from the complementary minors."""
        self.algebrical_complementaries = [
            [(1 if (i + j) % 2 == 0 else -1) * minor for j, minor in enumerate(row)]
            for i, row in enumerate(self.minor_complementaries)
        ]
        return self.algebrical_complementaries

    def calculate_inverted_matrix(self) -> list[list[float]]:
        """Fill the inverse from the cofactors and determinant; skipped when the determinant is 0."""
        if self.determinant == 0:
            return self.inverted_matrix
        factor = 1 / self.determinant
        self.inverted_matrix = [
            [cofactor * factor for cofactor in column]
            for column in zip(*self.algebrical_complementaries)
        ]
        return self.inverted_matrix