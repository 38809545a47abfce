# matrixcalc

A small matrix calculator for square matrices. It computes the determinant
by Laplace expansion on the first row, the transpose, the matrix of minors,
the cofactor matrix and the inverse. Results are printed as tables drawn
with box-drawing characters, with four decimals per cell.

## Installation

```
pip install .
```

## Command line

```
matrixcalc
```

This runs the built-in example, the 3×3 matrix

```
1 3 4
2 5 1
1 2 3
```

It prints the determinant, then five tables in this order: the matrix, its
transpose, its minors, its cofactors and its inverse. The command takes no
options other than `-h`/`--help`.

## Library use

```python
from matrixcalc.matrix import Matrix, laplace_determinant
from matrixcalc.cli import format_matrix

m = Matrix.from_rows([[1, 3, 4], [2, 5, 1], [1, 2, 3]])
m.calculate_determinant()
print(m.determinant)

m.transpose()
m.calculate_minor_complementaries()
m.calculate_algebrical_complementaries()
m.calculate_inverted_matrix()
print(format_matrix(m.inverted_matrix))

print(laplace_determinant([[2, 0], [0, 3]]))
```

`Matrix(rows, cols)` creates a matrix of zeros; `Matrix.from_rows` builds one
from equally long rows. Each `calculate_*` method and `transpose` stores its
result on the matrix (`determinant`, `transposed_matrix`,
`minor_complementaries`, `algebrical_complementaries`, `inverted_matrix`) and
also returns it. `check_null` records in `null_matrix` whether every entry is
zero and returns that value.

Notes on behaviour:

- `calculate_determinant` returns `None` and leaves `determinant` unchanged
  when the matrix is not square.
- `calculate_minor_complementaries` leaves the minors unchanged when the
  matrix is not square.
- `calculate_inverted_matrix` leaves the inverse unchanged when the
  determinant is zero.
- Call the steps in the order shown above. Each step uses the result of
  the step before it.
- `laplace_determinant` raises `ValueError` for a non-square matrix and
  returns 0 for an empty one. `Matrix` and `Matrix.from_rows` raise
  `ValueError` for a matrix without rows or columns, and `from_rows` also
  for rows of different lengths.

## Console helpers

The package also has helpers for text-mode interfaces, all 70 characters
wide:

- `matrixcalc.console` holds the box constants, the `TextFormat` alignment
  enum (`LEFT`, `CENTER`, `RIGHT`) and `move_cursor`, which writes an ANSI
  cursor-movement sequence.
- `matrixcalc.text` formats and prints one line of text between box sides
  (`format_text`, `print_text`), clears the screen with ANSI escapes
  (`clear_screen`) and prints a blank line (`leave_blank_line`).
- `matrixcalc.boxes` formats and prints box borders and multi-line boxes
  with centred text (`box_line`, `box_side`, `format_box`, `print_box`).
- `matrixcalc.menu` shows an arrow-key menu through `new_menu(question,
  options)`. The Up and Down arrows move the selection, Enter chooses it and
  Esc leaves. It returns the 1-based position of the chosen option, or 0 for
  the exit entry or Esc. A `read_key` callable returning `Key` values can be
  passed in place of the terminal; `render_menu` returns the screen as text.
  The exit entry and the instructions line are in Italian.

## What it does not do

- The command only shows the built-in example; it does not read a matrix
  from the user or from a file.
- The menu is not connected to the calculator.
- The `rank`, `is_diagonal`, `is_upper_triangular` and `is_lower_triangular`
  attributes of `Matrix` are never computed and keep their initial values.

## Tests

```
pip install .[test]
pytest
```