# linkedstructs

Small linked data structures and an exact-cover solver:

- `linkedstructs.linked_list.LinkedList`: a singly linked list.
- `linkedstructs.doubly_linked_list.DoublyLinkedList`: a doubly linked list.
- `linkedstructs.dancing_links.DancingLinks`: Knuth's Algorithm X over a
  dancing-links matrix of 0/1 values.
- `linkedstructs.efficient_dancing_links.EfficientDancingLinks`: the same
  algorithm over a matrix of booleans. It keeps every column header and
  cell node it builds in the lists `column_headers` and `rows`.
- `linkedstructs.sudoku.SudokuSolver`: solves 9×9 Sudoku by reducing it to
  exact cover.

It needs Python 3.10 or later and nothing else.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

```python
from linkedstructs.linked_list import LinkedList

items = LinkedList()
items.add(1)
items.add(2)
items.add(3)
items.remove(2)          # removes the first matching value; missing values are ignored
items.to_list()          # [1, 3]
len(items)               # 2
list(items)              # [1, 3]
items.print()            # one value per line on standard output
```

Two `LinkedList` objects compare equal when they hold equal values in the
same order.

`DoublyLinkedList` has the same `add`, `remove`, iteration and `len`, and
prints with `print_forward()`. Its first node is `head`, a `Node` with
`value`, `previous` and `next`. Both printing methods take an optional
`file` to write to in place of standard output.

## Exact cover

```python
from linkedstructs.dancing_links import DancingLinks

matrix = [
    [1, 0, 0, 1, 0, 0, 1],
    [1, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 1, 1, 0, 1],
    [0, 0, 1, 0, 1, 1, 0],
    [0, 1, 1, 0, 0, 1, 1],
    [0, 1, 0, 0, 0, 0, 1],
]
dlx = DancingLinks.from_matrix(matrix)
solutions = dlx.search()   # [[1, 3, 5]]: every exact cover, each a list of row indices
```

`search()` returns the covers in the order it finds them. `columns()` lists
the column headers still linked in, and the static methods `cover` and
`uncover` unlink and relink a single column.

`EfficientDancingLinks.from_matrix` takes a grid of booleans and offers the
same `search`, `cover` and `uncover`.

`DancingLinks.from_matrix` raises `ValueError` for a matrix with no rows.
`EfficientDancingLinks.from_matrix` also raises it when the first row is
empty. Both raise it for a row longer than the first.

## Sudoku

```python
from linkedstructs.sudoku import SudokuSolver, print_grid

grid = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]
solver = SudokuSolver.from_grid(grid)
solution = solver.solve()          # a 9×9 list of digits, or None if unsolvable
print_grid(grid)                   # titled "problem:" by default
if solution is not None:
    print_grid(solution, "solution:")
```

Empty cells are written as `0`. `from_grid` raises `ValueError` when the grid
is not 9×9 or a cell is outside 0 to 9. `solve()` returns the first solution
found. `SudokuSolver.build_row(row_no, col_no, digit)` gives the 324-column
constraint row for one placement. `format_grid` returns the same boxed
layout as a string instead of printing it, and `print_grid` takes an
optional `file`.

## What it does not do

The package is a library only. It has no command-line program, and it reads
no puzzles or matrices from files: you pass them in as Python lists.