"""Knuth's Dancing Links (Algorithm X) for exact cover problems."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional


class Node:
    """A cell of the sparse matrix, linked into a row ring and a column ring."""

    __slots__ = ("row_id", "column", "left", "right", "up", "down")

    def __init__(self, row_id: Optional[int] = None) -> None:
        self.row_id = row_id
        self.column: Optional[ColumnNode] = None
        self.left: Node = self
        self.right: Node = self
        self.up: Node = self
        self.down: Node = self

    def __repr__(self) -> str:
        return f"Node(row_id={self.row_id!r})"


class ColumnNode(Node):
    """A column header that counts the cells currently linked below it."""

    __slots__ = ("size",)

    def __init__(self) -> None:
        super().__init__(None)
        self.size = 0
        self.column = self

    def __repr__(self) -> str:
        return f"ColumnNode(size={self.size})"


def _ring(start: Node, direction: str) -> Iterator[Node]:
    """Yield the nodes met walking from ``start`` in ``direction`` until back at it."""
    node = getattr(start, direction)
    while node is not start:
        following = getattr(node, direction)
        yield node
        node = following


class DancingLinks:
    """The toroidal linked structure of a 0/1 matrix, searched with Algorithm X."""

    def __init__(self) -> None:
        self.root = ColumnNode()

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> "DancingLinks":
        """Build the structure from rows of 0/1 values; cells equal to 1 become nodes."""
        if not matrix:
            raise ValueError("matrix must have at least one row")
        dlx = cls()
        root = dlx.root
        headers: list[ColumnNode] = []
        for _ in range(len(matrix[0])):
            column = ColumnNode()
            column.right = root
            column.left = root.left
            root.left.right = column
            root.left = column
            headers.append(column)

        for row_idx, row in enumerate(matrix):
            if len(row) > len(headers):
                raise ValueError(
                    f"row {row_idx} has {len(row)} cells, expected at most {len(headers)}"
                )
            previous: Optional[Node] = None
            for col_idx, cell in enumerate(row):
                if cell != 1:
                    continue
                column = headers[col_idx]
                node = Node(row_idx)
                node.column = column
                node.down = column
                node.up = column.up
                column.up.down = node
                column.up = node
                column.size += 1

                if previous is not None:
                    node.left = previous
                    node.right = previous.right
                    previous.right.left = node
                    previous.right = node
                previous = node
        return dlx

    def columns(self) -> list[ColumnNode]:
        """Return the column headers still linked into the header ring, left to right."""
        return list(_ring(self.root, "right"))  # type: ignore[arg-type]

    @staticmethod
    def cover(column: ColumnNode) -> None:
        """Unlink ``column`` from the headers and every row it holds from other columns."""
        column.right.left = column.left
        column.left.right = column.right
        for row in _ring(column, "down"):
            for cell in _ring(row, "right"):
                cell.down.up = cell.up
                cell.up.down = cell.down
                cell.column.size -= 1  # type: ignore[union-attr]

    @staticmethod
    def uncover(column: ColumnNode) -> None:
        """Undo :meth:`cover` for ``column``, relinking in reverse order."""
        for row in _ring(column, "up"):
            for cell in _ring(row, "left"):
                cell.column.size += 1  # type: ignore[union-attr]
                cell.down.up = cell
                cell.up.down = cell
        column.right.left = column
        column.left.right = column

    def _choose_column(self) -> ColumnNode:
        best: ColumnNode = self.root.right  # type: ignore[assignment]
        for column in _ring(best, "right"):
            if column is self.root:
                break
            if column.size < best.size:  # type: ignore[attr-defined]
                best = column  # type: ignore[assignment]
        return best

    def _search(self, partial: list[Node]) -> Iterator[list[int]]:
        if self.root.right is self.root:
            yield [node.row_id for node in partial]  # type: ignore[misc]
            return

        column = self._choose_column()
        self.cover(column)
        for row in _ring(column, "down"):
            partial.append(row)
            for cell in _ring(row, "right"):
                self.cover(cell.column)  # type: ignore[arg-type]
            yield from self._search(partial)
            partial.pop()
            for cell in _ring(row, "left"):
                self.uncover(cell.column)  # type: ignore[arg-type]
        self.uncover(column)

    def search(self) -> list[list[int]]:
        """Return every exact cover as a list of row indices, in discovery order."""
        return list(self._search([]))