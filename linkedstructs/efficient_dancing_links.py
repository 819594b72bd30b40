"""Dancing Links (Algorithm X) over a matrix of booleans, keeping every node it builds."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class Node:
    """A node of the toroidal structure; headers use ``size``, cells use ``row_id``."""

    __slots__ = ("row_id", "size", "column", "left", "right", "up", "down")

    def __init__(self, row_id: int = 0) -> None:
        self.row_id = row_id
        self.size = 0
        self.column: Node = self
        self.left: Node = self
        self.right: Node = self
        self.up: Node = self
        self.down: Node = self

    def __repr__(self) -> str:
        return f"Node(row_id={self.row_id}, size={self.size})"


def _walk_right(start: Node) -> Iterator[Node]:
    node = start.right
    while node is not start:
        yield node
        node = node.right


def _walk_left(start: Node) -> Iterator[Node]:
    node = start.left
    while node is not start:
        yield node
        node = node.left


def _walk_down(start: Node) -> Iterator[Node]:
    node = start.down
    while node is not start:
        yield node
        node = node.down


def _walk_up(start: Node) -> Iterator[Node]:
    node = start.up
    while node is not start:
        yield node
        node = node.up


class EfficientDancingLinks:
    """The linked form of a boolean matrix, with its headers and cells kept in lists."""

    def __init__(self) -> None:
        self.root = Node(0)
        self.column_headers: list[Node] = []
        self.rows: list[Node] = []

    @classmethod
    def from_matrix(cls, grid: Sequence[Sequence[bool]]) -> "EfficientDancingLinks":
        """Build the structure from ``grid``; every true cell becomes a node."""
        if not grid or not grid[0]:
            raise ValueError("matrix must be nonempty")
        dlx = cls()
        root = dlx.root
        for _ in range(len(grid[0])):
            column = Node(0)
            column.right = root
            column.left = root.left
            root.left.right = column
            root.left = column
            dlx.column_headers.append(column)

        for row_idx, row in enumerate(grid):
            if len(row) > len(dlx.column_headers):
                raise ValueError(
                    f"row {row_idx} has {len(row)} cells, "
                    f"expected at most {len(dlx.column_headers)}"
                )
            previous: Node | None = None
            for col_idx, cell in enumerate(row):
                if not cell:
                    continue
                column = dlx.column_headers[col_idx]
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
                dlx.rows.append(node)
        return dlx

    @staticmethod
    def cover(column: Node) -> None:
        """Unlink ``column`` from the headers and its rows from the other columns."""
        column.right.left = column.left
        column.left.right = column.right
        for row in _walk_down(column):
            for cell in _walk_right(row):
                cell.down.up = cell.up
                cell.up.down = cell.down
                cell.column.size -= 1

    @staticmethod
    def uncover(column: Node) -> None:
        """Reverse :meth:`cover` for ``column``."""
        for row in _walk_up(column):
            for cell in _walk_left(row):
                cell.column.size += 1
                cell.down.up = cell
                cell.up.down = cell
        column.right.left = column
        column.left.right = column

    def _choose_column(self) -> Node:
        best = self.root.right
        for column in _walk_right(self.root):
            if column.size < best.size:
                best = column
        return best

    def _search(self, partial: list[Node]) -> Iterator[list[int]]:
        if self.root.right is self.root:
            yield [node.row_id for node in partial]
            return
        column = self._choose_column()
        self.cover(column)
        for row in _walk_down(column):
            partial.append(row)
            for cell in _walk_right(row):
                self.cover(cell.column)
            yield from self._search(partial)
            partial.pop()
            for cell in _walk_left(row):
                self.uncover(cell.column)
        self.uncover(column)

    def search(self) -> list[list[int]]:
        """Return every exact cover as row indices, in the order they are found."""
        return list(self._search([]))