import pytest

from linkedstructs.efficient_dancing_links import EfficientDancingLinks, Node

KNUTH_MATRIX = [
    [1, 0, 0, 1, 0, 0, 1],
    [1, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 1, 1, 0, 1],
    [0, 0, 1, 0, 1, 1, 0],
    [0, 1, 1, 0, 0, 1, 1],
    [0, 1, 0, 0, 0, 0, 1],
]


def _as_bools(matrix):
    return [[value == 1 for value in row] for row in matrix]


def test_new_node():
    node = Node(1)
    assert node.column is node
    assert node.left is node
    assert node.right is node
    assert node.up is node
    assert node.down is node
    assert node.row_id == 1
    assert node.size == 0


def _check_diagonal(size):
    grid = [[i == j for j in range(size)] for i in range(size)]
    dlx = EfficientDancingLinks.from_matrix(grid)
    root = dlx.root
    cols = dlx.column_headers
    assert len(cols) == size

    assert root.right is cols[0]
    for left, right in zip(cols, cols[1:]):
        assert left.right is right
        assert right.left is left
    assert cols[-1].right is root
    assert root.left is cols[-1]
    assert cols[0].left is root
    assert all(col.size == 1 for col in cols)

    assert len(dlx.rows) == size
    for i, node in enumerate(dlx.rows):
        assert node.row_id == i
        assert node.left is node
        assert node.right is node
        assert node.up.down is node
        assert node.down.up is node
        assert node.column is cols[i]


def test_from_matrix_small_diagonal():
    _check_diagonal(2)


def test_from_matrix_3x3_diagonal():
    _check_diagonal(3)


def test_cover_uncover_column0_on_3x3():
    grid = [
        [True, False, False],
        [True, True, False],
        [False, False, True],
    ]
    dlx = EfficientDancingLinks.from_matrix(grid)
    root = dlx.root
    col0, col1, col2 = dlx.column_headers
    init = (root.right, root.left, col0.size, col1.size, col2.size)

    EfficientDancingLinks.cover(col0)
    assert root.right is col1
    assert col1.left is root
    assert root.left is not col0
    assert root.right is not col0
    assert col1.size == 0

    EfficientDancingLinks.uncover(col0)
    assert (root.right, root.left, col0.size, col1.size, col2.size) == init

    v = col0.down
    count = 0
    while v is not col0:
        assert v.down.up is v
        assert v.up.down is v
        count += 1
        v = v.down
    assert count == 2


def test_row_links_two_cells():
    dlx = EfficientDancingLinks.from_matrix([[True, True, False]])
    first, second = dlx.rows
    assert first.right is second
    assert second.right is first
    assert first.left is second
    assert second.left is first
    assert second.column is dlx.column_headers[1]


def test_search_exact_cover():
    dlx = EfficientDancingLinks.from_matrix(_as_bools(KNUTH_MATRIX))
    results = dlx.search()
    assert len(results) == 1
    assert results[0] == [1, 3, 5]


def test_search_restores_structure():
    dlx = EfficientDancingLinks.from_matrix(_as_bools(KNUTH_MATRIX))
    sizes = [col.size for col in dlx.column_headers]
    dlx.search()
    assert [col.size for col in dlx.column_headers] == sizes
    assert dlx.root.right is dlx.column_headers[0]
    assert dlx.search() == [[1, 3, 5]]


def test_search_multiple_solutions():
    dlx = EfficientDancingLinks.from_matrix([[True, False], [False, True], [True, True]])
    assert sorted(sorted(s) for s in dlx.search()) == [[0, 1], [2]]


def test_search_without_solution():
    dlx = EfficientDancingLinks.from_matrix([[True, False], [True, False]])
    assert dlx.search() == []


@pytest.mark.parametrize("grid", [[], [[]]])
def test_empty_matrix_rejected(grid):
    with pytest.raises(ValueError, match="nonempty"):
        EfficientDancingLinks.from_matrix(grid)


def test_row_longer_than_header_rejected():
    with pytest.raises(ValueError):
        EfficientDancingLinks.from_matrix([[True], [True, True]])