"""维度规范化与维度视图测试"""

import pytest

from topo_graph import DimensionsView, InvalidArgumentError, OutOfRangeError, canonicalize_dimensions
from topo_graph.topology.dimensions import format_dimensions


@pytest.mark.parametrize("raw,expected", [
    ([3, 1, 5, 1, 2], (5, 3, 2)),
    ([2, 2, 3], (3, 2, 2)),
    ([4], (4,)),
    ([1, 7, 1], (7,)),
    ([], (1,)),
    ([1, 1, 1], (1,)),
    ((6, 2), (6, 2)),
])
def test_canonicalize(raw, expected):
    assert canonicalize_dimensions(raw) == expected


@pytest.mark.parametrize("raw", [[3, 1, 5, 1, 2], [2, 2, 3], [], [1, 1], [9, 4, 4, 1]])
def test_canonicalize_is_idempotent(raw):
    once = canonicalize_dimensions(raw)
    assert canonicalize_dimensions(once) == once


@pytest.mark.parametrize("raw", [[0], [2, 0, 3], [-1], [2.5], [3, None]])
def test_canonicalize_rejects_invalid(raw):
    with pytest.raises(InvalidArgumentError):
        canonicalize_dimensions(raw)


def test_canonicalize_accepts_generators():
    assert canonicalize_dimensions(d for d in (1, 2, 3)) == (3, 2)


def test_format_dimensions():
    assert format_dimensions((5, 3, 2)) == "5,3,2"
    assert format_dimensions((7,)) == "7"
    assert format_dimensions((1,)) == ""


def test_dimensions_view_indexing():
    view = DimensionsView((5, 3, 2))
    assert len(view) == 3
    assert view[0] == 5
    assert view[2] == 2
    assert list(view) == [5, 3, 2]
    assert view == [5, 3, 2]
    assert view == (5, 3, 2)
    assert view != [5, 3]
    assert 3 in view
    assert view[1:] == (3, 2)


@pytest.mark.parametrize("index", [3, 10, -1])
def test_dimensions_view_out_of_range(index):
    view = DimensionsView((5, 3, 2))
    with pytest.raises(OutOfRangeError):
        view[index]


def test_out_of_range_is_index_error():
    with pytest.raises(IndexError):
        DimensionsView((1,))[1]
