import pytest

from tilebrush.operationqueue import (
    DrawDabOperation,
    OperationQueue,
    remove_duplicate_tiles,
)


def _op(x):
    return DrawDabOperation(x=x, y=0.0, radius=1.0)


def test_remove_duplicate_tiles_keeps_first_order():
    tiles = [(1, 1), (0, 0), (1, 1), (2, 3), (0, 0)]
    assert remove_duplicate_tiles(tiles) == [(1, 1), (0, 0), (2, 3)]


@pytest.mark.parametrize("tiles", [[], [(4, 4)]])
def test_remove_duplicate_tiles_short_lists(tiles):
    assert remove_duplicate_tiles(tiles) == tiles


def test_fifo_order_per_tile():
    q = OperationQueue()
    ops = [_op(i) for i in range(3)]
    for op in ops:
        q.add((0, 0), op)
    assert [q.pop((0, 0)) for _ in range(3)] == ops
    assert q.pop((0, 0)) is None


def test_pop_unknown_and_out_of_range():
    q = OperationQueue(2)
    assert q.pop((0, 0)) is None
    assert q.pop((500, 500)) is None


def test_peek_first_and_last():
    q = OperationQueue()
    a, b = _op(1), _op(2)
    q.add((3, -3), a)
    q.add((3, -3), b)
    assert q.peek_first((3, -3)) is a
    assert q.peek_last((3, -3)) is b
    assert q.peek_first((0, 0)) is None
    assert q.peek_last((999, 0)) is None
    assert q.pop((3, -3)) is a


def test_dirty_tiles_distinct_and_ordered():
    q = OperationQueue()
    q.add((1, 0), _op(0))
    q.add((0, 1), _op(1))
    q.add((1, 0), _op(2))
    assert q.dirty_tiles() == [(1, 0), (0, 1)]


def test_clear_dirty_tiles():
    q = OperationQueue()
    q.add((0, 0), _op(0))
    q.clear_dirty_tiles()
    assert q.dirty_tiles() == []
    # queued operations are untouched by clearing
    assert q.pop((0, 0)).x == 0


def test_drained_tile_becomes_dirty_again():
    q = OperationQueue()
    q.add((2, 2), _op(0))
    q.pop((2, 2))
    q.clear_dirty_tiles()
    q.add((2, 2), _op(1))
    assert q.dirty_tiles() == [(2, 2)]


def test_grows_to_fit_far_tiles():
    q = OperationQueue(1)
    op = _op(7)
    q.add((100, -50), op)
    assert q.size >= 101
    assert q.pop((100, -50)) is op
    assert q.dirty_tiles() == [(100, -50)]


def test_growth_keeps_existing_queues():
    q = OperationQueue(1)
    first = _op(1)
    q.add((0, 0), first)
    q.add((30, 30), _op(2))
    assert q.pop((0, 0)) is first
    assert q.dirty_tiles() == [(0, 0), (30, 30)]