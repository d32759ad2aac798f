import pytest

from simulator.core.request import Request, RequestQueue


def test_requests_order_by_floor():
    assert Request(2) < Request(7)
    assert sorted([Request(5), Request(1), Request(3)]) == [Request(1), Request(3), Request(5)]


def test_request_is_immutable():
    request = Request(4)
    with pytest.raises(AttributeError):
        request.floor = 5


def test_request_rejects_floor_below_one():
    with pytest.raises(ValueError):
        Request(0)


def test_ascending_queue_yields_lowest_floor_first():
    queue = RequestQueue(ascending=True)
    for floor in (7, 3, 9, 4):
        queue.push(Request(floor))

    assert queue.peek() == Request(3)
    assert [queue.pop().floor for _ in range(len(queue))] == [3, 4, 7, 9]
    assert not queue


def test_descending_queue_yields_highest_floor_first():
    queue = RequestQueue(ascending=False)
    for floor in (2, 8, 5):
        queue.push(Request(floor))

    assert queue.floors() == [8, 5, 2]
    assert queue.pop() == Request(8)
    assert len(queue) == 2


def test_pop_floor_removes_duplicates_at_head_only():
    queue = RequestQueue(ascending=True)
    for floor in (4, 6, 4):
        queue.push(Request(floor))

    served = queue.pop_floor(4)

    assert served == [Request(4), Request(4)]
    assert queue.floors() == [6]
    assert queue.pop_floor(3) == []


def test_empty_queue_peek_and_pop_raise():
    queue = RequestQueue()
    with pytest.raises(IndexError):
        queue.peek()
    with pytest.raises(IndexError):
        queue.pop()
