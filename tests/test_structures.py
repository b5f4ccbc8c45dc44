import pytest

from algokit.structures import BoundedQueue, UnionFind


def test_queue_empty_check():
    q = BoundedQueue()
    assert q.is_empty() is True
    q.enqueue(1)
    assert q.is_empty() is False


def test_queue_enqueue_dequeue():
    q = BoundedQueue()
    q.enqueue(1)
    assert q.dequeue() == 1


def test_queue_is_fifo():
    q = BoundedQueue(10)
    values = [5, 3, 8, 1]
    for v in values:
        q.enqueue(v)
    assert len(q) == len(values)
    assert [q.dequeue() for _ in values] == values
    assert q.is_empty()


def test_queue_dequeue_empty_raises():
    with pytest.raises(IndexError):
        BoundedQueue().dequeue()


def test_queue_full_raises():
    q = BoundedQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    with pytest.raises(OverflowError):
        q.enqueue(3)


def test_queue_reuses_space_after_dequeue():
    q = BoundedQueue(2)
    for round_ in range(5):
        q.enqueue(round_)
        q.enqueue(round_ + 100)
        assert q.dequeue() == round_
        assert q.dequeue() == round_ + 100


def test_default_capacity_holds_hundred_items():
    q = BoundedQueue()
    for i in range(100):
        q.enqueue(i)
    with pytest.raises(OverflowError):
        q.enqueue(100)


def test_unionfind_find_and_connected():
    uf = UnionFind(5)
    assert uf.find(2) == 2
    assert uf.connected(2, 3) is False


def test_unionfind_unite_and_connected():
    uf = UnionFind(5)
    uf.unite(1, 3)
    assert uf.connected(1, 3) is True
    uf.unite(3, 4)
    assert uf.connected(1, 4) is True


def test_unionfind_chain_shares_root():
    uf = UnionFind(5)
    uf.unite(0, 1)
    uf.unite(1, 2)
    assert uf.find(0) == uf.find(2)
    assert uf.connected(0, 3) is False


def test_unionfind_unite_same_set_is_noop():
    uf = UnionFind(3)
    uf.unite(0, 1)
    root = uf.find(0)
    uf.unite(1, 0)
    assert uf.find(1) == root
    assert uf.connected(0, 2) is False