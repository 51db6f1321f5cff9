import pytest

from ftpp.pool import Pool


class Point:
    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    def total(self):
        return self.x + self.y


def test_resize_adds_slots():
    pool = Pool(Point)
    pool.resize(3)
    pool.resize(2)
    assert len(pool) == 5


def test_acquire_and_release_restore_count():
    pool = Pool(Point)
    pool.resize(2)
    obj = pool.acquire(1, y=2)
    assert len(pool) == 1
    assert obj.value.x == 1
    obj.release()
    assert len(pool) == 2
    assert obj.released


def test_attribute_delegation():
    pool = Pool(Point)
    pool.resize(1)
    obj = pool.acquire(4, 5)
    assert obj.y == 5
    assert obj.total() == obj.value.x + obj.value.y


def test_empty_pool_raises():
    pool = Pool(Point)
    with pytest.raises(RuntimeError, match="Pool is empty"):
        pool.acquire()


def test_failed_construction_returns_slot():
    def broken():
        raise KeyError("boom")

    pool = Pool(broken)
    pool.resize(1)
    with pytest.raises(KeyError):
        pool.acquire()
    assert len(pool) == 1


def test_context_manager_releases():
    pool = Pool(Point)
    pool.resize(1)
    with pool.acquire() as obj:
        assert len(pool) == 0
    assert len(pool) == 1
    assert obj.released


def test_double_release_via_pool_raises():
    pool = Pool(Point)
    pool.resize(1)
    obj = pool.acquire()
    pool.release(obj)
    with pytest.raises(ValueError):
        pool.release(obj)
    obj.release()
    assert len(pool) == 1


def test_release_into_foreign_pool_raises():
    first, second = Pool(Point), Pool(Point)
    first.resize(1)
    obj = first.acquire()
    with pytest.raises(ValueError):
        second.release(obj)