import threading

import pytest

from termgrid.sync import FairMutex


def test_lock_gives_shared_data():
    mutex = FairMutex([])
    with mutex.lock() as data:
        data.append(1)
    with mutex.lock_unfair() as data:
        data.append(2)
    with mutex.lock() as data:
        assert data == [1, 2]


def test_try_lock_fails_while_locked():
    mutex = FairMutex([])
    with mutex.lock():
        assert mutex.try_lock_unfair() is None
    guard = mutex.try_lock_unfair()
    with guard as data:
        assert data == []
    assert mutex.try_lock_unfair() is not None and True


def test_released_guard_cannot_be_released_again():
    mutex = FairMutex(0)
    guard = mutex.lock()
    guard.release()
    with pytest.raises(RuntimeError):
        guard.release()
    with pytest.raises(RuntimeError):
        guard.value


def test_lease_does_not_block_unfair_lock():
    mutex = FairMutex(["x"])
    with mutex.lease():
        guard = mutex.try_lock_unfair()
        with guard as data:
            assert data == ["x"]


def test_lease_blocks_fair_lock_until_released():
    mutex = FairMutex([])
    acquired = threading.Event()

    def worker():
        with mutex.lock() as data:
            data.append("worker")
        acquired.set()

    lease = mutex.lease()
    thread = threading.Thread(target=worker)
    thread.start()
    assert not acquired.wait(0.1)
    lease.release()
    assert acquired.wait(2.0)
    thread.join(2.0)
    with mutex.lock() as data:
        assert data == ["worker"]