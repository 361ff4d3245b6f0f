import os
import threading
import time

import pytest

from clappie.filestore.lock import FileLock, LockTimeout


def test_lock_path_has_suffix(tmp_path):
    target = tmp_path / "data.txt"
    assert FileLock(target).path == str(target) + ".lock"


def test_lock_creates_and_unlock_removes_file(tmp_path):
    target = tmp_path / "sub" / "data.txt"
    lock = FileLock(target)
    lock.lock()
    assert os.path.exists(lock.path)
    assert FileLock(target).try_lock() is False
    lock.unlock()
    assert not os.path.exists(lock.path)
    other = FileLock(target)
    assert other.try_lock() is True
    other.unlock()


def test_try_lock_fails_while_other_holds(tmp_path):
    first = FileLock(tmp_path / "data.txt")
    second = FileLock(tmp_path / "data.txt")
    assert first.try_lock() is True
    assert second.try_lock() is False
    first.unlock()
    assert second.try_lock() is True
    second.unlock()


def test_try_lock_same_instance_twice(tmp_path):
    lock = FileLock(tmp_path / "data.txt")
    assert lock.try_lock() is True
    assert lock.try_lock() is False
    lock.unlock()


def test_unlock_without_lock_raises(tmp_path):
    with pytest.raises(RuntimeError):
        FileLock(tmp_path / "data.txt").unlock()


def test_context_manager_releases(tmp_path):
    lock = FileLock(tmp_path / "data.txt")
    with lock as held:
        assert held is lock
        assert FileLock(tmp_path / "data.txt").try_lock() is False
    other = FileLock(tmp_path / "data.txt")
    assert other.try_lock() is True
    other.unlock()


def test_with_timeout_runs_block(tmp_path):
    lock = FileLock(tmp_path / "data.txt")
    results = []
    with lock.with_timeout(1.0):
        results.append(os.path.exists(lock.path))
    assert results == [True]
    assert not os.path.exists(lock.path)


def test_with_timeout_raises_when_held(tmp_path):
    holder = FileLock(tmp_path / "data.txt")
    holder.lock()
    try:
        with pytest.raises(LockTimeout):
            with FileLock(tmp_path / "data.txt").with_timeout(0.05):
                pass
    finally:
        holder.unlock()


def test_blocking_lock_waits_for_release(tmp_path):
    holder = FileLock(tmp_path / "data.txt")
    holder.lock()
    order = []

    def worker():
        waiter = FileLock(tmp_path / "data.txt")
        waiter.lock()
        order.append("acquired")
        order.append(FileLock(tmp_path / "data.txt").try_lock())
        waiter.unlock()

    thread = threading.Thread(target=worker)
    thread.start()
    time.sleep(0.1)
    order.append("releasing")
    holder.unlock()
    thread.join(timeout=5)
    assert order == ["releasing", "acquired", False]
    final = FileLock(tmp_path / "data.txt")
    assert final.try_lock() is True
    final.unlock()