import threading
from unittest.mock import Mock

import pytest

from movie_catalog.infrastructure.concurrency.rw_lock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=2)
    results = []

    def reader():
        with lock.read_locked():
            # both readers must be inside at once to pass the barrier
            barrier.wait()
            results.append(True)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert results == [True, True]


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    lock.acquire_write()
    thread = threading.Thread(target=reader)
    thread.start()

    assert not entered.wait(timeout=0.2)

    lock.release_write()
    assert entered.wait(timeout=2)
    thread.join(timeout=2)


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def writer():
        with lock.write_locked():
            entered.set()

    lock.acquire_read()
    thread = threading.Thread(target=writer)
    thread.start()

    assert not entered.wait(timeout=0.2)

    lock.release_read()
    assert entered.wait(timeout=2)
    thread.join(timeout=2)


def test_lock_released_when_body_raises():
    lock = ReadWriteLock()

    try:
        with lock.write_locked():
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            acquired.set()

    thread = threading.Thread(target=reader)
    thread.start()
    assert acquired.wait(timeout=2)
    thread.join(timeout=2)


def test_interrupted_writer_wakes_waiting_readers(monkeypatch):
    lock = ReadWriteLock()
    lock.acquire_read()
    notify_all = Mock(wraps=lock._cond.notify_all)
    monkeypatch.setattr(lock._cond, "wait", Mock(side_effect=RuntimeError("interrupted")))
    monkeypatch.setattr(lock._cond, "notify_all", notify_all)

    with pytest.raises(RuntimeError):
        lock.acquire_write()

    notify_all.assert_called_once()
    assert lock._waiting_writers == 0
    assert lock._writer is False

    # a new reader is no longer held back by the abandoned writer
    monkeypatch.undo()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    thread = threading.Thread(target=reader)
    thread.start()
    assert entered.wait(timeout=2)
    thread.join(timeout=2)
    lock.release_read()
