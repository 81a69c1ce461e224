import threading
import time

import pytest

from patternkit.primitives import BlockingQueue, CallOnce, ErrorGroup, Semaphore


def test_semaphore_limits_concurrency():
    semaphore = Semaphore(2)
    lock = threading.Lock()
    active = [0]
    peak = [0]
    finished = []

    def routine(number):
        def run():
            with lock:
                active[0] += 1
                peak[0] = max(peak[0], active[0])
            time.sleep(0.02)
            with lock:
                active[0] -= 1
                finished.append(number)

        return run

    threads = [semaphore.go(routine(n)) for n in range(6)]
    for thread in threads:
        thread.join(5)
    assert len(threads) == 6
    assert not any(thread.is_alive() for thread in threads)
    assert sorted(finished) == list(range(6))
    assert peak[0] <= 2


def test_semaphore_release_without_acquire_raises():
    semaphore = Semaphore(1)
    with pytest.raises(ValueError):
        semaphore.release()


def test_semaphore_negative_value_raises():
    with pytest.raises(ValueError):
        Semaphore(-1)


def test_semaphore_context_manager_returns_slot():
    semaphore = Semaphore(1)
    with semaphore:
        pass
    with semaphore:
        pass
    with pytest.raises(ValueError):
        semaphore.release()


def test_blocking_queue_is_fifo():
    queue = BlockingQueue()
    for value in ["[Data] #0", "[Data] #1", "[Data] #2"]:
        queue.push(value)
    assert len(queue) == 3
    assert [queue.front() for _ in range(3)] == ["[Data] #0", "[Data] #1", "[Data] #2"]
    assert len(queue) == 0


def test_blocking_queue_front_waits_for_push():
    queue = BlockingQueue()
    received = []
    consumer = threading.Thread(target=lambda: received.append(queue.front()))
    consumer.start()
    time.sleep(0.05)
    assert received == []
    assert len(queue) == 0
    queue.push("[Data] #0")
    consumer.join(5)
    assert received == ["[Data] #0"]
    assert len(queue) == 0


def test_call_once_runs_action_once_across_threads():
    guard = CallOnce()
    calls = []
    outcomes = []
    lock = threading.Lock()

    def action():
        time.sleep(0.02)
        with lock:
            calls.append(1)

    def caller():
        ran = guard.once(action)
        with lock:
            outcomes.append(ran)

    threads = [threading.Thread(target=caller) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)
    assert sorted(outcomes) == [False, False, False, False, True]
    assert len(calls) == 1
    assert guard.once(action) is False


def test_call_once_reports_whether_it_ran():
    guard = CallOnce()
    assert guard.once(lambda: None) is True
    assert guard.once(lambda: None) is False


def test_call_once_failing_action_still_counts():
    guard = CallOnce()
    calls = []

    def failing():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        guard.once(failing)
    assert guard.once(lambda: calls.append(1)) is False
    assert calls == []


def test_error_group_raises_first_error():
    group = ErrorGroup()

    def task(i):
        def run():
            if i == 0:
                raise RuntimeError(f"error occured #{i}")

        return run

    for i in range(5):
        group.go(task(i))
    with pytest.raises(RuntimeError, match="error occured #0"):
        group.wait()
    assert group.done.is_set()


def test_error_group_success_runs_all_tasks():
    group = ErrorGroup()
    results = []
    lock = threading.Lock()

    def task(i):
        def run():
            with lock:
                results.append(i)

        return run

    for i in range(5):
        group.go(task(i))
    group.wait()
    assert sorted(results) == list(range(5))
    assert not group.done.is_set()


def test_error_group_skips_tasks_after_failure():
    group = ErrorGroup()

    def failing():
        raise RuntimeError("error occured #0")

    group.go(failing)
    with pytest.raises(RuntimeError):
        group.wait()
    ran = []
    group.go(lambda: ran.append(1))
    with pytest.raises(RuntimeError):
        group.wait()
    assert ran == []