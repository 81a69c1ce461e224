import threading
import time

import pytest

from patternkit.futures import CallbackPromise, Future, Promise, run_async


def test_run_async_returns_result():
    future = run_async(lambda: "Hello, world")
    assert future.get(timeout=5) == "Hello, world"


def test_future_get_can_be_repeated():
    future = run_async(lambda: "Hello, world")
    first = future.get(timeout=5)
    assert future.get(timeout=5) == first
    assert future.done()


def test_run_async_propagates_error():
    def failing():
        raise ValueError("some error")

    future = run_async(failing)
    with pytest.raises(ValueError, match="some error"):
        future.get(timeout=5)


def test_get_times_out_until_resolved():
    gate = threading.Event()

    def slow():
        gate.wait()
        return "ok"

    future = run_async(slow)
    with pytest.raises(TimeoutError):
        future.get(timeout=0.05)
    assert not future.done()
    gate.set()
    assert future.get(timeout=5) == "ok"


def test_promise_resolves_future_from_other_thread():
    promise = Promise()
    future = promise.get_future()

    def later():
        time.sleep(0.05)
        promise.set("Hello, world")

    threading.Thread(target=later).start()
    assert future.get(timeout=5) == "Hello, world"
    assert promise.get_future() is future


def test_promise_set_twice_raises():
    promise = Promise()
    promise.set("ok")
    with pytest.raises(RuntimeError):
        promise.set("ok")
    assert promise.get_future().get(timeout=1) == "ok"


def test_unresolved_future_times_out():
    future = Future()
    with pytest.raises(TimeoutError):
        future.get(timeout=0.01)


def test_callback_promise_success():
    successes, errors = [], []
    promise = CallbackPromise(lambda: "ok")
    promise.then(successes.append, errors.append).get(timeout=5)
    assert successes == ["ok"]
    assert errors == []


def test_callback_promise_error():
    def failing():
        raise RuntimeError("some error")

    successes, errors = [], []
    promise = CallbackPromise(failing)
    promise.then(successes.append, errors.append).get(timeout=5)
    assert successes == []
    assert [str(error) for error in errors] == ["some error"]