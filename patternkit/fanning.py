"""Fan-in, fan-out, tee and a two-stage parallel parsing pipeline over channels."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import TypeVar

from .channel import Channel

T = TypeVar("T")


def _spawn(target: Callable[[], None]) -> threading.Thread:
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


def _close_after(threads: list[threading.Thread], output: Channel) -> None:
    def run() -> None:
        for thread in threads:
            thread.join()
        output.close()

    _spawn(run)


def _check_count(n: int) -> None:
    if n <= 0:
        raise ValueError("channel count must be positive")


def merge_channels(*args: Channel[T]) -> Channel[T]:
    """Forward every value of every input into one channel, closed when all inputs are."""
    output: Channel[T] = Channel()

    def forward(channel: Channel[T]) -> Callable[[], None]:
        def run() -> None:
            for item in channel:
                output.send(item)

        return run

    _close_after([_spawn(forward(channel)) for channel in args], output)
    return output


def _round_robin(
    input_channel: Channel[T], n: int, convert: Callable[[T], T]
) -> list[Channel[T]]:
    _check_count(n)
    outputs: list[Channel[T]] = [Channel() for _ in range(n)]

    def run() -> None:
        try:
            for index, value in enumerate(input_channel):
                outputs[index % n].send(convert(value))
        finally:
            for channel in outputs:
                channel.close()

    _spawn(run)
    return outputs


def split_channel(input_channel: Channel[T], n: int) -> list[Channel[T]]:
    """Distribute the values of ``input_channel`` round-robin over ``n`` channels."""
    return _round_robin(input_channel, n, lambda value: value)


def tee_channel(input_channel: Channel[T], n: int) -> list[Channel[T]]:
    """Copy every value of ``input_channel`` into each of ``n`` channels."""
    _check_count(n)
    outputs: list[Channel[T]] = [Channel() for _ in range(n)]

    def run() -> None:
        try:
            for value in input_channel:
                for channel in outputs:
                    channel.send(value)
        finally:
            for channel in outputs:
                channel.close()

    _spawn(run)
    return outputs


def parse_data(data_channel: Channel[str]) -> Channel[str]:
    """Tag each value with its running index as ``[parsed][NN] value``."""
    output: Channel[str] = Channel()

    def run() -> None:
        try:
            for index, value in enumerate(data_channel):
                output.send(f"[parsed][{index:02d}] {value}")
        finally:
            output.close()

    _spawn(run)
    return output


def send_parsed_data(parsed_channel: Channel[str], n: int) -> Channel[str]:
    """Have ``n`` workers share ``parsed_channel``, each tagging values with its number."""
    _check_count(n)
    output: Channel[str] = Channel()

    def worker(number: int) -> Callable[[], None]:
        def run() -> None:
            for value in parsed_channel:
                output.send(f"[send][{number:02d}] {value}")

        return run

    _close_after([_spawn(worker(number)) for number in range(n)], output)
    return output


def parse_data_split(data_channel: Channel[str], n: int) -> list[Channel[str]]:
    """Tag each value as ``[parsed] value`` and spread them round-robin over ``n`` channels."""
    return _round_robin(data_channel, n, lambda value: f"[parsed] {value}")


def send_parsed(parsed_channel: Channel[str]) -> Channel[str]:
    """Tag each value of ``parsed_channel`` as ``[send] value``."""
    output: Channel[str] = Channel()

    def run() -> None:
        try:
            for value in parsed_channel:
                output.send(f"[send] {value}")
        finally:
            output.close()

    _spawn(run)
    return output