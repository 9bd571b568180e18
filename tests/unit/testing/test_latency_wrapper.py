"""Unit tests for the delay-then-delegate wrapper."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any

import pytest

from latency_harness.kernel.errors import InvalidDelayError
from latency_harness.testing.latency import delayed, validate_delay


class TestValidateDelay:
    def test_int_becomes_float(self) -> None:
        assert validate_delay(1) == 1.0
        assert isinstance(validate_delay(1), float)

    def test_zero_is_valid(self) -> None:
        assert validate_delay(0) == 0.0

    @pytest.mark.parametrize("delay", [-0.5, float("nan"), float("-inf"), "0.1", None, False])
    def test_rejects(self, delay: Any) -> None:
        with pytest.raises(InvalidDelayError) as exc_info:
            validate_delay(delay)
        assert exc_info.value.code == "invalid_delay"


class TestDelayed:
    def test_forwards_args_and_kwargs(self) -> None:
        sleeps: list[float] = []

        def add(a: int, b: int = 0, *rest: int, scale: int = 1) -> int:
            return (a + b + sum(rest)) * scale

        wrapped = delayed(add, 0.1, sleep=sleeps.append)
        assert wrapped(1, 2, 3, scale=2) == 12
        assert sleeps == [0.1]

    def test_does_not_call_before_sleep_returns(self) -> None:
        calls: list[str] = []

        def handler() -> None:
            calls.append("handler")

        wrapped = delayed(handler, 0.2, sleep=lambda _: calls.append("sleep"))
        wrapped()
        assert calls == ["sleep", "handler"]

    def test_exception_passes_through(self) -> None:
        error = ValueError("bad input")

        def handler() -> None:
            raise error

        wrapped = delayed(handler, 0, sleep=lambda _: None)
        with pytest.raises(ValueError) as exc_info:
            wrapped()
        assert exc_info.value is error

    def test_preserves_metadata(self) -> None:
        def handler() -> None:
            """Handle things."""

        wrapped = delayed(handler, 0.3)
        assert wrapped.__name__ == "handler"
        assert wrapped.__doc__ == "Handle things."
        assert wrapped.__wrapped__ is handler
        assert wrapped.__latency_delay__ == 0.3

    def test_coroutine_function_gets_coroutine_wrapper(self) -> None:
        slept: list[float] = []

        async def fake_sleep(delay: float) -> None:
            slept.append(delay)

        async def handler(x: int) -> int:
            return x * 3

        wrapped = delayed(handler, 0.4, async_sleep=fake_sleep)
        assert inspect.iscoroutinefunction(wrapped)
        assert asyncio.run(wrapped(2)) == 6
        assert slept == [0.4]

    def test_invalid_delay_rejected_up_front(self) -> None:
        with pytest.raises(InvalidDelayError):
            delayed(lambda: None, -1)
