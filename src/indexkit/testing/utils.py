"""Miscellaneous helpers for indexing tests."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from indexkit.exceptions import RepeatedTestFailure


async def repeat_test(times: int, fn: Callable[[], Awaitable[None]]) -> None:
    """
    Run an async test body several times, stopping at the first failure.

    Args:
        times: Number of iterations
        fn: Zero-argument coroutine function holding the test body

    Raises:
        RepeatedTestFailure: Wrapping the first failure, with the iteration
            index it happened on

    Example:
        >>> async def body() -> None:
        ...     await env.run_indexer()
        ...     await env.assert_state(expected)
        >>> await repeat_test(5, body)
    """
    for iteration in range(times):
        try:
            await fn()
        except Exception as exc:
            raise RepeatedTestFailure(iteration, exc) from exc


__all__ = ["repeat_test"]
