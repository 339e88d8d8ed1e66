"""
Event handler decorators.

This module contains the @handles decorator for declarative event handling.
Indexer methods marked with @handles are discovered by HandlerRegistry and
invoked for every event their selector matches.

A selector is one of:
- a string: matches events whose payload ``type`` equals it (``event.kind``)
- a predicate: any callable taking the event and returning a truthy value
- ANY_EVENT: matches every event

Example:
    >>> from indexkit.handlers import handles
    >>>
    >>> class TokenIndexer(Indexer):
    ...     @handles("Transfer")
    ...     async def _on_transfer(self, context, event) -> None:
    ...         await context.save("transfers", event.data)
"""

from collections.abc import Callable
from typing import Any, TypeVar

from indexkit.events.base import BlockEvent

F = TypeVar("F", bound=Callable[..., Any])


class _AnyEvent:
    """Selector matching every event."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ANY_EVENT"


ANY_EVENT = _AnyEvent()

EventSelector = str | Callable[[BlockEvent], Any] | _AnyEvent


def handles(selector: EventSelector) -> Callable[[F], F]:
    """
    Decorator to mark a method as an event handler.

    Args:
        selector: Event kind string, predicate, or ANY_EVENT

    Returns:
        A decorator that marks the handler and returns it unchanged

    Handler Signatures:
        async def handler(self, context: IndexContext, event: BlockEvent) -> None
        async def handler(self, event: BlockEvent) -> None

    Example:
        >>> @handles(lambda e: e.address == "0xdead")
        ... async def _on_burn_address(self, context, event) -> None:
        ...     await context.save("burns", {"block": event.block})
    """
    if not isinstance(selector, (str, _AnyEvent)) and not callable(selector):
        raise TypeError(
            f"@handles selector must be an event kind string, a predicate or ANY_EVENT, "
            f"got {type(selector).__name__}"
        )

    def decorator(func: F) -> F:
        func._handles_selector = selector  # type: ignore[attr-defined]
        return func

    return decorator


def get_handled_selector(func: Any) -> EventSelector | None:
    """
    Get the selector attached by @handles.

    Returns:
        The selector if decorated with @handles, None otherwise
    """
    return getattr(func, "_handles_selector", None)


def is_event_handler(func: Any) -> bool:
    """Check if a function is decorated as an event handler."""
    return hasattr(func, "_handles_selector")


def selector_matches(selector: EventSelector, event: BlockEvent) -> bool:
    """
    Check whether a selector applies to an event.

    Args:
        selector: Selector given to @handles
        event: Event being dispatched

    Returns:
        True if the handler carrying this selector should see the event
    """
    if isinstance(selector, _AnyEvent):
        return True
    if isinstance(selector, str):
        return event.kind == selector
    return bool(selector(event))


def describe_selector(selector: EventSelector) -> str:
    """Human-readable selector name for logs and reprs."""
    if isinstance(selector, str):
        return selector
    if isinstance(selector, _AnyEvent):
        return repr(selector)
    return getattr(selector, "__name__", repr(selector))


__all__ = [
    "ANY_EVENT",
    "EventSelector",
    "handles",
    "get_handled_selector",
    "is_event_handler",
    "selector_matches",
    "describe_selector",
]
