"""
Declarative event handling for indexers.

Example:
    >>> from indexkit.handlers import handles, ANY_EVENT
"""

from indexkit.handlers.decorators import (
    ANY_EVENT,
    EventSelector,
    get_handled_selector,
    handles,
    is_event_handler,
    selector_matches,
)
from indexkit.handlers.registry import HandlerInfo, HandlerRegistry, HandlerSignatureError

__all__ = [
    "ANY_EVENT",
    "EventSelector",
    "handles",
    "get_handled_selector",
    "is_event_handler",
    "selector_matches",
    "HandlerRegistry",
    "HandlerInfo",
    "HandlerSignatureError",
]
