"""
Handler registry for discovering and routing event handlers.

The registry handles:
- Discovering @handles decorated methods on an owner object
- Validating handler signatures
- Fanning an event out to every handler whose selector matches it

Handlers are kept in a stable order: methods declared on base classes come
before methods declared on subclasses, and methods within one class keep
their definition order. Dispatch therefore never depends on method names,
and adding a handler in a subclass never changes when or how inherited
handlers run.

Example:
    >>> class MyIndexer:
    ...     @handles("Transfer")
    ...     async def _on_transfer(self, context, event) -> None:
    ...         pass
    >>>
    >>> registry = HandlerRegistry(MyIndexer())
    >>> registry.handler_names
    ['_on_transfer']
"""

import inspect
import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

from indexkit.events.base import BlockEvent
from indexkit.handlers.decorators import (
    EventSelector,
    describe_selector,
    get_handled_selector,
    selector_matches,
)

logger = logging.getLogger(__name__)


class HandlerSignatureError(ValueError):
    """
    Raised when an event handler has an invalid signature.

    Attributes:
        handler_name: Name of the handler method
        owner_name: Name of the class containing the handler
        param_count: Actual number of parameters (excluding self)
    """

    def __init__(self, handler_name: str, owner_name: str, param_count: int) -> None:
        self.handler_name = handler_name
        self.owner_name = owner_name
        self.param_count = param_count

        message = (
            f"Handler '{handler_name}' in {owner_name} has invalid signature.\n\n"
            f"Expected one of:\n"
            f"  async def {handler_name}(self, context: IndexContext, event: BlockEvent) -> None\n"
            f"  async def {handler_name}(self, event: BlockEvent) -> None\n\n"
            f"Got: {param_count} parameter(s) (excluding self)"
        )

        super().__init__(message)


@dataclass(frozen=True)
class HandlerInfo:
    """
    Metadata about a registered event handler.

    Attributes:
        selector: The selector given to @handles
        handler_name: Name of the handler method
        handler: The bound handler method
        is_async: Whether the handler is a coroutine function
        param_count: 1 for event-only handlers, 2 for context+event handlers
    """

    selector: EventSelector
    handler_name: str
    handler: Callable[..., Coroutine[Any, Any, None]]
    is_async: bool
    param_count: int

    def matches(self, event: BlockEvent) -> bool:
        return selector_matches(self.selector, event)


class HandlerRegistry:
    """
    Registry for discovering, validating, and routing event handlers.

    Example:
        >>> registry = HandlerRegistry(indexer)
        >>> invoked = await registry.dispatch(event, context)
    """

    def __init__(self, owner: Any, *, validate_on_init: bool = True) -> None:
        """
        Initialize the handler registry.

        Args:
            owner: The object containing @handles decorated methods
            validate_on_init: If True, validate handlers during __init__

        Raises:
            ValueError: If a handler is not async
            HandlerSignatureError: If a handler takes the wrong number of parameters
        """
        self._owner = owner
        self._owner_name = owner.__class__.__name__
        self._handlers: list[HandlerInfo] = []

        self._discover_handlers()

        if validate_on_init:
            self._validate_handlers()

    def _attribute_names(self) -> list[str]:
        """Attribute names of the owner's class, base classes first, in definition order."""
        names: dict[str, None] = {}
        for klass in reversed(type(self._owner).__mro__):
            for attr_name in vars(klass):
                if not attr_name.startswith("__"):
                    names.setdefault(attr_name)
        return list(names)

    def _discover_handlers(self) -> None:
        for attr_name in self._attribute_names():
            attr = getattr(self._owner, attr_name, None)
            if attr is None:
                continue

            selector = get_handled_selector(attr)
            if selector is None:
                continue

            is_async = inspect.iscoroutinefunction(attr)

            # Bound methods exclude self
            try:
                param_count = len(inspect.signature(attr).parameters)
            except (ValueError, TypeError):
                param_count = 2

            self._handlers.append(
                HandlerInfo(
                    selector=selector,
                    handler_name=attr_name,
                    handler=attr,
                    is_async=is_async,
                    param_count=param_count,
                )
            )

            logger.debug(
                "Registered handler %s for %s",
                attr_name,
                describe_selector(selector),
                extra={
                    "owner": self._owner_name,
                    "handler": attr_name,
                    "selector": describe_selector(selector),
                    "param_count": param_count,
                },
            )

    def _validate_handlers(self) -> None:
        for handler_info in self._handlers:
            handler_name = handler_info.handler_name

            if not handler_info.is_async:
                raise ValueError(
                    f"Handler '{handler_name}' in {self._owner_name} must be async.\n\n"
                    f"Change:\n"
                    f"  def {handler_name}(self, ...)\n\n"
                    f"To:\n"
                    f"  async def {handler_name}(self, context, event) -> None"
                )

            if handler_info.param_count not in (1, 2):
                raise HandlerSignatureError(
                    handler_name=handler_name,
                    owner_name=self._owner_name,
                    param_count=handler_info.param_count,
                )

    def handlers_for(self, event: BlockEvent) -> list[HandlerInfo]:
        """
        Get the handlers that apply to an event, in dispatch order.

        Args:
            event: The event to match

        Returns:
            Matching handlers (possibly empty)
        """
        return [info for info in self._handlers if info.matches(event)]

    async def dispatch(self, event: BlockEvent, context: Any = None) -> int:
        """
        Invoke every handler whose selector matches the event.

        Handlers run one at a time in registry order. An exception raised by
        a handler propagates and the remaining handlers are not invoked.

        Args:
            event: The event to dispatch
            context: Context passed to two-parameter handlers

        Returns:
            Number of handlers invoked
        """
        invoked = 0
        for handler_info in self.handlers_for(event):
            if handler_info.param_count == 1:
                await handler_info.handler(event)
            else:
                await handler_info.handler(context, event)
            invoked += 1

        if invoked == 0:
            logger.debug(
                "No handler in %s matched event at block %d",
                self._owner_name,
                event.block,
                extra={"owner": self._owner_name, "block": event.block},
            )
        return invoked

    @property
    def owner(self) -> Any:
        """Get the owner object."""
        return self._owner

    @property
    def handler_names(self) -> list[str]:
        """Names of the registered handlers in dispatch order."""
        return [info.handler_name for info in self._handlers]

    @property
    def handler_count(self) -> int:
        """Get the number of registered handlers."""
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"HandlerRegistry({self._owner_name}, handlers={self.handler_count})"


__all__ = [
    "HandlerRegistry",
    "HandlerInfo",
    "HandlerSignatureError",
]
