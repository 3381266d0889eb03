"""Runtime counterpart of the generated implementation classes.

``Operation`` holds one handler per position and dispatches strictly by
position: invoking position ``k`` calls only the ``k``-th handler, whatever
the runtime type of the input.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from operations_gen.errors import NullHandler
from operations_gen.models import ArtifactKind, Shape
from operations_gen.orders import OrderRange

_UNSET: Any = object()


class Operation:
    """Positional single-dispatch operation backed by externally supplied handlers.

    Handlers receive ``(input)`` or ``(input, state)`` for stateful shapes.
    For asynchronous shapes each handler must return an awaitable, and
    ``invoke`` returns an awaitable as well.
    """

    def __init__(
        self,
        shape: Shape,
        handlers: Sequence[Callable[..., Any] | None],
        order: int | None = None,
    ):
        """Create an operation with exactly ``order`` handlers.

        Args:
            shape: Axis combination the operation follows. Its kind is ignored;
                the operation always behaves as an implementation.
            handlers: One handler per position, position 1 first.
            order: Expected number of positions. Defaults to ``len(handlers)``.

        Raises:
            InvalidOrder: If the order is below 1.
            NullHandler: If a position has no handler. Positions are checked
                from 1 upward and the first missing one is reported.
            ValueError: If more handlers than positions are supplied.
            TypeError: If a supplied handler is not callable.
        """
        positions = OrderRange(len(handlers) if order is None else order)
        if len(handlers) > len(positions):
            raise ValueError(f"Expected {len(positions)} handlers, got {len(handlers)}.")

        for position in positions:
            handler = handlers[position - 1] if position <= len(handlers) else None
            if handler is None:
                raise NullHandler(position)
            if not callable(handler):
                raise TypeError(f"Handler for position {position} is not callable: {handler!r}")

        self.shape = shape.model_copy(update={"kind": ArtifactKind.IMPLEMENTATION})
        self._handlers: tuple[Callable[..., Any], ...] = tuple(handlers)

    @property
    def order(self) -> int:
        return len(self._handlers)

    def __len__(self) -> int:
        return self.order

    def __repr__(self) -> str:
        return f"Operation({self.shape.base_name}, order={self.order})"

    def invoke(self, position: int, value: Any, state: Any = _UNSET) -> Any:
        """Dispatch ``value`` to the handler at ``position`` (1-based).

        Returns the handler's result for func shapes and ``None`` for actions.
        Asynchronous shapes return an awaitable resolving to the same.
        """
        handler = self._handler_at(position)
        if self.shape.is_stateful:
            if state is _UNSET:
                raise TypeError(f"{self.shape.base_name} requires a state argument.")
            outcome = handler(value, state)
        else:
            if state is not _UNSET:
                raise TypeError(f"{self.shape.base_name} does not accept a state argument.")
            outcome = handler(value)

        if self.shape.is_async:
            return self._settle(outcome)
        return outcome if self.shape.returns_value else None

    async def _settle(self, outcome: Awaitable[Any]) -> Any:
        value = await outcome
        return value if self.shape.returns_value else None

    def _handler_at(self, position: int) -> Callable[..., Any]:
        if not 1 <= position <= self.order:
            raise IndexError(f"Position must be between 1 and {self.order} (got {position}).")
        return self._handlers[position - 1]


def operation(shape: Shape, *handlers: Callable[..., Any] | None) -> Operation:
    """Shorthand for ``Operation(shape, handlers)``."""
    return Operation(shape, handlers)
