"""Fault taxonomy for generation and runtime dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from operations_gen.models import Shape


class InvalidOrder(ValueError):
    """Raised when an order (arity) below 1 is requested."""

    def __init__(self, order: int, message: str | None = None):
        self.order = order
        super().__init__(message or f"Order must be at least 1 (got {order}).")


class NullHandler(ValueError):
    """Raised when an implementation is constructed without a handler for a position."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Handler for position {position} (t{position}) must not be None.")


class SweepFailed(RuntimeError):
    """Raised after a sweep completes when one or more cells failed to build."""

    def __init__(self, failures: list[tuple[Shape, int, Exception]]):
        self.failures = failures
        cells = ", ".join(f"{shape.base_name}.T{order}" for shape, order, _ in failures)
        super().__init__(f"Generation failed for {len(failures)} cell(s): {cells}")
