from __future__ import annotations

from collections.abc import Iterator

from operations_gen.errors import InvalidOrder


class OrderRange:
    """Restartable ``start..order`` sequence of positions, validated on construction."""

    def __init__(self, order: int, start: int = 1):
        if order < 1:
            raise InvalidOrder(order)
        if start < 1:
            raise InvalidOrder(start, f"Start position must be at least 1 (got {start}).")
        self.order = order
        self.start = start

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.order + 1))

    def __len__(self) -> int:
        return max(0, self.order - self.start + 1)

    def __repr__(self) -> str:
        return f"OrderRange(order={self.order}, start={self.start})"
