"""Shape registry and the full (order, shape) generation sweep."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator, Sequence

from operations_gen.builder import DEFAULT_NAMESPACE, ArtifactBuilder
from operations_gen.errors import SweepFailed
from operations_gen.models import ArtifactKind, Context, GeneratedArtifact, Mode, Result, Shape
from operations_gen.orders import OrderRange

logger = logging.getLogger(__name__)


def _registry() -> tuple[Shape, ...]:
    shapes = []
    for kind in ArtifactKind:
        for context, mode, result in itertools.product(Context, Mode, Result):
            shapes.append(Shape(mode=mode, result=result, context=context, kind=kind))
    return tuple(shapes)


# Contracts first, then implementations; within a kind stateless before
# stateful, sync before async, action before func.
SHAPES: tuple[Shape, ...] = _registry()


def artifact_key(shape: Shape, order: int) -> str:
    return f"{shape.base_name}.T{order}.g"


def find_shape(name: str, shapes: Sequence[Shape] = SHAPES) -> Shape:
    """Look up a registered shape by its base name, e.g. ``IOperationAsyncFunc``."""
    for shape in shapes:
        if shape.base_name == name:
            return shape
    known = ", ".join(shape.base_name for shape in shapes)
    raise KeyError(f"Unknown shape: {name} (known: {known})")


def iter_cells(max_order: int, shapes: Sequence[Shape] = SHAPES) -> Iterator[tuple[Shape, int]]:
    """Yield every ``(shape, order)`` pair in sweep order.

    Raises:
        InvalidOrder: If ``max_order`` is below 1, before anything is yielded.
    """
    orders = OrderRange(max_order)
    return ((shape, order) for order in orders for shape in shapes)


def generate_all(
    max_order: int,
    shapes: Sequence[Shape] = SHAPES,
    namespace: str = DEFAULT_NAMESPACE,
) -> Iterator[GeneratedArtifact]:
    """Generate every registered shape for orders ``1..max_order``.

    Orders ascend and, within an order, shapes follow registration order. A
    cell that fails to build does not stop the sweep; once every other cell
    has been yielded, ``SweepFailed`` is raised with all recorded failures.

    Args:
        max_order: Highest order to generate, inclusive.
        shapes: Shapes to generate, in emission order.
        namespace: Namespace wrapping every generated definition.

    Returns:
        A lazy iterator of generated artifacts.

    Raises:
        InvalidOrder: If ``max_order`` is below 1. Raised by this call, not on
            first iteration.
    """
    cells = iter_cells(max_order, shapes)
    return _sweep(cells, namespace)


def _sweep(cells: Iterator[tuple[Shape, int]], namespace: str) -> Iterator[GeneratedArtifact]:
    builders: dict[Shape, ArtifactBuilder] = {}
    failures: list[tuple[Shape, int, Exception]] = []
    emitted = 0

    for shape, order in cells:
        builder = builders.setdefault(shape, ArtifactBuilder(shape))
        key = artifact_key(shape, order)
        try:
            text = builder.build(order, namespace=namespace)
        except Exception as exc:
            logger.error("Failed to build %s: %s", key, exc)
            failures.append((shape, order, exc))
            continue

        logger.debug("Built %s (%d chars)", key, len(text))
        emitted += 1
        yield GeneratedArtifact(key=key, text=text, shape=shape, order=order)

    logger.info("Sweep finished: emitted=%d failed=%d", emitted, len(failures))
    if failures:
        raise SweepFailed(failures)
