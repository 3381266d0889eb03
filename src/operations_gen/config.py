"""Configuration resolution for the generation sweep."""

from __future__ import annotations

import os

from operations_gen.builder import DEFAULT_NAMESPACE
from operations_gen.errors import InvalidOrder

DEFAULT_MAX_ORDER = 20
MAX_ORDER_ENV = "OPERATIONS_GEN_MAX_ORDER"
NAMESPACE_ENV = "OPERATIONS_GEN_NAMESPACE"


def resolve_max_order(explicit: int | None = None) -> int:
    """Resolve the highest order to generate.

    Resolution order:
    1. ``explicit`` value (e.g. a CLI option).
    2. ``OPERATIONS_GEN_MAX_ORDER`` environment variable.
    3. ``DEFAULT_MAX_ORDER``.

    Raises:
        ValueError: If the environment variable is not an integer.
        InvalidOrder: If the resolved value is below 1.
    """
    if explicit is not None:
        value = explicit
    else:
        raw = (os.getenv(MAX_ORDER_ENV) or "").strip()
        if raw:
            try:
                value = int(raw)
            except ValueError as exc:
                raise ValueError(f"{MAX_ORDER_ENV} must be an integer (got {raw!r})") from exc
        else:
            value = DEFAULT_MAX_ORDER

    if value < 1:
        raise InvalidOrder(value)
    return value


def resolve_namespace(explicit: str | None = None) -> str:
    """Resolve the namespace from ``explicit``, then ``OPERATIONS_GEN_NAMESPACE``, then the default."""
    if explicit and explicit.strip():
        return explicit.strip()
    env_value = (os.getenv(NAMESPACE_ENV) or "").strip()
    return env_value or DEFAULT_NAMESPACE
