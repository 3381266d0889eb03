from __future__ import annotations

import pytest

from operations_gen.config import (
    DEFAULT_MAX_ORDER,
    MAX_ORDER_ENV,
    NAMESPACE_ENV,
    resolve_max_order,
    resolve_namespace,
)
from operations_gen.errors import InvalidOrder


def test_resolve_max_order_given_explicit_and_env_when_resolved_then_explicit_wins(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Given
    monkeypatch.setenv(MAX_ORDER_ENV, "7")

    # When
    value = resolve_max_order(3)

    # Then
    assert value == 3


def test_resolve_max_order_given_only_env_when_resolved_then_env_value_is_used(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Given
    monkeypatch.setenv(MAX_ORDER_ENV, " 7\n")

    # When
    value = resolve_max_order()

    # Then
    assert value == 7


def test_resolve_max_order_given_no_sources_when_resolved_then_default_is_returned(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Given
    monkeypatch.delenv(MAX_ORDER_ENV, raising=False)

    # When
    value = resolve_max_order()

    # Then
    assert value == DEFAULT_MAX_ORDER == 20


def test_resolve_max_order_given_bad_values_when_resolved_then_errors_are_raised(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Given
    monkeypatch.setenv(MAX_ORDER_ENV, "many")

    # When / Then
    with pytest.raises(ValueError, match="must be an integer"):
        resolve_max_order()
    with pytest.raises(InvalidOrder):
        resolve_max_order(0)


def test_resolve_namespace_given_sources_when_resolved_then_precedence_is_respected(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Given
    monkeypatch.delenv(NAMESPACE_ENV, raising=False)

    # When / Then
    assert resolve_namespace() == "Operations"
    monkeypatch.setenv(NAMESPACE_ENV, "Acme.Ops")
    assert resolve_namespace() == "Acme.Ops"
    assert resolve_namespace("  Explicit.Ns ") == "Explicit.Ns"
