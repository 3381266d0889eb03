"""Pydantic models shared across naming, building, and emission layers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Mode(str, Enum):
    SYNC = "sync"
    ASYNC = "async"


class Result(str, Enum):
    ACTION = "action"
    FUNC = "func"


class Context(str, Enum):
    STATELESS = "stateless"
    STATEFUL = "stateful"


class ArtifactKind(str, Enum):
    CONTRACT = "contract"
    IMPLEMENTATION = "implementation"


class Shape(BaseModel):
    """One axis combination plus the kind of artifact generated for it."""

    model_config = ConfigDict(frozen=True)

    mode: Mode
    result: Result
    context: Context
    kind: ArtifactKind

    @property
    def is_async(self) -> bool:
        return self.mode is Mode.ASYNC

    @property
    def returns_value(self) -> bool:
        return self.result is Result.FUNC

    @property
    def is_stateful(self) -> bool:
        return self.context is Context.STATEFUL

    @property
    def is_contract(self) -> bool:
        return self.kind is ArtifactKind.CONTRACT

    @property
    def base_name(self) -> str:
        """Return the unparameterized type name, e.g. ``IOperationStatefulAsyncFunc``."""
        parts = ["I" if self.is_contract else "", "Operation"]
        if self.is_stateful:
            parts.append("Stateful")
        if self.is_async:
            parts.append("Async")
        parts.append("Func" if self.returns_value else "Action")
        return "".join(parts)

    @property
    def contract(self) -> Shape:
        """Return the contract shape this shape implements (itself for contracts)."""
        return self.model_copy(update={"kind": ArtifactKind.CONTRACT})

    def __str__(self) -> str:
        return self.base_name


class GeneratedArtifact(BaseModel):
    """Generated source text for one (shape, order) cell."""

    model_config = ConfigDict(frozen=True)

    key: str
    text: str
    shape: Shape
    order: int = Field(ge=1)
