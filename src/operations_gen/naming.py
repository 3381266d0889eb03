"""Generic parameter lists, type names, and member signatures for generated constructs.

Every list produced here follows the same fixed ordering: the positional
input types ``T1..TN``, then ``TState`` for stateful shapes, then ``TResult``
for shapes that return a value. Builders and documentation cross-links rely on
the declaration and documentation forms agreeing on that ordering.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from operations_gen.models import Shape
from operations_gen.orders import OrderRange

STATE_PARAMETER = "TState"
RESULT_PARAMETER = "TResult"

Variance = Literal["in", "out", ""]


class TypeParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    variance: Variance = ""

    def declare(self, with_variance: bool) -> str:
        if with_variance and self.variance:
            return f"{self.variance} {self.name}"
        return self.name


def input_parameter(position: int) -> str:
    return f"T{position}"


def type_parameters(shape: Shape, positions: OrderRange) -> list[TypeParameter]:
    """Return the generic parameters of ``shape`` in their fixed order.

    Inputs and state are contravariant. The result is covariant only for
    synchronous shapes; an asynchronous result is wrapped in an invariant
    ``Task<TResult>`` and cannot carry a variance marker.
    """
    params = [TypeParameter(name=input_parameter(x), variance="in") for x in positions]
    if shape.is_stateful:
        params.append(TypeParameter(name=STATE_PARAMETER, variance="in"))
    if shape.returns_value:
        params.append(TypeParameter(name=RESULT_PARAMETER, variance="" if shape.is_async else "out"))
    return params


def declaration_generics(shape: Shape, positions: OrderRange, reference: bool = False) -> str:
    """Render ``<in T1, in T2, ...>``.

    Variance markers are only legal where a contract is declared, never on a
    class or where a type is referenced (e.g. in a base list).
    """
    params = type_parameters(shape, positions)
    with_variance = shape.is_contract and not reference
    return "<" + ", ".join(p.declare(with_variance=with_variance) for p in params) + ">"


def documentation_generics(shape: Shape, positions: OrderRange) -> str:
    """Render ``{T1, T2, ...}`` as used inside ``cref`` attributes."""
    params = type_parameters(shape, positions)
    return "{" + ", ".join(p.name for p in params) + "}"


def type_name(
    shape: Shape,
    positions: OrderRange,
    xmldoc: bool = False,
    generic: bool = True,
    reference: bool = False,
) -> str:
    if not generic:
        return shape.base_name
    if xmldoc:
        return shape.base_name + documentation_generics(shape, positions)
    return shape.base_name + declaration_generics(shape, positions, reference=reference)


def member_name(shape: Shape, position: int) -> str:
    return f"Invoke{input_parameter(position)}" + ("Async" if shape.is_async else "")


def return_type(shape: Shape) -> str:
    if shape.is_async:
        return f"Task<{RESULT_PARAMETER}>" if shape.returns_value else "Task"
    return RESULT_PARAMETER if shape.returns_value else "void"


def member_parameters(shape: Shape, position: int) -> str:
    """Return the runtime parameter list: input, then state, then cancellation token."""
    params = [f"{input_parameter(position)} input"]
    if shape.is_stateful:
        params.append(f"{STATE_PARAMETER} state")
    if shape.is_async:
        params.append("CancellationToken cancellationToken")
    return ", ".join(params)


def invocation_arguments(shape: Shape) -> str:
    args = ["input"]
    if shape.is_stateful:
        args.append("state")
    if shape.is_async:
        args.append("cancellationToken")
    return ", ".join(args)


def member_signature(shape: Shape, position: int) -> str:
    return f"{return_type(shape)} {member_name(shape, position)}({member_parameters(shape, position)})"


def delegate_type(shape: Shape, position: int) -> str:
    """Return the delegate type backing ``position`` in an implementation.

    Synchronous actions map to ``Action<...>``; everything else is a ``Func``
    whose last type argument is the returned value (or task).
    """
    args = [input_parameter(position)]
    if shape.is_stateful:
        args.append(STATE_PARAMETER)
    if shape.is_async:
        args.append("CancellationToken")
        args.append(return_type(shape))
        return "Func<" + ", ".join(args) + ">"
    if shape.returns_value:
        args.append(RESULT_PARAMETER)
        return "Func<" + ", ".join(args) + ">"
    return "Action<" + ", ".join(args) + ">"


def handler_field(position: int) -> str:
    return f"t{position}"
