"""Assemble complete C# definitions for one shape at a given order."""

from __future__ import annotations

from collections.abc import Callable

from operations_gen.docs import (
    INHERIT_DOC,
    MEMBER_INDENT,
    TYPE_INDENT,
    constructor_documentation,
    member_documentation,
    type_documentation,
)
from operations_gen.models import Shape
from operations_gen.naming import (
    delegate_type,
    handler_field,
    invocation_arguments,
    member_signature,
    type_name,
)
from operations_gen.orders import OrderRange

AUTO_GENERATED_MARKER = "// Auto-generated code"
DEFAULT_NAMESPACE = "Operations"
BODY_INDENT = " " * 12

SYSTEM_USINGS = ["using System;"]
ASYNC_USINGS = ["using System.Threading;", "using System.Threading.Tasks;"]


class ArtifactBuilder:
    """Build the definition of ``shape`` for any order.

    The builder is driven entirely by the shape's axis values; order ``1`` is
    the general algorithm evaluated with a single position. ``orders`` is the
    factory used to validate and enumerate positions.
    """

    def __init__(self, shape: Shape, orders: Callable[[int], OrderRange] = OrderRange):
        self.shape = shape
        self.orders = orders

    def build(self, order: int, namespace: str = DEFAULT_NAMESPACE) -> str:
        """Return the generated source text for ``order``.

        Raises:
            InvalidOrder: If ``order`` is below 1. Raised before any text is built.
        """
        positions = self.orders(order)
        lines = [AUTO_GENERATED_MARKER]
        lines += self._usings()
        lines += [f"namespace {namespace}", "{"]
        lines += type_documentation(self.shape, positions)
        if self.shape.is_contract:
            lines += self._contract_body(positions)
        else:
            lines += self._implementation_body(positions)
        lines += ["}"]
        return "\n".join(lines)

    def _usings(self) -> list[str]:
        usings: list[str] = []
        if not self.shape.is_contract:
            usings += SYSTEM_USINGS
        if self.shape.is_async:
            usings += ASYNC_USINGS
        if usings:
            usings.append("")
        return usings

    def _contract_body(self, positions: OrderRange) -> list[str]:
        lines = [f"{TYPE_INDENT}public interface {type_name(self.shape, positions)}", f"{TYPE_INDENT}{{"]
        for index, x in enumerate(positions):
            if index:
                lines.append("")
            lines += member_documentation(self.shape, x)
            lines.append(f"{MEMBER_INDENT}{member_signature(self.shape, x)};")
        lines.append(f"{TYPE_INDENT}}}")
        return lines

    def _implementation_body(self, positions: OrderRange) -> list[str]:
        shape = self.shape
        class_name = type_name(shape, positions)
        contract_name = type_name(shape.contract, positions, reference=True)
        lines = [f"{TYPE_INDENT}public sealed class {class_name} : {contract_name}", f"{TYPE_INDENT}{{"]

        for x in positions:
            lines.append(f"{MEMBER_INDENT}private readonly {delegate_type(shape, x)} {handler_field(x)};")

        lines.append("")
        lines += constructor_documentation(shape, positions)
        lines.append(f"{MEMBER_INDENT}public {type_name(shape, positions, generic=False)}(")
        arguments = [f"{BODY_INDENT}{delegate_type(shape, x)} {handler_field(x)}" for x in positions]
        lines.append(",\n".join(arguments) + ")")
        lines.append(f"{MEMBER_INDENT}{{")
        for x in positions:
            field = handler_field(x)
            lines.append(f"{BODY_INDENT}this.{field} = {field} ?? throw new ArgumentNullException(nameof({field}));")
        lines.append(f"{MEMBER_INDENT}}}")

        for x in positions:
            lines.append("")
            lines.append(f"{MEMBER_INDENT}{INHERIT_DOC}")
            lines += self._implementation_member(x)

        lines.append(f"{TYPE_INDENT}}}")
        return lines

    def _implementation_member(self, position: int) -> list[str]:
        signature = f"public {member_signature(self.shape, position)} =>"
        call = f"this.{handler_field(position)}.Invoke({invocation_arguments(self.shape)});"
        if self.shape.is_async:
            return [f"{MEMBER_INDENT}{signature}", f"{BODY_INDENT}{call}"]
        return [f"{MEMBER_INDENT}{signature} {call}"]


def build(shape: Shape, order: int, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Build the definition of ``shape`` at ``order`` with the default order iterator."""
    return ArtifactBuilder(shape).build(order, namespace=namespace)
