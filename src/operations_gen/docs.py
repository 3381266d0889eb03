"""XML documentation comment synthesis for generated constructs.

All wording comes from the fixed tables below, keyed by axis values. Two calls
with the same shape, order, and position always produce the same lines.
"""

from __future__ import annotations

from operations_gen.models import Context, Mode, Result, Shape
from operations_gen.naming import (
    RESULT_PARAMETER,
    STATE_PARAMETER,
    handler_field,
    input_parameter,
    type_name,
)
from operations_gen.orders import OrderRange

TYPE_INDENT = " " * 4
MEMBER_INDENT = " " * 8

SUMMARY_TEMPLATES: dict[tuple[Mode, Context], str] = {
    (Mode.SYNC, Context.STATELESS): "a synchronous operation that {result}.",
    (Mode.SYNC, Context.STATEFUL): "a synchronous operation that depends on external state and {result}.",
    (Mode.ASYNC, Context.STATELESS): "an asynchronous operation that {result}.",
    (Mode.ASYNC, Context.STATEFUL): "an asynchronous operation that depends on external state and {result}.",
}

RESULT_FORMS: dict[Result, str] = {
    Result.ACTION: "does not return a result",
    Result.FUNC: "returns a result",
}

INVOKE_ADVERBS: dict[Mode, str] = {
    Mode.SYNC: "Synchronously",
    Mode.ASYNC: "Asynchronously",
}

RETURNS_TEXT: dict[tuple[Mode, Result], str | None] = {
    (Mode.SYNC, Result.ACTION): None,
    (Mode.SYNC, Result.FUNC): f'An instance of <typeparamref name="{RESULT_PARAMETER}"/>.',
    (Mode.ASYNC, Result.ACTION): 'A <see cref="Task"/> representing the invocation of this operation.',
    (Mode.ASYNC, Result.FUNC): (
        f'A <see cref="Task{{{RESULT_PARAMETER}}}"/> representing the invocation of this operation.'
    ),
}

INPUT_PARAMETER_TEXT = 'The input as an instance of <typeparamref name="{param}"/>.'
STATE_PARAMETER_TEXT = "The external state."
CANCELLATION_TEXT = "Controls the lifetime of the invocation of this operation."
SUPPORTED_TYPE_TEXT = "Supported type {position}."
STATE_TYPE_TEXT = "The type of external state."
RESULT_TYPE_TEXT = "The type of returned result."
DELEGATE_TEXT = 'The delegate associated with <typeparamref name="{param}"/>.'
NULL_DELEGATE_TEXT = 'Thrown when any of the supplied delegates is <see langword="null"/>.'
INHERIT_DOC = "/// <inheritdoc/>"


def tag(name: str, body: str | list[str], indent: str, attributes: str = "") -> list[str]:
    """Render one ``<name attributes>...</name>`` block as comment lines."""
    body_lines = [body] if isinstance(body, str) else body
    return [
        f"{indent}/// <{name}{attributes}>",
        *(f"{indent}/// {line}" for line in body_lines),
        f"{indent}/// </{name}>",
    ]


def summary_sentence(shape: Shape) -> str:
    sentence = SUMMARY_TEMPLATES[(shape.mode, shape.context)].format(result=RESULT_FORMS[shape.result])
    if shape.is_contract:
        return "Represents " + sentence
    return sentence[0].upper() + sentence[1:]


def type_parameter_tags(shape: Shape, positions: OrderRange) -> list[str]:
    lines: list[str] = []
    for x in positions:
        lines.extend(
            tag("typeparam", SUPPORTED_TYPE_TEXT.format(position=x), TYPE_INDENT, f' name="{input_parameter(x)}"')
        )
    if shape.is_stateful:
        lines.extend(tag("typeparam", STATE_TYPE_TEXT, TYPE_INDENT, f' name="{STATE_PARAMETER}"'))
    if shape.returns_value:
        lines.extend(tag("typeparam", RESULT_TYPE_TEXT, TYPE_INDENT, f' name="{RESULT_PARAMETER}"'))
    return lines


def type_documentation(shape: Shape, positions: OrderRange) -> list[str]:
    """Return the comment block placed above the interface or class declaration."""
    return tag("summary", summary_sentence(shape), TYPE_INDENT) + type_parameter_tags(shape, positions)


def member_documentation(shape: Shape, position: int) -> list[str]:
    """Return the comment block for the dispatch member at ``position``.

    Only the member's own type parameter is referenced.
    """
    param = input_parameter(position)
    second_line = f'<typeparamref name="{param}"/>'
    if shape.is_stateful:
        second_line += ' using the supplied <paramref name="state"/>'
    summary = [
        f'{INVOKE_ADVERBS[shape.mode]} invokes this operation on the supplied <paramref name="input"/> as an instance of',
        second_line + ".",
    ]

    lines = tag("summary", summary, MEMBER_INDENT)
    lines += tag("param", INPUT_PARAMETER_TEXT.format(param=param), MEMBER_INDENT, ' name="input"')
    if shape.is_stateful:
        lines += tag("param", STATE_PARAMETER_TEXT, MEMBER_INDENT, ' name="state"')
    if shape.is_async:
        lines += tag("param", CANCELLATION_TEXT, MEMBER_INDENT, ' name="cancellationToken"')

    returns = RETURNS_TEXT[(shape.mode, shape.result)]
    if returns is not None:
        lines += tag("returns", returns, MEMBER_INDENT)
    return lines


def constructor_documentation(shape: Shape, positions: OrderRange) -> list[str]:
    cref = type_name(shape, positions, xmldoc=True)
    lines = tag("summary", f'Initializes a new instance of the <see cref="{cref}"/> class.', MEMBER_INDENT)
    for x in positions:
        lines += tag(
            "param",
            DELEGATE_TEXT.format(param=input_parameter(x)),
            MEMBER_INDENT,
            f' name="{handler_field(x)}"',
        )
    lines += tag("exception", NULL_DELEGATE_TEXT, MEMBER_INDENT, ' cref="ArgumentNullException"')
    return lines
