from __future__ import annotations

import itertools

from operations_gen import docs
from operations_gen.models import ArtifactKind, Context, Mode, Result, Shape
from operations_gen.orders import OrderRange


def _shape(mode: Mode, result: Result, context: Context, kind: ArtifactKind = ArtifactKind.CONTRACT) -> Shape:
    return Shape(mode=mode, result=result, context=context, kind=kind)


def test_summary_sentence_given_every_axis_combination_when_rendered_then_wording_follows_table() -> None:
    # Given
    shapes = [_shape(mode, result, context) for mode, result, context in itertools.product(Mode, Result, Context)]

    # When
    sentences = {shape.base_name: docs.summary_sentence(shape) for shape in shapes}

    # Then
    assert sentences["IOperationAction"] == "Represents a synchronous operation that does not return a result."
    assert sentences["IOperationAsyncFunc"] == "Represents an asynchronous operation that returns a result."
    assert sentences["IOperationStatefulAsyncAction"] == (
        "Represents an asynchronous operation that depends on external state and does not return a result."
    )
    assert len(set(sentences.values())) == 8


def test_summary_sentence_given_implementation_when_rendered_then_article_is_capitalized() -> None:
    # Given
    sync_impl = _shape(Mode.SYNC, Result.FUNC, Context.STATEFUL, ArtifactKind.IMPLEMENTATION)
    async_impl = _shape(Mode.ASYNC, Result.ACTION, Context.STATELESS, ArtifactKind.IMPLEMENTATION)

    # When
    sync_sentence = docs.summary_sentence(sync_impl)
    async_sentence = docs.summary_sentence(async_impl)

    # Then
    assert sync_sentence == "A synchronous operation that depends on external state and returns a result."
    assert async_sentence == "An asynchronous operation that does not return a result."


def test_member_documentation_given_sync_action_when_rendered_then_no_returns_tag() -> None:
    # Given
    shape = _shape(Mode.SYNC, Result.ACTION, Context.STATELESS)

    # When
    lines = docs.member_documentation(shape, 1)

    # Then
    assert not any("<returns>" in line for line in lines)
    assert lines[0] == "        /// <summary>"
    assert len(lines) == 7


def test_member_documentation_given_stateful_async_func_when_rendered_then_tags_follow_parameter_order() -> None:
    # Given
    shape = _shape(Mode.ASYNC, Result.FUNC, Context.STATEFUL)

    # When
    lines = docs.member_documentation(shape, 3)

    # Then
    stripped = [line.strip() for line in lines]
    opening_tags = [
        line for line in stripped if line.startswith("/// <") and line.endswith(">") and "</" not in line
    ]
    assert opening_tags == [
        "/// <summary>",
        '/// <param name="input">',
        '/// <param name="state">',
        '/// <param name="cancellationToken">',
        "/// <returns>",
    ]
    assert '        /// <typeparamref name="T3"/> using the supplied <paramref name="state"/>.' in lines


def test_member_documentation_given_position_when_rendered_then_only_own_type_parameter_is_named() -> None:
    # Given
    shape = _shape(Mode.SYNC, Result.ACTION, Context.STATELESS)

    # When
    text = "\n".join(docs.member_documentation(shape, 2))

    # Then
    assert 'name="T2"' in text
    assert 'name="T1"' not in text
    assert 'name="T3"' not in text


def test_member_documentation_given_same_inputs_when_rendered_twice_then_lines_are_identical() -> None:
    # Given
    shape = _shape(Mode.ASYNC, Result.ACTION, Context.STATEFUL)

    # When
    first = docs.member_documentation(shape, 4)
    second = docs.member_documentation(shape, 4)

    # Then
    assert first == second


def test_constructor_documentation_given_order_when_rendered_then_links_class_and_each_delegate() -> None:
    # Given
    shape = _shape(Mode.SYNC, Result.FUNC, Context.STATELESS, ArtifactKind.IMPLEMENTATION)

    # When
    lines = docs.constructor_documentation(shape, OrderRange(2))

    # Then
    assert lines[1] == '        /// Initializes a new instance of the <see cref="OperationFunc{T1, T2, TResult}"/> class.'
    assert '        /// <param name="t2">' in lines
    assert lines[-2] == '        /// Thrown when any of the supplied delegates is <see langword="null"/>.'


def test_tag_given_multiline_body_when_rendered_then_each_line_is_prefixed() -> None:
    # When
    lines = docs.tag("summary", ["first", "second"], "  ", ' id="x"')

    # Then
    assert lines == ['  /// <summary id="x">', "  /// first", "  /// second", "  /// </summary>"]
