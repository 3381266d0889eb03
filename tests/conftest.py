from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from operations_gen.models import ArtifactKind, Context, Mode, Result, Shape


def make_shape(
    mode: Mode = Mode.SYNC,
    result: Result = Result.ACTION,
    context: Context = Context.STATELESS,
    kind: ArtifactKind = ArtifactKind.CONTRACT,
) -> Shape:
    return Shape(mode=mode, result=result, context=context, kind=kind)


@pytest.fixture
def contract_action() -> Shape:
    return make_shape()


@pytest.fixture
def stateful_async_func() -> Shape:
    return make_shape(Mode.ASYNC, Result.FUNC, Context.STATEFUL, ArtifactKind.IMPLEMENTATION)
