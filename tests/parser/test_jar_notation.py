from __future__ import annotations

import pytest

from descriptors.ir import MethodDescriptor, Notation
from descriptors.parser import detect_notation, parse, parse_jar


def test_simple_descriptor():
    desc = parse("(I)V")
    assert desc.param_types == "(I)"
    assert desc.return_type == "V"


@pytest.mark.parametrize("raw", [
    "()V",
    "(I)V",
    "(Ljava/lang/String;I[J)Ljava/util/List;",
    "([[Ljava/lang/Object;)[B",
])
def test_render_round_trip(raw):
    desc = parse(raw)
    assert desc.render() == raw
    assert str(desc) == raw


def test_missing_return_type_is_empty():
    desc = parse("(I)")
    assert desc.param_types == "(I)"
    assert desc.return_type == ""


def test_wrapped_primitive_not_normalized_without_colon():
    assert detect_notation("(I)Lint;") is Notation.JAR
    desc = parse("(I)Lint;")
    assert desc.return_type == "Lint;"


def test_splits_on_first_closing_paren():
    desc = parse_jar("(I)V)")
    assert desc.param_types == "(I)"
    assert desc.return_type == "V)"


def test_descriptor_is_immutable():
    desc = parse("(I)V")
    with pytest.raises(AttributeError):
        desc.return_type = "I"


def test_equality_ignores_source():
    assert parse("(I)V") == MethodDescriptor(param_types="(I)", return_type="V")
    assert len({parse("(I)V"), parse("(I)V")}) == 1
