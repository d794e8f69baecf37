from __future__ import annotations

import pytest

from descriptors.parser import (
    DescriptorError,
    InvertedLineNumberSuffix,
    MalformedMappingDescriptor,
    MissingParameterList,
    parse,
)


def test_mapping_without_line_number():
    with pytest.raises(MalformedMappingDescriptor) as info:
        parse("(I)Lint;:")
    assert info.value.descriptor == "(I)Lint;:"
    assert info.value.reason == "cannot parse descriptor"
    assert "(I)Lint;:" in str(info.value)


def test_digits_before_paren_do_not_count():
    with pytest.raises(MalformedMappingDescriptor):
        parse("(I2)V:")


def test_colon_before_line_number():
    with pytest.raises(InvertedLineNumberSuffix) as info:
        parse("(I)V:5")
    assert isinstance(info.value, MalformedMappingDescriptor)
    assert info.value.descriptor == "(I)V:5"


@pytest.mark.parametrize("raw", ["", "IV", "(IV", "I)V", "(I:5"])
def test_missing_parameter_list(raw):
    with pytest.raises(MissingParameterList) as info:
        parse(raw)
    assert info.value.descriptor == raw


def test_errors_share_base_class():
    for exc_type in (MalformedMappingDescriptor, InvertedLineNumberSuffix, MissingParameterList):
        assert issubclass(exc_type, DescriptorError)
