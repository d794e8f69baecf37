from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from descriptors.ir import MethodDescriptor, Notation

# Mapping files spell primitive return types as object references.
PRIMITIVE_RETURN_TYPES: Mapping[str, str] = MappingProxyType({
    "Lvoid;": "V",
    "Lint;": "I",
    "Lboolean;": "Z",
    "Lchar;": "C",
    "Llong;": "J",
    "Lbyte;": "B",
    "Ldouble;": "D",
    "Lfloat;": "F",
    "Lshort;": "S",
})

_DIGIT_RE = re.compile(r"[0-9]")
_LINE_NUMBER_RE = re.compile(r"[0-9]+")


class DescriptorError(Exception):
    def __init__(self, reason: str, descriptor: str) -> None:
        super().__init__(f"{reason}: {descriptor!r}")
        self.reason = reason
        self.descriptor = descriptor


class MalformedMappingDescriptor(DescriptorError):
    pass


class InvertedLineNumberSuffix(MalformedMappingDescriptor):
    pass


class MissingParameterList(DescriptorError):
    pass


def detect_notation(raw: str) -> Notation:
    if ":" in raw:
        return Notation.MAPPING
    return Notation.JAR


def parse(raw: str) -> MethodDescriptor:
    """Parse ``raw`` in whichever notation it is written in.

    Raises a ``DescriptorError`` subclass carrying ``raw`` when the input
    cannot be split into a parameter list and a return type.
    """
    if detect_notation(raw) is Notation.MAPPING:
        return parse_mapping(raw)
    return parse_jar(raw)


def parse_jar(raw: str) -> MethodDescriptor:
    end = _closing_paren(raw)
    return MethodDescriptor(param_types=raw[: end + 1], return_type=raw[end + 1:])


def parse_mapping(raw: str) -> MethodDescriptor:
    """Parse the mapping-file form, e.g. ``(Ljava/lang/String;)Lint;42:7``.

    The line-number token starts at the first digit after the parameter
    list and runs up to the last colon; it is cut out of the return type.
    """
    end = _closing_paren(raw)
    match = _DIGIT_RE.search(raw, end)
    if match is None:
        raise MalformedMappingDescriptor("cannot parse descriptor", raw)
    line_start = match.start()
    line_end = raw.rfind(":")
    if line_end < line_start:
        raise InvertedLineNumberSuffix("line number suffix not terminated by ':'", raw)

    tail = raw[line_end + 1:]
    # A numeric tail is the end of a line range such as 42:7.
    if _LINE_NUMBER_RE.fullmatch(tail):
        tail = ""
    span = raw[end + 1: line_start] + tail
    return MethodDescriptor(param_types=raw[: end + 1], return_type=normalize_return_type(span))


def normalize_return_type(span: str) -> str:
    return PRIMITIVE_RETURN_TYPES.get(span, span)


def _closing_paren(raw: str) -> int:
    if not raw.startswith("("):
        raise MissingParameterList("no opening bracket", raw)
    end = raw.find(")")
    if end == -1:
        raise MissingParameterList("no terminating bracket", raw)
    return end
