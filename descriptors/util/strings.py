from __future__ import annotations

from typing import Optional

_PRIMITIVE_NAMES = {
    "V": "void",
    "I": "int",
    "Z": "boolean",
    "C": "char",
    "J": "long",
    "B": "byte",
    "D": "double",
    "F": "float",
    "S": "short",
}


def clean_line(line: str, comment_prefix: str = "#") -> Optional[str]:
    text = line.strip()
    if not text:
        return None
    if comment_prefix and text.startswith(comment_prefix):
        return None
    return text


def desc_to_java_name(value: str | None) -> str | None:
    if not value:
        return None
    name = value
    array_dims = 0
    while name.startswith("["):
        array_dims += 1
        name = name[1:]
    if name in _PRIMITIVE_NAMES:
        name = _PRIMITIVE_NAMES[name]
    elif name.startswith("L") and name.endswith(";"):
        name = name[1:-1].replace("/", ".")
    if array_dims:
        name = name + "[]" * array_dims
    return name
