from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from descriptors.parser import DescriptorError


class Notation(str, Enum):
    JAR = "jar"
    MAPPING = "mapping"


@dataclass(frozen=True)
class MethodDescriptor:
    """Canonical method descriptor split into its parameter list and return type.

    ``param_types`` keeps the enclosing parentheses, so rendering is plain
    concatenation.
    """

    param_types: str
    return_type: str

    def render(self) -> str:
        return self.param_types + self.return_type

    def __str__(self) -> str:
        return self.render()


@dataclass
class ParseOutcome:
    line: int
    raw: str
    notation: Notation
    descriptor: Optional[MethodDescriptor] = None
    error: Optional["DescriptorError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.descriptor is not None
