"""attrmagic.types

A collection of useful types and protocols in attrmagic
"""
from __future__ import annotations

from typing import Any
from typing import Callable
from typing import NamedTuple
from typing import Protocol
from typing import TypeVar
from typing import runtime_checkable

__all__ = [
    "T",
    "Compute",
    "Getter",
    "Setter",
    "PredicateFunc",
    "PredicateSpec",
    "AttributeAccessor",
]

T = TypeVar("T")

Compute = Callable[[], T]
Getter = Callable[[], T]
Setter = Callable[[T], Any]
PredicateFunc = Callable[[Any], bool]


class PredicateSpec(NamedTuple):
    """a parsed predicate token"""

    name: str
    negated: bool = False

    @property
    def verb(self) -> str:
        return "must not" if self.negated else "must"

    def __str__(self) -> str:
        return f"not_{self.name}" if self.negated else self.name


@runtime_checkable
class AttributeAccessor(Protocol[T]):
    """explicit reader and writer for a single attribute"""

    def read(self) -> T:
        ...

    def write(self, value: T) -> Any:
        ...
