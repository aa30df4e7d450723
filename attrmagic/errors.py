"""attrmagic exceptions"""
from __future__ import annotations

from typing import Any

from attrmagic._repr import value_repr

__all__ = [
    "AttrMagicError",
    "InvalidUsageError",
    "AttributeRequirementError",
]


class AttrMagicError(Exception):
    """base class for all attrmagic errors"""


class InvalidUsageError(AttrMagicError, ValueError):
    """raised on a programming mistake at the call site

    i.e. a missing compute block on a cache miss, or an invalid predicate.
    """


class AttributeRequirementError(AttrMagicError, RuntimeError):
    """raised when an attribute fails its required check"""

    def __init__(
        self,
        name: str,
        predicate: str,
        negated: bool,
        value: Any,
        message: str | None = None,
    ) -> None:
        self.name = name
        self.predicate = predicate
        self.negated = negated
        self.value = value
        if message is None:
            verb = "must not" if negated else "must"
            message = (
                f"attribute `{name}` {verb} be {predicate}: {value_repr(value)}"
            )
        super().__init__(message)

    def __reduce__(self):
        return type(self), (
            self.name,
            self.predicate,
            self.negated,
            self.value,
            str(self),
        )
