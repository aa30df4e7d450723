"""predicate tokens and the predicate registry

A predicate token names a boolean check run against an attribute value.
Tokens prefixed with `not_` negate the check:

    present       # value must be present
    not_empty     # value must not be empty
    not_nil       # value must not be None (the default)

A trailing `?` is accepted and ignored, i.e. `present?` == `present`.
"""
from __future__ import annotations

import logging
from collections.abc import Sized
from typing import Any

from attrmagic.errors import InvalidUsageError
from attrmagic.types import PredicateFunc
from attrmagic.types import PredicateSpec

__all__ = [
    "DEFAULT_PREDICATE",
    "NEGATION_PREFIX",
    "parse_predicate",
    "check_predicate",
    "get_predicate",
    "register_predicate",
    "unregister_predicate",
    "available_predicates",
]

_logger = logging.getLogger(__name__)

NEGATION_PREFIX = "not_"
DEFAULT_PREDICATE = "not_nil"


# === builtin predicates ==============================================


def is_nil(value: Any) -> bool:
    return value is None


def is_blank(value: Any) -> bool:
    """None, False, whitespace-only strings and empty containers are blank"""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_present(value: Any) -> bool:
    return not is_blank(value)


def is_empty(value: Any) -> bool:
    # unsized values raise TypeError
    return len(value) == 0


def is_valid(value: Any) -> bool:
    """check `value.is_valid()` or `value.valid`"""
    fn = getattr(value, "is_valid", None)
    if callable(fn):
        return bool(fn())
    return bool(value.valid)


def is_true(value: Any) -> bool:
    return bool(value)


_BUILTIN_PREDICATES: dict[str, PredicateFunc] = {
    "nil": is_nil,
    "blank": is_blank,
    "present": is_present,
    "empty": is_empty,
    "valid": is_valid,
    "true": is_true,
}

_registry: dict[str, PredicateFunc] = dict(_BUILTIN_PREDICATES)


# === registry ========================================================


def register_predicate(
    name: str, func: PredicateFunc, *, replace: bool = False
) -> PredicateFunc:
    """register a custom predicate under name

    Can be used as `register_predicate("positive", lambda v: v > 0)`.
    """
    name = name.rstrip("?")
    if not name or name.startswith(NEGATION_PREFIX):
        raise ValueError(f"invalid predicate name: {name!r}")
    if not callable(func):
        raise TypeError(f"predicate must be callable, got: {func!r}")
    if name in _registry and not replace:
        raise ValueError(f"predicate {name!r} already registered")
    _registry[name] = func
    _logger.debug("registered predicate %r -> %r", name, func)
    return func


def unregister_predicate(name: str) -> None:
    """remove a custom predicate, builtin predicates are restored instead"""
    name = name.rstrip("?")
    if name not in _registry:
        raise KeyError(name)
    if name in _BUILTIN_PREDICATES:
        _registry[name] = _BUILTIN_PREDICATES[name]
    else:
        del _registry[name]


def available_predicates() -> list[str]:
    """return the sorted names of all registered predicates"""
    return sorted(_registry)


def get_predicate(name: str) -> PredicateFunc:
    try:
        return _registry[name]
    except KeyError:
        raise InvalidUsageError(f"unknown predicate: {name!r}") from None


# === token handling ==================================================


def parse_predicate(token: str | PredicateSpec = DEFAULT_PREDICATE) -> PredicateSpec:
    """parse a predicate token into its base name and polarity"""
    if isinstance(token, PredicateSpec):
        return token
    if not isinstance(token, str):
        raise InvalidUsageError(f"invalid predicate: {token!r}")

    if token.startswith(NEGATION_PREFIX):
        name, negated = token[len(NEGATION_PREFIX) :], True
    else:
        name, negated = token, False
    name = name.rstrip("?")

    if not name:
        raise InvalidUsageError(f"invalid predicate: {token!r}")
    return PredicateSpec(name, negated)


def check_predicate(value: Any, token: str | PredicateSpec = DEFAULT_PREDICATE) -> bool:
    """return True if value satisfies the (possibly negated) predicate"""
    spec = parse_predicate(token)
    result = bool(get_predicate(spec.name)(value))
    return not result if spec.negated else result
