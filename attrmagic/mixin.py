"""attrmagic.mixin

Ease lazy attribute implementation in the owner class.

Usage:

    class Person(AttrMagic):
        def __init__(self, first_name, last_name=None):
            self.first_name = first_name
            self.last_name = last_name

        @property
        def full_name(self):
            return self._igetset("full_name", lambda: " ".join(
                filter(None, [self._require_attr("first_name"), self.last_name])
            ))

or, without subclassing, `install(Person)` which can also be used as a
class decorator. The `lazy_attribute` descriptor wraps the same machinery
into a property-like decorator.
"""
from __future__ import annotations

import logging
import warnings
from functools import partial
from typing import Any
from typing import Callable
from typing import Generic
from typing import TypeVar

from attrmagic.cache import AttributeCache
from attrmagic.predicates import DEFAULT_PREDICATE
from attrmagic.types import Compute
from attrmagic.types import PredicateSpec
from attrmagic.types import T

__all__ = [
    "AttrMagic",
    "attribute_cache",
    "install",
    "lazy_attribute",
]

_logger = logging.getLogger(__name__)

_CACHE_ATTR = "_attrmagic_cache"
_INSTALLED_ATTR = "_attrmagic_installed"

O = TypeVar("O")
C = TypeVar("C", bound=type)


def attribute_cache(owner: Any) -> AttributeCache:
    """return the attribute cache of owner, creating it on first use"""
    try:
        dct = vars(owner)
    except TypeError:
        raise TypeError(
            f"{type(owner).__name__} instances have no __dict__ to hold an attribute cache"
        ) from None
    cache = dct.get(_CACHE_ATTR)
    if cache is None:
        cache = dct[_CACHE_ATTR] = AttributeCache(owner)
    elif not cache.belongs_to(owner):
        # owner is a copy, it gets its own slots
        cache = dct[_CACHE_ATTR] = AttributeCache(owner, cache.slots.copy())
    return cache


class AttrMagic:
    """mixin providing lazy attribute helpers to its subclasses"""

    _attrmagic_installed = True

    def _igetset(self, name: str, compute: Compute[T] | None = None) -> T:
        """memoize a lazy attribute, given its computation

        The computed value is stored in the slot directly.
        """
        return attribute_cache(self).get_or_compute(name, compute)

    def _igetwrite(self, name: str, compute: Compute[T] | None = None) -> T:
        """memoize a lazy attribute, storing it via `setattr(self, name, value)`

        The attribute's setter has to populate the slot, usually by calling
        `self._iset(name, normalized_value)`.
        """
        return attribute_cache(self).get_or_compute_via_setter(
            name, compute, partial(setattr, self, name)
        )

    def _require_attr(
        self, name: str, predicate: str | PredicateSpec = DEFAULT_PREDICATE
    ) -> Any:
        """require an attribute to be set, present, valid or not empty

            self._require_attr("name")                # must not be None
            self._require_attr("obj", "valid")        # must be valid
            self._require_attr("items", "present")    # must be present
            self._require_attr("items", "not_empty")  # must not be empty

        Returns the attribute value.
        """
        return attribute_cache(self).require(
            name, predicate, getter=partial(getattr, self, name)
        )

    def _iset(self, name: str, value: T) -> T:
        return attribute_cache(self).slots.set(name, value)

    def _ireset(self, name: str) -> bool:
        return attribute_cache(self).slots.reset(name)


_HELPERS = ("_igetset", "_igetwrite", "_require_attr", "_iset", "_ireset")


def install(owner_type: C) -> C:
    """load the lazy attribute helpers into owner_type

    Installing more than once has no further effect. Methods already
    defined on owner_type are left untouched.
    """
    if not isinstance(owner_type, type):
        raise TypeError(f"can only install into a class, got: {owner_type!r}")
    if getattr(owner_type, _INSTALLED_ATTR, False):
        return owner_type

    for name in _HELPERS:
        if name not in vars(owner_type):
            setattr(owner_type, name, vars(AttrMagic)[name])
    setattr(owner_type, _INSTALLED_ATTR, True)
    _logger.debug("installed attrmagic into %s", owner_type.__qualname__)
    return owner_type


class lazy_attribute(Generic[O, T]):
    """a lazily computed attribute stored in the owner's attribute cache

    Without a setter the computed value is stored as-is. With a setter,
    the setter must return the value to store, both for assigned and for
    computed values. Unlike a property setter it does not store anything
    itself; returning None stores None:

        class Circle:
            @lazy_attribute
            def radius(self):
                return self.diameter / 2

            @radius.setter
            def radius(self, value):
                return abs(value)

    Deleting the attribute resets the slot, so it is recomputed on the
    next access.
    """

    def __init__(
        self,
        fget: Callable[[O], T],
        fset: Callable[[O, Any], T] | None = None,
        name: str | None = None,
    ) -> None:
        self.fget = fget
        self.fset = fset
        self.name = name or fget.__name__
        self.__doc__ = fget.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def setter(self, fset: Callable[[O, Any], T]) -> lazy_attribute[O, T]:
        return type(self)(self.fget, fset, self.name)

    def __get__(self, obj: O | None, objtype: type | None = None):
        if obj is None:
            return self
        cache = attribute_cache(obj)
        compute = partial(self.fget, obj)
        if self.fset is None:
            return cache.get_or_compute(self.name, compute)
        return cache.get_or_compute_via_setter(
            self.name, compute, partial(self.__set__, obj)
        )

    def __set__(self, obj: O, value: Any) -> None:
        if self.fset is not None:
            assigned, value = value, self.fset(obj, value)
            if value is None and assigned is not None:
                warnings.warn(
                    f"setter of {type(obj).__name__}.{self.name} returned None,"
                    " it must return the value to store",
                    stacklevel=2,
                )
        attribute_cache(obj).slots.set(self.name, value)

    def __delete__(self, obj: O) -> None:
        attribute_cache(obj).slots.reset(self.name)
