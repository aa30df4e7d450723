"""attrmagic.cache

The memoization and validation engine. An `AttributeCache` owns the slot
map of one owner instance and provides:

    get_or_compute(name, compute)
        compute once, cache forever

    get_or_compute_via_setter(name, compute, setter)
        same, but the computed value is stored by the owner's setter so
        that normalization in the setter runs on computed values too

    require(name, predicate, getter)
        precondition check, returns the value so it can be used inline

Note: an AttributeCache is not thread-safe. Concurrent first computations
of the same slot may both run `compute`, the last write wins.
"""
from __future__ import annotations

import logging
from typing import Any
from typing import Callable
from typing import Union

from attrmagic.errors import AttributeRequirementError
from attrmagic.errors import InvalidUsageError
from attrmagic.predicates import DEFAULT_PREDICATE
from attrmagic.predicates import get_predicate
from attrmagic.predicates import parse_predicate
from attrmagic.settings import settings
from attrmagic.slots import UNSET
from attrmagic.slots import SlotMap
from attrmagic.types import AttributeAccessor
from attrmagic.types import Compute
from attrmagic.types import PredicateSpec
from attrmagic.types import T

__all__ = [
    "AttributeCache",
]

_logger = logging.getLogger(__name__)

_SetterLike = Union[Callable[[Any], Any], AttributeAccessor]
_GetterLike = Union[Callable[[], Any], AttributeAccessor]


class AttributeCache:
    """lazy computation cache for the attributes of a single owner"""

    __slots__ = ("_owner_id", "_owner_name", "slots")

    def __init__(self, owner: Any = None, slots: SlotMap | None = None) -> None:
        self._owner_id = id(owner) if owner is not None else None
        self._owner_name = type(owner).__name__ if owner is not None else None
        self.slots = SlotMap() if slots is None else slots

    def belongs_to(self, owner: Any) -> bool:
        """return True if this cache was created for owner"""
        return self._owner_id == id(owner)

    def __repr__(self) -> str:
        owner = f"owner={self._owner_name}, " if self._owner_name else ""
        return f"{type(self).__name__}({owner}slots={list(self.slots)!r})"

    def _qualname(self, name: str) -> str:
        return f"{self._owner_name}.{name}" if self._owner_name else name

    # --- memoization -------------------------------------------------

    def get_or_compute(self, name: str, compute: Compute[T] | None = None) -> T:
        """return the cached value of name, computing it on the first call"""
        value = self.slots.get(name)
        if value is not UNSET:
            return value
        if compute is None:
            raise InvalidUsageError(f"code block must be given for {name!r}")

        if settings.log_computations:
            _logger.debug("computing %s", self._qualname(name))
        return self.slots.set(name, compute())

    def get_or_compute_via_setter(
        self,
        name: str,
        compute: Compute[T] | None = None,
        setter: _SetterLike | None = None,
    ) -> T:
        """like get_or_compute, but store the computed value via setter

        The setter is responsible for populating the slot. The value read
        back from the slot is returned, so normalization done in the setter
        is visible to the caller.
        """
        if self.slots.is_set(name):
            return self.slots.get(name)
        if compute is None:
            raise InvalidUsageError(f"code block must be given for {name!r}")
        if setter is None:
            raise InvalidUsageError(f"setter must be given for {name!r}")
        if isinstance(setter, AttributeAccessor):
            setter = setter.write

        if settings.log_computations:
            _logger.debug("computing %s via setter", self._qualname(name))
        value = compute()
        setter(value)

        if not self.slots.is_set(name):
            _logger.warning(
                "setter for %s did not populate its slot, value is not cached",
                self._qualname(name),
            )
            return value
        return self.slots.get(name)

    # --- validation --------------------------------------------------

    def require(
        self,
        name: str,
        predicate: str | PredicateSpec = DEFAULT_PREDICATE,
        getter: _GetterLike | None = None,
    ) -> Any:
        """require the attribute value to satisfy predicate and return it

        Without a getter the value is read from the slot.

        Raises:
            InvalidUsageError: if the predicate is empty or unknown
            AttributeRequirementError: if the check fails
        """
        spec = parse_predicate(predicate)
        check = get_predicate(spec.name)

        if getter is None:
            value = self.slots.get(name, None)
        elif isinstance(getter, AttributeAccessor):
            value = getter.read()
        else:
            value = getter()

        ok = bool(check(value))
        if ok is spec.negated:
            raise AttributeRequirementError(name, spec.name, spec.negated, value)
        return value
