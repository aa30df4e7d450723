"""attrmagic: lazy, memoized attributes with precondition checks"""
from __future__ import annotations

from typing import TYPE_CHECKING

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "not-installed"

if TYPE_CHECKING:
    from attrmagic.cache import AttributeCache
    from attrmagic.errors import AttributeRequirementError
    from attrmagic.errors import AttrMagicError
    from attrmagic.errors import InvalidUsageError
    from attrmagic.mixin import AttrMagic
    from attrmagic.mixin import attribute_cache
    from attrmagic.mixin import install
    from attrmagic.mixin import lazy_attribute
    from attrmagic.predicates import register_predicate
    from attrmagic.slots import UNSET
    from attrmagic.slots import SlotMap

__all__ = [
    "AttrMagic",
    "AttributeCache",
    "AttributeRequirementError",
    "AttrMagicError",
    "InvalidUsageError",
    "SlotMap",
    "UNSET",
    "attribute_cache",
    "install",
    "lazy_attribute",
    "register_predicate",
]

_LAZY_IMPORTS = {
    "AttrMagic": "attrmagic.mixin",
    "attribute_cache": "attrmagic.mixin",
    "install": "attrmagic.mixin",
    "lazy_attribute": "attrmagic.mixin",
    "AttributeCache": "attrmagic.cache",
    "AttributeRequirementError": "attrmagic.errors",
    "AttrMagicError": "attrmagic.errors",
    "InvalidUsageError": "attrmagic.errors",
    "SlotMap": "attrmagic.slots",
    "UNSET": "attrmagic.slots",
    "register_predicate": "attrmagic.predicates",
}


# allow importing items in __all__
def __getattr__(name):
    from importlib import import_module

    if name in _LAZY_IMPORTS:
        return getattr(import_module(_LAZY_IMPORTS[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
