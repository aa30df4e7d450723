"""repr tools for rendering offending attribute values"""
from __future__ import annotations

from reprlib import Repr
from typing import Any

from attrmagic.settings import settings

__all__ = [
    "value_repr",
]


def _make_repr() -> Repr:
    r = Repr()
    r.maxstring = settings.repr_maxstring
    r.maxother = settings.repr_maxother
    r.maxlist = r.maxtuple = r.maxset = r.maxfrozenset = settings.repr_maxlist
    r.maxdict = settings.repr_maxlist
    return r


def value_repr(value: Any) -> str:
    """return a shortened, human readable representation of value"""
    return _make_repr().repr(value)
