"""per-instance slot storage for lazily computed attributes

A slot is either unset or holds a value. Presence is tracked independently
of the value, so `None`, `False`, `0` or `""` are valid cached values.
"""
from __future__ import annotations

import sys
from typing import Any
from typing import Iterator
from typing import overload

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from attrmagic.types import T

__all__ = [
    "UNSET",
    "SlotMap",
]


class _UnsetType:
    """sentinel type marking a slot that was never populated"""

    _instance: _UnsetType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<UNSET>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return type(self), ()

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNSET: Any = _UnsetType()


class SlotMap:
    """mapping from attribute name to a cached value"""

    __slots__ = ("_cells",)

    def __init__(self, cells: dict[str, Any] | None = None) -> None:
        self._cells: dict[str, Any] = {}
        if cells:
            for name, value in cells.items():
                self.set(name, value)

    @overload
    def get(self, name: str) -> Any:
        ...

    @overload
    def get(self, name: str, default: T) -> Any | T:
        ...

    def get(self, name, default=UNSET):
        """return the cached value, or default if the slot is unset"""
        return self._cells.get(name, default)

    def set(self, name: str, value: T) -> T:
        """store value in the slot and return it"""
        if value is UNSET:
            raise ValueError("cannot store the UNSET sentinel, use reset()")
        self._cells[name] = value
        return value

    def is_set(self, name: str) -> bool:
        return name in self._cells

    def reset(self, name: str) -> bool:
        """drop the slot, return True if it held a value"""
        return self._cells.pop(name, UNSET) is not UNSET

    def clear(self) -> None:
        self._cells.clear()

    def snapshot(self) -> dict[str, Any]:
        """return a shallow copy of all set slots"""
        return dict(self._cells)

    def copy(self) -> Self:
        return type(self)(self._cells)

    def __contains__(self, name: object) -> bool:
        return name in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._cells))

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        names = ", ".join(self._cells)
        return f"{type(self).__name__}({names})"
