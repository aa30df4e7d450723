from __future__ import annotations

import pytest

from attrmagic import predicates
from attrmagic.mixin import AttrMagic
from attrmagic.settings import settings
from attrmagic.settings import settings_dict


class Person(AttrMagic):
    """a typical owner with lazy and write-through attributes"""

    def __init__(self, first_name=None, last_name=None, items=None):
        self.first_name = first_name
        self.last_name = last_name
        self.items = items
        self.full_name_calls = 0

    @property
    def full_name(self):
        def compute():
            self.full_name_calls += 1
            first = self._require_attr("first_name", "present")
            return " ".join(filter(None, [first, self.last_name])).strip()

        return self._igetset("full_name", compute)

    @property
    def initials(self):
        return self._igetwrite(
            "initials", lambda: "".join(p[0] for p in self.full_name.split())
        )

    @initials.setter
    def initials(self, value):
        self._iset("initials", value.upper())


@pytest.fixture(scope="function")
def person():
    yield Person("ada", "lovelace", items=[1])


@pytest.fixture(scope="function")
def override_settings():
    old = settings_dict()

    def _override(**kwargs):
        for key, value in kwargs.items():
            settings.set(key, value)

    try:
        yield _override
    finally:
        _override(**old)


@pytest.fixture(scope="function", autouse=True)
def restore_predicate_registry():
    # noinspection PyProtectedMember
    registry = predicates._registry
    old = dict(registry)
    try:
        yield
    finally:
        registry.clear()
        registry.update(old)
