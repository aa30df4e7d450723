import pytest

from attrmagic.errors import InvalidUsageError
from attrmagic.predicates import available_predicates
from attrmagic.predicates import check_predicate
from attrmagic.predicates import parse_predicate
from attrmagic.predicates import register_predicate
from attrmagic.predicates import unregister_predicate
from attrmagic.types import PredicateSpec


@pytest.mark.parametrize(
    "token,spec",
    [
        ("present", PredicateSpec("present", False)),
        ("present?", PredicateSpec("present", False)),
        ("not_empty", PredicateSpec("empty", True)),
        ("not_empty?", PredicateSpec("empty", True)),
        ("not_nil", PredicateSpec("nil", True)),
        ("valid", PredicateSpec("valid", False)),
    ],
)
def test_parse_predicate(token, spec):
    assert parse_predicate(token) == spec


def test_parse_predicate_default():
    assert parse_predicate() == PredicateSpec("nil", True)
    assert str(parse_predicate()) == "not_nil"


@pytest.mark.parametrize("token", ["", "not_", "not_?", "?", None, 1])
def test_parse_predicate_invalid(token):
    with pytest.raises(InvalidUsageError):
        parse_predicate(token)


def test_invalid_usage_is_value_error():
    with pytest.raises(ValueError):
        parse_predicate("not_")


@pytest.mark.parametrize(
    "value,blank",
    [
        (None, True),
        (False, True),
        ("", True),
        ("  \n", True),
        ([], True),
        ({}, True),
        ("x", False),
        ([0], False),
        (0, False),
        (True, False),
    ],
)
def test_blank_and_present(value, blank):
    assert check_predicate(value, "blank") is blank
    assert check_predicate(value, "present") is not blank
    assert check_predicate(value, "not_present") is blank


def test_empty():
    assert check_predicate([], "empty") is True
    assert check_predicate([1], "not_empty") is True
    with pytest.raises(TypeError):
        check_predicate(1, "empty")


def test_valid():
    class WithMethod:
        def __init__(self, ok):
            self.ok = ok

        def is_valid(self):
            return self.ok

    class WithAttr:
        valid = False

    assert check_predicate(WithMethod(True), "valid")
    assert check_predicate(WithMethod(False), "not_valid")
    assert check_predicate(WithAttr(), "not_valid")
    with pytest.raises(AttributeError):
        check_predicate(object(), "valid")


def test_nil_and_true():
    assert check_predicate(None, "nil")
    assert check_predicate(0, "not_nil")
    assert check_predicate(0, "not_true")
    assert check_predicate("a", "true")


def test_unknown_predicate():
    with pytest.raises(InvalidUsageError, match="unknown predicate"):
        check_predicate(1, "positive")


def test_register_predicate():
    register_predicate("positive", lambda v: v > 0)
    assert "positive" in available_predicates()
    assert check_predicate(1, "positive")
    assert check_predicate(-1, "not_positive")

    with pytest.raises(ValueError):
        register_predicate("positive", lambda v: v >= 0)
    register_predicate("positive", lambda v: v >= 0, replace=True)
    assert check_predicate(0, "positive")

    unregister_predicate("positive")
    assert "positive" not in available_predicates()
    with pytest.raises(KeyError):
        unregister_predicate("positive")


@pytest.mark.parametrize("name", ["", "?", "not_positive"])
def test_register_predicate_invalid_name(name):
    with pytest.raises(ValueError):
        register_predicate(name, bool)


def test_register_predicate_not_callable():
    with pytest.raises(TypeError):
        register_predicate("positive", 1)


def test_unregister_builtin_restores():
    register_predicate("empty", lambda v: True, replace=True)
    assert check_predicate([1], "empty")
    unregister_predicate("empty")
    assert not check_predicate([1], "empty")
