"""
Tests for the balanced encoding (-1 / 0 / 1 trits).
"""

import pytest

from ternarylogic.logic import balanced
from ternarylogic.logic.balanced import (
    not_, both, either, differ, same,
    and_, or_, xor, xnor, eq,
    resolve, collapse, to_boolean,
    to_ternary, from_ternary,
    FALSE, UNKNOWN, TRUE, TRITS,
)
from ternarylogic.logic import ternary
from ternarylogic import EmptyOperandsError

t, f, u = TRUE, FALSE, UNKNOWN


def test_constants():
    assert (f, u, t) == (-1, 0, 1)
    assert TRITS == (-1, 0, 1)


def test_not():
    assert not_(f) == t
    assert not_(u) == u
    assert not_(t) == f


@pytest.mark.parametrize("a", TRITS)
@pytest.mark.parametrize("b", TRITS)
def test_both_and_either_are_min_and_max(a, b):
    assert both(a, b) == min(a, b)
    assert either(a, b) == max(a, b)


@pytest.mark.parametrize("a,b,expected", [
    (f, f, f), (f, u, u), (f, t, t),
    (u, f, u), (u, u, u), (u, t, u),
    (t, f, t), (t, u, u), (t, t, f),
])
def test_differ(a, b, expected):
    assert differ(a, b) == expected
    assert xor(a, b) == expected
    assert same(a, b) == -expected
    assert xnor(a, b) == -expected
    assert eq(a, b) == -expected


@pytest.mark.parametrize("a", TRITS)
@pytest.mark.parametrize("b", TRITS)
def test_binary_connectives_mirror_ternary_encoding(a, b):
    ta, tb = to_ternary(a), to_ternary(b)
    assert to_ternary(both(a, b)) is ternary.both(ta, tb)
    assert to_ternary(either(a, b)) is ternary.either(ta, tb)
    assert to_ternary(differ(a, b)) is ternary.differ(ta, tb)
    assert to_ternary(same(a, b)) is ternary.same(ta, tb)


@pytest.mark.parametrize("a", TRITS)
@pytest.mark.parametrize("b", TRITS)
def test_results_stay_in_domain(a, b):
    for op in (both, either, differ, same):
        assert op(a, b) in TRITS


def test_nary():
    assert and_(t, u, t) == u
    assert and_(t, f, u) == f
    assert or_(f, u, f) == u
    assert or_(f, t, u) == t
    assert xor(f, u, t) == u
    assert xor(t, t, t) == f
    assert xor(t, f, t) == t
    assert xnor(t, t, t) == t
    assert xnor(f, t) == f


@pytest.mark.parametrize("operator", [and_, or_, xor, xnor])
def test_empty_operands(operator):
    with pytest.raises(EmptyOperandsError):
        operator()


def test_resolve_collapse_to_boolean():
    assert resolve(f, "t", "f", "u") == "f"
    assert resolve(u, "t", "f", "u") == "u"
    assert resolve(t, "t", "f", "u") == "t"
    assert collapse(f, "t", "f") == "f"
    assert collapse(u, "t", "f") == "t"
    assert collapse(t, "t", "f") == "t"
    assert to_boolean(f) is False
    assert to_boolean(u) is True
    assert to_boolean(t) is True


def test_to_ternary():
    assert to_ternary(f) is False
    assert to_ternary(u) is None
    assert to_ternary(t) is True


def test_from_ternary():
    assert from_ternary(False) == f
    assert from_ternary(None) == u
    assert from_ternary(True) == t


@pytest.mark.parametrize("value", [True, False, None])
def test_round_trip_from_ternary(value):
    assert to_ternary(from_ternary(value)) is value


@pytest.mark.parametrize("trit", TRITS)
def test_round_trip_from_trit(trit):
    assert from_ternary(to_ternary(trit)) == trit


def test_module_exports_same_operator_names_as_ternary():
    names = ["not_", "both", "either", "differ", "same", "and_", "or_",
             "xor", "xnor", "eq", "resolve", "collapse", "to_boolean"]
    for name in names:
        assert callable(getattr(balanced, name))
        assert callable(getattr(ternary, name))
