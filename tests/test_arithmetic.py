import math
from decimal import Decimal
from fractions import Fraction

import pytest

from core.domain.arithmetic import add


def test_add_two_numbers():
    assert add(1, 2) == 3


def test_add_does_not_return_wrong_result():
    assert add(1, 2) != 4


@pytest.mark.parametrize("a,b", [(1, 2), (-3, 7), (0.5, 0.25), (10**20, 1), (-1.5, 1.5)])
def test_add_matches_plus_and_commutes(a, b):
    assert add(a, b) == a + b
    assert add(a, b) == add(b, a)


def test_add_rejects_string_operand():
    with pytest.raises(TypeError):
        add(1, "2")
    with pytest.raises(TypeError):
        add("1", 2)


@pytest.mark.parametrize("a,b", [(math.nan, 2), (2, math.nan), (float("nan"), float("nan"))])
def test_add_rejects_nan(a, b):
    with pytest.raises(TypeError, match="NaN"):
        add(a, b)


def test_add_rejects_decimal_and_complex_nan():
    with pytest.raises(TypeError):
        add(Decimal("NaN"), Decimal(1))
    with pytest.raises(TypeError):
        add(complex(math.nan, 0), 1)


@pytest.mark.parametrize("bad", [None, True, False, [1], {"a": 1}, b"1"])
def test_add_rejects_non_numeric(bad):
    with pytest.raises(TypeError):
        add(bad, 1)
    with pytest.raises(TypeError):
        add(1, bad)


def test_add_error_names_offending_operand():
    with pytest.raises(TypeError, match="b must be a number, got str"):
        add(1, "2")


def test_add_keeps_host_numeric_types():
    assert add(Fraction(1, 3), Fraction(1, 6)) == Fraction(1, 2)
    assert add(Decimal("0.1"), Decimal("0.2")) == Decimal("0.3")
    assert add(1 + 2j, 1) == 2 + 2j
    assert isinstance(add(1, 2), int)


def test_add_accepts_infinities():
    assert add(math.inf, 1) == math.inf
    assert add(-math.inf, -1) == -math.inf
