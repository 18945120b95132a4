"""Numeric helpers with strict operand validation."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        # Comparing a signaling NaN raises, so ask the Decimal directly.
        return value.is_nan()
    return value != value


def _check_operand(name: str, value: Any) -> None:
    # bool is an int subclass but not a number for our purposes.
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if _is_nan(value):
        raise TypeError(f"{name} must not be NaN")


def add(a: Any, b: Any) -> Any:
    """Return ``a + b`` for two numeric, non-NaN operands.

    No coercion is attempted: ``add(1, "2")`` raises ``TypeError``, as does
    any NaN operand (``float``, ``complex`` or ``Decimal``). Infinities are
    accepted and follow the host type's addition rules.
    """

    _check_operand("a", a)
    _check_operand("b", b)
    return a + b
