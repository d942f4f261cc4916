"""Signed 128-bit integer helpers.

Python ints never overflow, so the fixed width is enforced here: every
value that ends up inside a Fraction, and every intermediate product on the
way there, goes through ``check``. Division and remainder truncate toward
zero, as a machine integer does, instead of flooring like ``//`` and ``%``.
"""
from __future__ import annotations
from typing import Union
import numpy as np

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1
U32_MAX = 2**32 - 1

Integer = Union[int, np.integer]


def is_integer(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def check(value: int) -> int:
    if value < I128_MIN or value > I128_MAX:
        raise OverflowError(f"{value} does not fit in a signed 128-bit integer")
    return value


def coerce(value: Integer) -> int:
    """Turn a Python or numpy integer into a range-checked Python int."""
    if not is_integer(value):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return check(int(value))


def add(a: int, b: int) -> int:
    return check(a + b)


def mul(a: int, b: int) -> int:
    return check(a * b)


def neg(a: int) -> int:
    return check(-a)


def div_trunc(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return check(q if (a < 0) == (b < 0) else -q)


def rem_trunc(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer modulo by zero")
    # remainder carries the dividend's sign
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def pow_checked(base: int, exp: int) -> int:
    if exp < 0:
        raise ValueError("Exponent must be non-negative integer")
    if exp > U32_MAX:
        raise OverflowError(f"exponent {exp} does not fit in an unsigned 32-bit integer")
    # |base| >= 2 overflows long before the exponent reaches 128
    if abs(base) > 1 and exp >= 128:
        raise OverflowError(f"{base}**{exp} does not fit in a signed 128-bit integer")
    return check(base**exp)
