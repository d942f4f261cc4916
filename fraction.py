from __future__ import annotations
from typing import Union
import numpy as np
import int128
from int128 import Integer

def gcd(a: int, b: int) -> int:
	# sign is left as the remainders produce it
	if b == 0:
		return a
	return gcd(b, int128.rem_trunc(a, b))

class Fraction:
	"""Exact ratio of two signed 128-bit integers.

	Plain construction keeps the pair as given, unreduced and possibly with a
	negative or zero denominator. Arithmetic reduces its result; equality uses
	cross-multiplication so the stored form never matters.
	"""
	__slots__ = ("_num", "_den")
	# numpy integer scalars on the left defer to our reflected operators
	__array_ufunc__ = None
	def __init__(self, numerator: Integer, denominator: Integer = 1) -> None:
		self._num = int128.coerce(numerator)
		self._den = int128.coerce(denominator)
	@classmethod
	def new(cls, numerator: Integer, denominator: Integer) -> Fraction:
		return cls(numerator, denominator)
	@classmethod
	def new_reduced(cls, numerator: Integer, denominator: Integer) -> Fraction:
		n, d = int128.coerce(numerator), int128.coerce(denominator)
		g = gcd(n, d)
		return cls(int128.div_trunc(n, g), int128.div_trunc(d, g))
	@classmethod
	def from_int(cls, value: Integer) -> Fraction:
		return cls(value, 1)
	@property
	def numerator(self) -> int:
		return self._num
	@property
	def denominator(self) -> int:
		return self._den
	def pow(self, exp: Integer) -> Fraction:
		if not int128.is_integer(exp):
			raise TypeError(f"exponent must be an integer, got {type(exp).__name__}")
		e = int(exp)
		return Fraction(int128.pow_checked(self._num, e), int128.pow_checked(self._den, e))
	def to_float(self) -> float:
		with np.errstate(divide="ignore", invalid="ignore"):
			return float(np.float64(self._num) / np.float64(self._den))
	def __float__(self) -> float:
		return self.to_float()
	def __neg__(self) -> Fraction:
		return Fraction(int128.neg(self._num), self._den)
	def __add__(self, other: Union[Fraction, Integer]) -> Fraction:
		rhs = _as_fraction(other)
		if rhs is None:
			return NotImplemented
		a, b, c, d = self._num, self._den, rhs._num, rhs._den
		return Fraction.new_reduced(int128.add(int128.mul(a, d), int128.mul(b, c)), int128.mul(b, d))
	def __radd__(self, other: Integer) -> Fraction:
		lhs = _as_fraction(other)
		if lhs is None:
			return NotImplemented
		return lhs + self
	def __sub__(self, other: Union[Fraction, Integer]) -> Fraction:
		rhs = _as_fraction(other)
		if rhs is None:
			return NotImplemented
		return self + (-rhs)
	def __rsub__(self, other: Integer) -> Fraction:
		lhs = _as_fraction(other)
		if lhs is None:
			return NotImplemented
		return lhs - self
	def __mul__(self, other: Union[Fraction, Integer]) -> Fraction:
		rhs = _as_fraction(other)
		if rhs is None:
			return NotImplemented
		a, b, c, d = self._num, self._den, rhs._num, rhs._den
		return Fraction.new_reduced(int128.mul(a, c), int128.mul(b, d))
	def __rmul__(self, other: Integer) -> Fraction:
		lhs = _as_fraction(other)
		if lhs is None:
			return NotImplemented
		return lhs * self
	def __truediv__(self, other: Union[Fraction, Integer]) -> Fraction:
		rhs = _as_fraction(other)
		if rhs is None:
			return NotImplemented
		a, b, c, d = self._num, self._den, rhs._num, rhs._den
		divisor = int128.mul(b, c)
		if divisor == 0:
			raise ZeroDivisionError(f"division of {self} by {rhs}")
		return Fraction.new_reduced(int128.mul(a, d), divisor)
	def __rtruediv__(self, other: Integer) -> Fraction:
		lhs = _as_fraction(other)
		if lhs is None:
			return NotImplemented
		return lhs / self
	def __pow__(self, exp: Integer) -> Fraction:
		if not int128.is_integer(exp):
			return NotImplemented
		return self.pow(exp)
	def __eq__(self, other: object) -> bool:
		rhs = _as_fraction(other)
		if rhs is None:
			return NotImplemented
		return int128.mul(self._num, rhs._den) == int128.mul(self._den, rhs._num)
	# equality is not transitive through zero denominators, so no hash
	__hash__ = None  # type: ignore[assignment]
	def __str__(self) -> str:
		return f"{self._num}/{self._den}"
	def __repr__(self) -> str:
		return f"Fraction({self._num}, {self._den})"

def _as_fraction(value: object) -> Fraction | None:
	if isinstance(value, Fraction):
		return value
	if int128.is_integer(value):
		return Fraction.from_int(value)  # type: ignore[arg-type]
	return None
