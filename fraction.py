from __future__ import annotations
import math
import operator
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Dict, Optional, Union
from numeric import gcd, decimal_places

FractionLike = Union["Fraction", int, float, str]

class FractionState(Enum):
	FINITE = "finite"
	INFINITE = "infinite"
	INVALID = "invalid"

_COMPARATORS: Dict[str, Callable[[float, float], bool]] = {
	"=": operator.eq,
	"<": operator.lt,
	"<=": operator.le,
	"=<": operator.le,
	"leq": operator.le,
	">": operator.gt,
	">=": operator.ge,
	"=>": operator.ge,
	"geq": operator.ge,
	"<>": operator.ne,
	"!=": operator.ne,
}

def _exact_root(value: int, p: int) -> Optional[int]:
	r = math.isqrt(value) if p == 2 else round(value ** (1.0 / p))
	for c in (r - 1, r, r + 1):
		if c >= 0 and c ** p == value:
			return c
	return None

class Fraction:
	"""Exact ratio of two integers.

	A fraction is only brought to lowest terms by ``reduce()``; arithmetic
	results are reduced, parsed values are not. Fractions are immutable and
	every operation returns a new instance.

	Division by zero and malformed input never raise: they produce the
	infinite and the invalid fraction, told apart by ``state``.

	``Fraction()`` with no argument is zero.
	"""
	__slots__ = ("_n", "_d", "_state")

	def __init__(self, value: FractionLike | None = None, denominator_or_periodic: int | None = None) -> None:
		self._n, self._d, self._state = 0, 1, FractionState.FINITE
		if value is not None:
			self._parse(value, denominator_or_periodic)

	@classmethod
	def _raw(cls, n: int, d: int, state: FractionState = FractionState.FINITE) -> Fraction:
		f = cls.__new__(cls)
		f._n, f._d, f._state = n, d, state
		return f

	def _parse(self, value: FractionLike, hint: int | None) -> None:
		if isinstance(value, Fraction):
			self._n, self._d, self._state = value._n, value._d, value._state
		elif isinstance(value, bool):
			raise TypeError("Cannot build a fraction from a bool")
		elif isinstance(value, int):
			self._from_int(value, hint)
		elif isinstance(value, float):
			if math.isnan(value):
				self._set_special(FractionState.INVALID)
			elif math.isinf(value):
				self._set_special(FractionState.INFINITE)
			elif value.is_integer():
				self._from_int(int(value), hint)
			else:
				self._from_decimal(Decimal(repr(value)), hint)
		elif isinstance(value, str):
			self._from_string(value.strip(), hint)
		else:
			raise TypeError(f"Cannot build a fraction from {type(value).__name__}")

	def _set_special(self, state: FractionState) -> None:
		self._n = 1 if state is FractionState.INFINITE else 0
		self._d = 1
		self._state = state

	def _from_int(self, n: int, den: int | None) -> None:
		if den is None or isinstance(den, bool) or not isinstance(den, int):
			self._n, self._d = n, 1
		elif den == 0:
			self._set_special(FractionState.INVALID)
		else:
			self._n, self._d = n, den

	def _from_decimal(self, d: Decimal, periodic: int | None) -> None:
		if not d.is_finite():
			self._set_special(FractionState.INFINITE if d.is_infinite() else FractionState.INVALID)
			return
		if d == d.to_integral_value():
			self._n, self._d = int(d), 1
			return
		p = decimal_places(d)
		if periodic is None:
			self._n, self._d = int(d.scaleb(p)), 10 ** p
			return
		if isinstance(periodic, bool) or not isinstance(periodic, int) or not 0 < periodic <= p:
			self._set_special(FractionState.INVALID)
			return
		# 0.1666 with period 1: (1666 - 166) / (10000 - 1000)
		sign = -1 if d < 0 else 1
		d = abs(d)
		self._n = sign * (int(d.scaleb(p)) - math.floor(d.scaleb(p - periodic)))
		self._d = 10 ** p - 10 ** (p - periodic)

	def _from_string(self, s: str, hint: int | None) -> None:
		parts = s.split("/")
		if len(parts) == 1:
			try:
				d = Decimal(parts[0])
			except InvalidOperation:
				self._set_special(FractionState.INVALID)
				return
			if d.is_finite() and d == d.to_integral_value():
				self._from_int(int(d), None)
			else:
				self._from_decimal(d, hint)
		elif len(parts) == 2:
			if parts[1].strip() == "0":
				self._set_special(FractionState.INVALID)
				return
			try:
				self._from_int(int(parts[0]), int(parts[1]))
			except ValueError:
				self._set_special(FractionState.INVALID)
		else:
			self._set_special(FractionState.INVALID)

	@classmethod
	def zero(cls) -> Fraction:
		return cls._raw(0, 1)

	@classmethod
	def one(cls) -> Fraction:
		return cls._raw(1, 1)

	@classmethod
	def infinite(cls) -> Fraction:
		return cls._raw(1, 1, FractionState.INFINITE)

	@classmethod
	def invalid(cls) -> Fraction:
		return cls._raw(0, 1, FractionState.INVALID)

	def clone(self) -> Fraction:
		return Fraction._raw(self._n, self._d, self._state)

	@property
	def numerator(self) -> int:
		return self._n

	@property
	def denominator(self) -> int:
		return self._d

	@property
	def state(self) -> FractionState:
		return self._state

	@property
	def value(self) -> float:
		if self._state is FractionState.INVALID:
			return math.nan
		if self._state is FractionState.INFINITE:
			return math.inf
		return self._n / self._d

	def _propagate(self, other: Fraction) -> Optional[Fraction]:
		if self.is_nan() or other.is_nan():
			return Fraction.invalid()
		if self.is_infinity() or other.is_infinity():
			return Fraction.infinite()
		return None

	def opposed(self) -> Fraction:
		return Fraction._raw(-self._n if self.is_finite() else self._n, self._d, self._state)

	def add(self, other: FractionLike) -> Fraction:
		F = _as_fraction(other)
		special = self._propagate(F)
		if special is not None:
			return special
		return Fraction._raw(self._n * F._d + F._n * self._d, self._d * F._d).reduce()

	def subtract(self, other: FractionLike) -> Fraction:
		return self.add(_as_fraction(other).opposed())

	def multiply(self, other: FractionLike) -> Fraction:
		F = _as_fraction(other)
		special = self._propagate(F)
		if special is not None:
			return special
		return Fraction._raw(self._n * F._n, self._d * F._d).reduce()

	def divide(self, other: FractionLike) -> Fraction:
		F = _as_fraction(other)
		if self.is_nan() or F.is_nan():
			return Fraction.invalid()
		if F.is_zero():
			return Fraction.infinite()
		special = self._propagate(F)
		if special is not None:
			return special
		return Fraction._raw(self._n * F._d, self._d * F._n).reduce()

	def invert(self) -> Fraction:
		if self.is_nan():
			return self.clone()
		if self.is_infinity():
			return Fraction.zero()
		if self._n == 0:
			return Fraction.infinite()
		if self._n < 0:
			return Fraction._raw(-self._d, -self._n)
		return Fraction._raw(self._d, self._n)

	def pow(self, p: int | float | Fraction) -> Fraction:
		if isinstance(p, Fraction):
			if not p.is_int():
				return Fraction.invalid()
			p = p._n // p._d
		if isinstance(p, float) and p.is_integer():
			p = int(p)
		if isinstance(p, bool) or not isinstance(p, int):
			return Fraction.invalid()
		if not self.is_finite():
			return self.clone()
		F = self.reduce()
		if p < 0:
			F = F.invert()
			if not F.is_finite():
				return F
		return Fraction._raw(F._n ** abs(p), F._d ** abs(p))

	def root(self, p: int) -> Fraction:
		"""p-th root; exact for perfect powers, a decimal approximation otherwise."""
		if isinstance(p, bool) or not isinstance(p, int):
			return Fraction.invalid()
		if p == 0 or not self.is_finite():
			return self.clone()
		F = self.reduce()
		if p < 0:
			F, p = F.invert(), -p
			if not F.is_finite():
				return F
		if F._n < 0:
			if p % 2 == 0:
				return Fraction.invalid()
			return F.opposed().root(p).opposed()
		n, d = _exact_root(F._n, p), _exact_root(F._d, p)
		if n is not None and d is not None:
			return Fraction._raw(n, d)
		return Fraction(F.value ** (1.0 / p))

	def sqrt(self) -> Fraction:
		return self.root(2)

	def abs(self) -> Fraction:
		return Fraction._raw(abs(self._n), abs(self._d), self._state)

	def reduce(self) -> Fraction:
		if not self.is_finite():
			return self.clone()
		g = gcd(self._n, self._d)
		n, d = self._n // g, self._d // g
		if d < 0:
			n, d = -n, -d
		return Fraction._raw(n, d)

	def amplify(self, k: int) -> Fraction:
		if isinstance(k, bool) or not isinstance(k, int) or not self.is_finite():
			return self.clone()
		return Fraction._raw(self._n * k, self._d * k)

	def compare(self, other: FractionLike, sign: str = "=") -> bool:
		"""Compare the values of two fractions, reduced or not."""
		cmp = _COMPARATORS.get(sign)
		if cmp is None:
			return False
		return cmp(self.value, _as_fraction(other).value)

	def lesser(self, than: FractionLike) -> bool:
		return self.compare(than, "<")

	def leq(self, than: FractionLike) -> bool:
		return self.compare(than, "<=")

	def greater(self, than: FractionLike) -> bool:
		return self.compare(than, ">")

	def geq(self, than: FractionLike) -> bool:
		return self.compare(than, ">=")

	def is_equal(self, than: FractionLike) -> bool:
		return self.compare(than, "=")

	def is_different(self, than: FractionLike) -> bool:
		return self.compare(than, "<>")

	def is_opposed(self, p: FractionLike) -> bool:
		return self.is_equal(_as_fraction(p).opposed())

	def is_inverted(self, p: FractionLike) -> bool:
		return self.is_equal(Fraction.one().divide(p))

	def are_equals(self, *others: FractionLike) -> bool:
		return all(self.is_equal(F) for F in others)

	def is_zero(self) -> bool:
		return self.is_finite() and self._n == 0

	def is_one(self) -> bool:
		r = self.reduce()
		return r.is_finite() and r._n == 1 and r._d == 1

	def is_nan(self) -> bool:
		return self._state is FractionState.INVALID

	def is_infinity(self) -> bool:
		return self._state is FractionState.INFINITE

	def is_finite(self) -> bool:
		return self._state is FractionState.FINITE

	def is_int(self) -> bool:
		return self.is_finite() and self._n % self._d == 0

	def is_square(self) -> bool:
		r = self.reduce()
		if not r.is_finite() or r._n < 0:
			return False
		return _exact_root(r._n, 2) is not None and _exact_root(r._d, 2) is not None

	def sign(self) -> int:
		return 1 if self._n * self._d >= 0 else -1

	def is_positive(self) -> bool:
		return self.sign() == 1

	def is_negative(self) -> bool:
		return self.sign() == -1

	@property
	def display(self) -> str:
		if self.is_nan():
			return "NaN"
		if self.is_infinity():
			return "Infinity"
		if self._d == 1:
			return f"{self._n}"
		return f"{self._n}/{self._d}"

	@property
	def tex(self) -> str:
		if self.is_nan():
			return "NaN"
		if self.is_infinity():
			return "\\infty"
		if self._d == 1:
			return f"{self._n}"
		if self._n < 0:
			return f"-\\frac{{ {-self._n} }}{{ {self._d} }}"
		return f"\\frac{{ {self._n} }}{{ {self._d} }}"

	@property
	def frac(self) -> str:
		return self.tex

	@property
	def dfrac(self) -> str:
		return self.tex.replace("\\frac", "\\dfrac")

	def __add__(self, other: FractionLike) -> Fraction:
		return self.add(other)
	def __radd__(self, other: FractionLike) -> Fraction:
		return _as_fraction(other).add(self)
	def __sub__(self, other: FractionLike) -> Fraction:
		return self.subtract(other)
	def __rsub__(self, other: FractionLike) -> Fraction:
		return _as_fraction(other).subtract(self)
	def __mul__(self, other: FractionLike) -> Fraction:
		return self.multiply(other)
	def __rmul__(self, other: FractionLike) -> Fraction:
		return _as_fraction(other).multiply(self)
	def __truediv__(self, other: FractionLike) -> Fraction:
		return self.divide(other)
	def __rtruediv__(self, other: FractionLike) -> Fraction:
		return _as_fraction(other).divide(self)
	def __pow__(self, exp: int) -> Fraction:
		return self.pow(exp)
	def __neg__(self) -> Fraction:
		return self.opposed()
	def __abs__(self) -> Fraction:
		return self.abs()
	def __float__(self) -> float:
		return self.value
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, (Fraction, int, float)) or isinstance(other, bool):
			return NotImplemented
		return self.compare(other, "=")
	def __lt__(self, other: FractionLike) -> bool:
		return self.compare(other, "<")
	def __le__(self, other: FractionLike) -> bool:
		return self.compare(other, "<=")
	def __gt__(self, other: FractionLike) -> bool:
		return self.compare(other, ">")
	def __ge__(self, other: FractionLike) -> bool:
		return self.compare(other, ">=")
	__hash__ = None
	def __repr__(self) -> str:
		return f"Fraction('{self.display}')"
	def __str__(self) -> str:
		return self.display

def _as_fraction(value: FractionLike) -> Fraction:
	return value if isinstance(value, Fraction) else Fraction(value)
