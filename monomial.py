from __future__ import annotations
import random
import re
from dataclasses import dataclass, field
from typing import Dict, List, Union
from fraction import Fraction, FractionLike
from numeric import gcd, random_int

# optional signed coefficient (int, decimal or n/d) followed by letters with optional powers
_TERM = re.compile(r"^([+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:/\d+)?)?)((?:[A-Za-z](?:\^\d+)?)*)$")
_LETTER = re.compile(r"([A-Za-z])(?:\^(\d+))?")

@dataclass
class Monomial:
	coefficient: Fraction = field(default_factory=Fraction.zero)
	literal: Dict[str, int] = field(default_factory=dict)

	def __post_init__(self) -> None:
		if not isinstance(self.coefficient, Fraction):
			self.coefficient = Fraction(self.coefficient)
		self.literal = {k: e for k, e in self.literal.items() if e != 0}

	@staticmethod
	def parse(value: Union[str, int, Fraction, Monomial]) -> Monomial:
		"""Build a term from text such as '3', '-1/2', '0.5', 'x' or '3x^2y'."""
		if isinstance(value, Monomial):
			return value.clone()
		if isinstance(value, (int, Fraction)) and not isinstance(value, bool):
			return Monomial(Fraction(value))
		text = str(value).replace(" ", "")
		m = _TERM.match(text)
		if not text or m is None:
			raise ValueError(f"Cannot read a term from '{value}'")
		coeff_str, letters = m.group(1), m.group(2)
		if coeff_str in ("", "+"):
			coeff = Fraction.one()
		elif coeff_str == "-":
			coeff = Fraction(-1)
		else:
			coeff = Fraction(coeff_str)
		literal: Dict[str, int] = {}
		for name, exp in _LETTER.findall(letters):
			literal[name] = literal.get(name, 0) + (int(exp) if exp else 1)
		return Monomial(coeff, literal)

	@staticmethod
	def zero() -> Monomial:
		return Monomial(Fraction.zero(), {})

	@staticmethod
	def one() -> Monomial:
		return Monomial(Fraction.one(), {})

	@staticmethod
	def random(letters: str = "x", degree: int = 0, with_fraction: bool = False, allow_zero: bool = True) -> Monomial:
		num = random_int(-10, 10, exclude=None if allow_zero else [0])
		den = random_int(1, 10) if with_fraction else 1
		literal: Dict[str, int] = {}
		for _ in range(degree):
			name = random.choice(letters)
			literal[name] = literal.get(name, 0) + 1
		return Monomial(Fraction(num, den).reduce(), literal)

	def clone(self) -> Monomial:
		return Monomial(self.coefficient.clone(), dict(self.literal))

	@property
	def variables(self) -> List[str]:
		return sorted(self.literal)

	def degree(self, letter: str | None = None) -> int:
		if letter is None:
			return sum(self.literal.values())
		return self.literal.get(letter, 0)

	def has_letter(self, letter: str) -> bool:
		return self.literal.get(letter, 0) != 0

	def is_zero(self) -> bool:
		return self.coefficient.is_zero()

	def is_one(self) -> bool:
		return self.coefficient.is_one() and not self.literal

	def is_constant(self) -> bool:
		return not self.literal

	def is_same_as(self, other: Monomial) -> bool:
		# literal part only
		return self.literal == other.literal

	def is_equal(self, other: Monomial) -> bool:
		return self.is_same_as(other) and self.coefficient.is_equal(other.coefficient)

	def is_divisible_by(self, other: Monomial) -> bool:
		if other.is_zero():
			return False
		return all(self.degree(k) >= e for k, e in other.literal.items())

	def opposed(self) -> Monomial:
		return Monomial(self.coefficient.opposed(), dict(self.literal))

	def add(self, other: Monomial) -> Monomial:
		if not self.is_same_as(other):
			raise ValueError(f"Cannot add unlike terms {self.display} and {other.display}")
		return Monomial(self.coefficient.add(other.coefficient), dict(self.literal))

	def subtract(self, other: Monomial) -> Monomial:
		return self.add(other.opposed())

	def multiply(self, value: Union[Monomial, FractionLike]) -> Monomial:
		if isinstance(value, Monomial):
			return Monomial.xmultiply(self, value)
		return Monomial(self.coefficient.multiply(value), dict(self.literal))

	def divide(self, value: Union[Monomial, FractionLike]) -> Monomial:
		if isinstance(value, Monomial):
			v = dict(self.literal)
			for k, e in value.literal.items():
				v[k] = v.get(k, 0) - e
			return Monomial(self.coefficient.divide(value.coefficient), v)
		return Monomial(self.coefficient.divide(value), dict(self.literal))

	def pow(self, exp: int) -> Monomial:
		v = {k: e * exp for k, e in self.literal.items()}
		return Monomial(self.coefficient.pow(exp), v)

	@staticmethod
	def xmultiply(*monoms: Monomial) -> Monomial:
		coeff = Fraction.one()
		v: Dict[str, int] = {}
		for m in monoms:
			coeff = coeff.multiply(m.coefficient)
			for k, e in m.literal.items():
				v[k] = v.get(k, 0) + e
		return Monomial(coeff, v)

	@staticmethod
	def gcd(*monoms: Monomial) -> Monomial:
		"""Largest term dividing all the given terms."""
		if len(monoms) == 0:
			return Monomial.one()
		coeff = Fraction(gcd(*(m.coefficient.numerator for m in monoms)),
			gcd(*(m.coefficient.denominator for m in monoms)))
		v = {k: min(m.degree(k) for m in monoms) for k in monoms[0].literal}
		return Monomial(coeff, v)

	def evaluate(self, values: Dict[str, FractionLike]) -> Fraction:
		r = self.coefficient
		for name, exp in self.literal.items():
			if name not in values:
				raise KeyError(f"Variable '{name}' not in values")
			r = r.multiply(Fraction(values[name]).pow(exp))
		return r

	def derivative(self, letter: str | None = None) -> Monomial:
		if letter is None:
			letter = self.variables[0] if self.literal else "x"
		e = self.degree(letter)
		if e == 0:
			return Monomial.zero()
		v = dict(self.literal)
		v[letter] = e - 1
		return Monomial(self.coefficient.multiply(e), v)

	def integrate(self, letter: str = "x") -> Monomial:
		e = self.degree(letter)
		v = dict(self.literal)
		v[letter] = e + 1
		return Monomial(self.coefficient.divide(e + 1), v)

	def _render(self, tex: bool) -> str:
		c = self.coefficient
		coeff = c.tex if tex else c.display
		if not self.literal:
			return coeff
		if c.is_one():
			coeff = ""
		elif c.is_finite() and c.opposed().is_one():
			coeff = "-"
		vars_part = ""
		for name in self.variables:
			exp = self.literal[name]
			if exp == 1:
				vars_part += name
			elif tex:
				vars_part += f"{name}^{{{exp}}}"
			else:
				vars_part += f"{name}^{exp}"
		return f"{coeff}{vars_part}"

	@property
	def display(self) -> str:
		return self._render(False)

	@property
	def tex(self) -> str:
		return self._render(True)

	def __neg__(self) -> Monomial:
		return self.opposed()

	def __mul__(self, other: Union[Monomial, FractionLike]) -> Monomial:
		return self.multiply(other)

	def __str__(self) -> str:
		return self.display
