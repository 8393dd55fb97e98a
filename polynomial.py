from __future__ import annotations
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Union

import numpy as np

from fraction import Fraction, FractionLike
from monomial import Monomial
from numeric import gcd, lcm, random_int
from shunting_yard import ShuntingYard

logger = logging.getLogger(__name__)

DEFAULT_LETTER = "x"
DEFAULT_FACTOR_BOUND = 20
ZERO_DECIMALS = 3
ROOT_TOLERANCE = 1e-7

Operand = Union["Polynomial", Monomial, Fraction, int, str]


class EuclideanDivision(NamedTuple):
    quotient: "Polynomial"
    remainder: "Polynomial"


def _exponent(text: str) -> Union[int, float]:
    try:
        return int(text)
    except ValueError:
        return float(text)


@dataclass(eq=False)
class Polynomial:
    """Sum of terms with exact rational coefficients.

    Terms keep their insertion order and may repeat or be zero until
    ``reduce()`` runs. Operations return new polynomials and never change
    the receiver; the only exception is ``factorize()``, which also stores
    the factors it found in ``factors``.
    """

    terms: List[Monomial] = field(default_factory=list)
    raw: str = ""
    factors: List["Polynomial"] = field(default_factory=list)

    @classmethod
    def parse(cls, expr: str, *values: FractionLike) -> "Polynomial":
        """Parse an algebraic string, or inject coefficients for letters.

        ``Polynomial.parse("2x^2+3x-5")`` evaluates the expression;
        ``Polynomial.parse("x", 1, -3, 2)`` builds x^2-3x+2 and
        ``Polynomial.parse("xy", 2, 3)`` builds 2x+3y.
        """
        if not values:
            expr = str(expr)
            P = cls._from_rpn(ShuntingYard().parse(expr))
            P.raw = expr
            return P
        if expr[:1].isalpha():
            return cls.from_values(expr, *values)
        return cls.zero()

    @classmethod
    def _from_rpn(cls, sy: ShuntingYard) -> "Polynomial":
        stack: List[Polynomial] = []
        for token in sy.rpn:
            if not sy.is_operation(token):
                stack.append(cls.from_monomials([Monomial.parse(token)]))
                continue
            if token.startswith("^"):
                base = stack.pop() if stack else cls.zero()
                stack.append(base.pow(_exponent(token[1:])))
                continue
            m2 = stack.pop() if stack else cls.zero()
            m1 = stack.pop() if stack else cls.zero()
            if token == "+":
                m1 = m1.add(m2)
            elif token == "-":
                m1 = m1.subtract(m2)
            elif token == "*":
                m1 = m1.multiply(m2)
            else:
                logger.warning("Token not recognized while reducing polynomial: %s", token)
            stack.append(m1)
        if not stack:
            return cls.zero()
        if len(stack) > 1:
            logger.warning("Operands left over while reducing polynomial: %s",
                           ", ".join(p.display for p in stack[1:]))
        return stack[0]

    @classmethod
    def from_values(cls, letters: str, *values: FractionLike) -> "Polynomial":
        fractions = [Fraction(v) for v in values]
        terms: List[Monomial] = []
        if len(letters) > 1:
            # one coefficient per letter, extra values become the constant
            for i, F in enumerate(fractions):
                literal = {letters[i]: 1} if i < len(letters) else {}
                terms.append(Monomial(F, literal))
        else:
            n = len(fractions) - 1
            for F in fractions:
                terms.append(Monomial(F, {letters: n}))
                n -= 1
        return cls.empty().add(*terms)

    @classmethod
    def from_monomials(cls, monoms: List[Monomial]) -> "Polynomial":
        """Wrap terms as they are; no reduction happens."""
        return cls([m.clone() for m in monoms])

    @classmethod
    def variable(cls, name: str) -> "Polynomial":
        return cls([Monomial(Fraction.one(), {name: 1})])

    @classmethod
    def zero(cls) -> "Polynomial":
        return cls([Monomial.zero()], "0")

    @classmethod
    def one(cls) -> "Polynomial":
        return cls([Monomial.one()], "1")

    @classmethod
    def empty(cls) -> "Polynomial":
        return cls([], "")

    def clone(self) -> "Polynomial":
        return Polynomial([m.clone() for m in self.terms], self.raw, [f.clone() for f in self.factors])

    @classmethod
    def rnd_simple(cls, degree: int = 1, unit: bool = False, with_fraction: bool = False,
                   letters: str = DEFAULT_LETTER, allow_zero: bool = True,
                   number_of_monoms: int = -1) -> "Polynomial":
        """Random polynomial whose leading term is never zero."""
        terms: List[Monomial] = []
        for i in range(degree, -1, -1):
            M = Monomial.random(letters, i, with_fraction, False if i == degree else allow_zero)
            if unit and i == degree:
                M = Monomial(Fraction.one(), M.literal)
            terms.append(M)
        P = cls(terms).reduce()
        if 0 < number_of_monoms < P.length:
            # keep the leading term, drop others at random
            kept = list(P.reorder(letters[0]).terms)
            while len(kept) > number_of_monoms:
                del kept[random_int(1, len(kept) - 1)]
            P = cls(kept)
        return P

    @classmethod
    def rnd_factorable(cls, degree: int = 2, unit: Union[bool, int] = False,
                       letters: str = DEFAULT_LETTER) -> "Polynomial":
        """Random product of ``degree`` linear factors, kept in ``factors``.

        ``unit=True`` makes every factor monic; an integer n leaves the first
        n factors free and makes the others monic.
        """
        factors: List[Polynomial] = []
        for i in range(degree):
            factor_unit = unit if isinstance(unit, bool) else i >= unit
            factors.append(cls.rnd_simple(1, factor_unit, False, letters))
        P = cls.one()
        for F in factors:
            P = P.multiply(F)
        P.factors = factors
        return P

    @property
    def length(self) -> int:
        return len(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    @property
    def variables(self) -> List[str]:
        V = set()
        for m in self.terms:
            V.update(m.variables)
        return sorted(V)

    def letters(self) -> List[str]:
        return self.variables

    @property
    def number_of_vars(self) -> int:
        return len(self.variables)

    @property
    def is_multi_variable(self) -> bool:
        return any(len(m.variables) > 1 for m in self.terms)

    def gen_display(self, output: str = "display", force_sign: bool = False,
                    wrap_parentheses: bool = False) -> str:
        tex = output == "tex"
        P = ""
        for m in self.terms:
            if m.coefficient.is_zero():
                continue
            sign = "+" if m.coefficient.sign() == 1 and (P != "" or force_sign) else ""
            P += sign + (m.tex if tex else m.display)
        if wrap_parentheses and self.length > 1:
            P = f"\\left( {P} \\right)" if tex else f"({P})"
        if P == "":
            P = "0"
        return P

    @property
    def display(self) -> str:
        return self.gen_display()

    @property
    def tex(self) -> str:
        return self.gen_display("tex")

    @staticmethod
    def _as_terms(value: Operand) -> List[Monomial]:
        if isinstance(value, Polynomial):
            return [m.clone() for m in value.terms]
        if isinstance(value, Monomial):
            return [value.clone()]
        if isinstance(value, bool):
            raise TypeError("Cannot combine a polynomial with a bool")
        if isinstance(value, (Fraction, int)):
            return [Monomial(Fraction(value))]
        if isinstance(value, str):
            return [Monomial.parse(value)]
        raise TypeError(f"Cannot combine a polynomial with {type(value).__name__}")

    def opposed(self) -> "Polynomial":
        return Polynomial([m.opposed() for m in self.terms])

    def add(self, *values: Operand) -> "Polynomial":
        terms = [m.clone() for m in self.terms]
        for value in values:
            terms.extend(self._as_terms(value))
        return Polynomial(terms).reduce()

    def subtract(self, *values: Operand) -> "Polynomial":
        terms = [m.clone() for m in self.terms]
        for value in values:
            terms.extend(m.opposed() for m in self._as_terms(value))
        return Polynomial(terms).reduce()

    def multiply(self, value: Union["Polynomial", Monomial, Fraction, int]) -> "Polynomial":
        if isinstance(value, Polynomial):
            terms = [Monomial.xmultiply(m1, m2) for m1 in self.terms for m2 in value.terms]
        elif isinstance(value, Monomial):
            terms = [m.multiply(value) for m in self.terms]
        elif isinstance(value, (Fraction, int)) and not isinstance(value, bool):
            terms = [m.multiply(value) for m in self.terms]
        else:
            raise TypeError(f"Cannot multiply a polynomial by {type(value).__name__}")
        return Polynomial(terms).reduce()

    def divide(self, value: Union[Fraction, int]) -> "Polynomial":
        """Divide every coefficient by a scalar; see ``euclidian`` for polynomials."""
        if isinstance(value, Polynomial):
            raise TypeError("Use euclidian() to divide by a polynomial")
        if isinstance(value, bool) or not isinstance(value, (Fraction, int)):
            raise TypeError(f"Cannot divide a polynomial by {type(value).__name__}")
        return Polynomial([m.divide(value) for m in self.terms]).reduce()

    def pow(self, nb: Union[int, float]) -> "Polynomial":
        if isinstance(nb, float) and nb.is_integer():
            nb = int(nb)
        if isinstance(nb, bool) or not isinstance(nb, int) or nb < 0:
            return Polynomial.zero()
        if nb == 0:
            return Polynomial.one()
        P = Polynomial([m.clone() for m in self.terms])
        for _ in range(nb - 1):
            P = P.multiply(self)
        return P.reduce()

    def euclidian(self, divisor: "Polynomial") -> EuclideanDivision:
        """Long division: ``self == divisor * quotient + remainder``."""
        divisor = divisor.reduce()
        if divisor.is_zero():
            raise ZeroDivisionError("Euclidean division by the zero polynomial")
        quotient = Polynomial.zero()
        remainder = self.reduce()
        max_mp = divisor.monom_by_degree()
        degree = divisor.degree()
        while remainder.degree() >= degree:
            leading = remainder.monom_by_degree()
            if not leading.is_divisible_by(max_mp):
                break
            new_m = leading.divide(max_mp)
            if new_m.is_zero():
                break
            quotient = quotient.add(new_m)
            remainder = remainder.subtract(divisor.multiply(new_m))
        return EuclideanDivision(quotient, remainder)

    def reduce(self) -> "Polynomial":
        merged: List[Monomial] = []
        for m in self.terms:
            for i, kept in enumerate(merged):
                if kept.is_same_as(m):
                    merged[i] = kept.add(m)
                    break
            else:
                merged.append(m.clone())
        terms = [Monomial(m.coefficient.reduce(), m.literal) for m in merged if not m.coefficient.is_zero()]
        if not terms:
            terms = [Monomial.zero()]
        return Polynomial(terms, self.raw, list(self.factors))

    def reorder(self, letter: str = DEFAULT_LETTER) -> "Polynomial":
        terms = sorted(self.terms, key=lambda m: -m.degree(letter))
        return Polynomial(terms, self.raw, list(self.factors)).reduce()

    def degree(self, letter: str | None = None) -> int:
        return max([0] + [m.degree(letter) for m in self.terms])

    def compare(self, P: "Polynomial", sign: str = "=") -> bool:
        """'=' for equal polynomials, 'same' for matching literal parts only."""
        if sign not in ("=", "same"):
            return False
        cP1 = self.reduce().reorder()
        cP2 = P.reduce().reorder()
        if cP1.length != cP2.length or cP1.degree() != cP2.degree():
            return False
        for m1 in cP1.terms:
            m2 = next((m for m in cP2.terms if m.is_same_as(m1)), None)
            if m2 is None:
                return False
            if sign == "=" and not m1.is_equal(m2):
                return False
        return True

    def is_zero(self) -> bool:
        return (self.length == 1 and self.terms[0].coefficient.is_zero()) or self.length == 0

    def is_one(self) -> bool:
        return self.length == 1 and self.terms[0].is_one()

    def is_equal(self, P: "Polynomial") -> bool:
        return self.compare(P, "=")

    def is_same_as(self, P: "Polynomial") -> bool:
        return self.compare(P, "same")

    def is_opposed_at(self, P: "Polynomial") -> bool:
        return self.compare(P.opposed(), "=")

    def evaluate(self, values: Dict[str, FractionLike]) -> Fraction:
        r = Fraction.zero()
        for m in self.terms:
            r = r.add(m.evaluate(values))
        return r

    def _default_letter(self) -> str:
        V = self.variables
        return V[0] if len(V) == 1 else DEFAULT_LETTER

    def derivative(self, letter: str | None = None) -> "Polynomial":
        letter = letter or self._default_letter()
        return Polynomial([m.derivative(letter) for m in self.terms]).reduce()

    def integrate(self, letter: str | None = None) -> "Polynomial":
        """Antiderivative with a zero constant."""
        letter = letter or self._default_letter()
        return Polynomial([m.integrate(letter) for m in self.terms]).reduce()

    def replace_by(self, letter: str, P: "Polynomial") -> "Polynomial":
        """Substitute the polynomial P for every occurrence of letter."""
        result = Polynomial.zero()
        for m in self.terms:
            e = m.degree(letter)
            if e == 0:
                result = result.add(m)
                continue
            rest = Monomial(m.coefficient, {k: v for k, v in m.literal.items() if k != letter})
            result = result.add(P.pow(e).multiply(rest))
        V = result.variables
        if letter not in V and P.variables:
            letter = P.variables[0]
        return result.reorder(letter)

    def factorize(self, max_value: int = DEFAULT_FACTOR_BOUND,
                  letter: str = DEFAULT_LETTER) -> List["Polynomial"]:
        """Best-effort factorization over the rationals.

        Linear factors ax+b are searched for 1 <= a <= max_value and
        |b| <= max_value; whatever is left is recorded as a last factor.
        The result is also stored in ``self.factors``.
        """
        factors: List[Polynomial] = []
        P = self.reduce()
        if P.is_zero():
            self.factors = [Polynomial.zero()]
            return list(self.factors)

        if P.monom_by_degree().coefficient.is_negative():
            factors.append(Polynomial([Monomial(Fraction(-1))]))
            P = P.opposed()

        nb_factors_found = 0
        M = P.common_monom()
        if not M.is_one():
            common = Polynomial([M])
            if not factors:
                factors.append(common)
            else:
                factors = [common.opposed()]
            P = P.euclidian(common).quotient
            nb_factors_found = common.degree()

        if P.degree() <= 1:
            if not (P.is_one() and factors):
                factors.append(P)
        elif any(v != letter for v in P.variables):
            logger.debug("No linear factor search for %s in %s", P.display, letter)
            factors.append(P)
        else:
            degree = P.degree()
            for a, b in itertools.product(range(1, max_value + 1), range(-max_value, max_value + 1)):
                Q = Fraction(-b, a)
                if P.evaluate({letter: Q}).is_zero():
                    F = Polynomial.from_values(letter, a, b)
                    while P.evaluate({letter: Q}).is_zero():
                        logger.debug("Factor %s found for %s", F.display, self.display)
                        factors.append(F.clone())
                        nb_factors_found += 1
                        P = P.euclidian(F).quotient
                if nb_factors_found > degree:
                    break
            if not P.is_one():
                factors.append(P)

        self.factors = factors
        return list(factors)

    def get_zeroes(self) -> List[Union[Fraction, bool]]:
        """Real zeroes of the polynomial.

        A constant gives [True] when it is zero (every value is a zero) and
        [False] otherwise. Zeroes coming from irreducible quadratic factors
        are rounded to ZERO_DECIMALS places; factors of degree above two are
        skipped.
        """
        P = self.reduce()
        degree = P.degree()
        if degree == 0:
            return [P.terms[0].coefficient.is_zero()]
        if degree == 1:
            if P.length == 1:
                return [Fraction.zero()]
            a = P.monom_by_degree(1).coefficient
            b = P.monom_by_degree(0).coefficient
            return [b.opposed().divide(a)]

        factors = self.factors or self.factorize()
        zeroes: List[Fraction] = []
        seen = set()
        for F in factors:
            d = F.degree()
            if d > 2:
                logger.debug("Zeroes of %s are not searched", F.display)
                continue
            found = F._quadratic_zeroes() if d == 2 else F.get_zeroes()
            for z in found:
                if isinstance(z, bool):
                    continue
                z = z.reduce()
                if z.display not in seen:
                    seen.add(z.display)
                    zeroes.append(z)
        return zeroes

    def _quadratic_zeroes(self, decimals: int = ZERO_DECIMALS) -> List[Fraction]:
        A = self.monom_by_degree(2).coefficient
        B = self.monom_by_degree(1).coefficient
        C = self.monom_by_degree(0).coefficient
        D = B.pow(2).subtract(A.multiply(C).multiply(4))
        if D.is_zero():
            return [B.opposed().divide(A.multiply(2))]
        if D.value < 0:
            logger.debug("No real zero for %s", self.display)
            return []
        sqrt_d = np.sqrt(D.value)
        x1 = (-B.value + sqrt_d) / (2 * A.value)
        x2 = (-B.value - sqrt_d) / (2 * A.value)
        return [Fraction(f"{x1:.{decimals}f}").reduce(), Fraction(f"{x2:.{decimals}f}").reduce()]

    def approximate_roots(self, letter: str = DEFAULT_LETTER, tol: float = ROOT_TOLERANCE) -> List[float]:
        """Real roots as floats, sorted, for a polynomial in a single letter."""
        P = self.reduce()
        if any(v != letter for v in P.variables):
            raise ValueError(f"Expected a polynomial in {letter} only, got {P.display}")
        coeffs = [P.monom_by_degree(k, letter).coefficient.value
                  for k in range(P.degree(letter), -1, -1)]
        while coeffs and abs(coeffs[0]) < tol:
            coeffs.pop(0)
        if len(coeffs) < 2:
            return []
        roots = np.roots(coeffs)
        return sorted(float(r.real) for r in roots if abs(r.imag) < tol)

    def can_divide(self, P: "Polynomial", letter: str = DEFAULT_LETTER) -> bool:
        """Divisibility by a polynomial of degree at most one."""
        d = P.degree()
        if d == 0:
            return not P.is_zero()
        if d == 1:
            z = P.get_zeroes()
            if isinstance(z[0], bool):
                return False
            return self.evaluate({letter: z[0]}).is_zero()
        logger.debug("can_divide only handles first degree divisors, got %s", P.display)
        return False

    def monom_by_degree(self, degree: int | None = None, letter: str | None = None) -> Monomial:
        P = self.reduce()
        if degree is None:
            degree = P.degree(letter)
        for m in P.terms:
            if m.degree(letter) == degree:
                return m.clone()
        return Monomial.zero()

    def monom_by_letter(self, letter: str) -> Monomial:
        for m in self.reduce().terms:
            if m.has_letter(letter):
                return m.clone()
        return Monomial.zero()

    def get_numerators(self) -> List[int]:
        return [m.coefficient.numerator for m in self.terms]

    def get_denominators(self) -> List[int]:
        return [m.coefficient.denominator for m in self.terms]

    def gcd_numerator(self) -> int:
        return gcd(*self.get_numerators())

    def gcd_denominator(self) -> int:
        return gcd(*self.get_denominators())

    def lcm_numerator(self) -> int:
        return lcm(*self.get_numerators())

    def lcm_denominator(self) -> int:
        return lcm(*self.get_denominators())

    def common_monom(self) -> Monomial:
        return Monomial.gcd(*self.reduce().terms)

    def minify(self) -> "Polynomial":
        """Scale to coprime integer coefficients (same zeroes)."""
        P = self.multiply(self.lcm_denominator())
        g = P.gcd_numerator()
        return P.divide(g) if g != 0 else P

    def __add__(self, rhs: Operand) -> "Polynomial":
        return self.add(rhs)

    def __sub__(self, rhs: Operand) -> "Polynomial":
        return self.subtract(rhs)

    def __mul__(self, rhs: Union["Polynomial", Monomial, Fraction, int]) -> "Polynomial":
        return self.multiply(rhs)

    def __neg__(self) -> "Polynomial":
        return self.opposed()

    def __pow__(self, exp: int) -> "Polynomial":
        return self.pow(exp)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.compare(other, "=")

    def __str__(self) -> str:
        return self.display
