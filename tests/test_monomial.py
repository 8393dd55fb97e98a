"""Tests for Monomial terms."""

import pytest

from fraction import Fraction
from monomial import Monomial


class TestMonomialParse:
    """Test building terms from text."""

    def test_parse_full_term(self):
        """Coefficient, letters and powers."""
        m = Monomial.parse("3x^2y")
        assert m.coefficient == 3
        assert m.literal == {"x": 2, "y": 1}
        assert m.degree() == 3
        assert m.degree("x") == 2
        assert m.degree("z") == 0

    def test_parse_fraction_constant(self):
        """'-1/2' is a constant term."""
        m = Monomial.parse("-1/2")
        assert m.coefficient == Fraction(-1, 2)
        assert m.is_constant()

    def test_parse_letter(self):
        """A bare letter has coefficient one."""
        m = Monomial.parse("x")
        assert m.coefficient.is_one()
        assert m.variables == ["x"]

    def test_parse_negative_letter(self):
        """'-x' has coefficient minus one."""
        assert Monomial.parse("-x").coefficient == -1

    def test_parse_decimal(self):
        """Decimal coefficients."""
        assert Monomial.parse("0.5").coefficient == Fraction(1, 2)
        assert Monomial.parse(".5x").coefficient == Fraction(1, 2)

    @pytest.mark.parametrize("text", ["", "x+", "2*x", "x^"])
    def test_parse_rejects_non_terms(self, text):
        """Only single terms are accepted."""
        with pytest.raises(ValueError):
            Monomial.parse(text)

    def test_zero_exponents_are_dropped(self):
        """A letter with exponent zero is not part of the literal."""
        m = Monomial(Fraction(2), {"x": 0, "y": 1})
        assert m.literal == {"y": 1}

    def test_coefficient_is_coerced(self):
        """Integer coefficients become fractions."""
        m = Monomial(4, {"x": 1})
        assert isinstance(m.coefficient, Fraction)


class TestMonomialPredicates:
    """Test term comparison helpers."""

    def test_same_as_ignores_coefficient(self):
        """Same literal part."""
        assert Monomial.parse("2x^2").is_same_as(Monomial.parse("-5x^2"))
        assert not Monomial.parse("2x^2").is_same_as(Monomial.parse("2x"))

    def test_is_equal(self):
        """Same literal and same coefficient value."""
        assert Monomial.parse("2x").is_equal(Monomial(Fraction(4, 2), {"x": 1}))
        assert not Monomial.parse("2x").is_equal(Monomial.parse("3x"))

    def test_zero_and_one(self):
        """Constructors and predicates."""
        assert Monomial.zero().is_zero()
        assert Monomial.one().is_one()
        assert not Monomial.parse("x").is_one()

    def test_is_divisible_by(self):
        """Letters of the divisor must be present with high enough powers."""
        assert Monomial.parse("x^3y").is_divisible_by(Monomial.parse("2x^2"))
        assert not Monomial.parse("y").is_divisible_by(Monomial.parse("x"))
        assert not Monomial.parse("x").is_divisible_by(Monomial.zero())


class TestMonomialArithmetic:
    """Test term arithmetic."""

    def test_add_like_terms(self):
        """2x + 3x = 5x."""
        assert Monomial.parse("2x").add(Monomial.parse("3x")).is_equal(Monomial.parse("5x"))

    def test_add_unlike_terms(self):
        """Unlike terms cannot be added."""
        with pytest.raises(ValueError):
            Monomial.parse("x").add(Monomial.parse("y"))

    def test_xmultiply(self):
        """2x * 3xy = 6x^2y."""
        m = Monomial.xmultiply(Monomial.parse("2x"), Monomial.parse("3xy"))
        assert m.is_equal(Monomial.parse("6x^2y"))

    def test_multiply_by_scalar(self):
        """Scaling the coefficient."""
        assert Monomial.parse("3x").multiply(Fraction(1, 3)).is_equal(Monomial.parse("x"))

    def test_divide(self):
        """6x^3 / 2x = 3x^2."""
        assert Monomial.parse("6x^3").divide(Monomial.parse("2x")).is_equal(Monomial.parse("3x^2"))

    def test_pow(self):
        """(2x)^3 = 8x^3."""
        assert Monomial.parse("2x").pow(3).is_equal(Monomial.parse("8x^3"))

    def test_gcd(self):
        """Largest common term of 4x^2y and 6xy^3."""
        m = Monomial.gcd(Monomial.parse("4x^2y"), Monomial.parse("6xy^3"))
        assert m.is_equal(Monomial.parse("2xy"))

    def test_gcd_with_fractions(self):
        """gcd of numerators over gcd of denominators."""
        m = Monomial.gcd(Monomial.parse("1/2x"), Monomial.parse("1/4"))
        assert m.is_equal(Monomial.parse("1/2"))

    def test_opposed(self):
        """Sign change."""
        assert (-Monomial.parse("2x")).is_equal(Monomial.parse("-2x"))


class TestMonomialCalculus:
    """Test evaluation and derivatives."""

    def test_evaluate(self):
        """3x^2y at x=2, y=1/2 is 6."""
        r = Monomial.parse("3x^2y").evaluate({"x": 2, "y": Fraction(1, 2)})
        assert r == 6

    def test_evaluate_missing_letter(self):
        """Every letter needs a value."""
        with pytest.raises(KeyError):
            Monomial.parse("xy").evaluate({"x": 1})

    def test_derivative(self):
        """d/dx 3x^2 = 6x."""
        assert Monomial.parse("3x^2").derivative("x").is_equal(Monomial.parse("6x"))

    def test_derivative_of_other_letter(self):
        """d/dy 3x^2 = 0."""
        assert Monomial.parse("3x^2").derivative("y").is_zero()

    def test_integrate(self):
        """Antiderivative of 3x^2 is x^3."""
        assert Monomial.parse("3x^2").integrate("x").is_equal(Monomial.parse("x^3"))


class TestMonomialDisplay:
    """Test rendering."""

    def test_display(self):
        """Coefficients of one are elided."""
        assert Monomial.parse("x").display == "x"
        assert Monomial.parse("-x^2").display == "-x^2"
        assert Monomial.parse("3x^2y").display == "3x^2y"
        assert Monomial.parse("1/2x").display == "1/2x"
        assert Monomial.parse("-4").display == "-4"

    def test_tex(self):
        """TeX powers are braced."""
        assert Monomial.parse("3x^2y").tex == "3x^{2}y"
        assert Monomial.parse("1/2x").tex == "\\frac{ 1 }{ 2 }x"


class TestMonomialRandom:
    """Test the random generator."""

    def test_random_degree(self):
        """The requested degree is honoured."""
        for _ in range(20):
            m = Monomial.random("x", 3, allow_zero=False)
            assert m.degree() == 3
            assert not m.is_zero()

    def test_random_with_fraction(self):
        """Random fractional coefficients have positive denominators."""
        for _ in range(20):
            m = Monomial.random("xy", 2, with_fraction=True)
            assert m.coefficient.denominator > 0
            assert m.degree() == 2
