"""Tests for factorization, zeroes and numeric roots."""

import pytest

from fraction import Fraction
from polynomial import Polynomial


def P(expr):
    return Polynomial.parse(expr)


def displays(polys):
    return [p.display for p in polys]


def product(factors):
    r = Polynomial.one()
    for F in factors:
        r = r.multiply(F)
    return r


class TestFactorize:
    """Test the search for linear factors."""

    @pytest.mark.parametrize("expr,expected", [
        ("x^2-5x+6", ["x-3", "x-2"]),
        ("x^2-1/4", ["2x-1", "2x+1", "1/4"]),
        ("-2x^2+8", ["-2", "x-2", "x+2"]),
        ("6x^2+5x+1", ["2x+1", "3x+1"]),
        ("x^3-x", ["x", "x-1", "x+1"]),
        ("x^2-2x+1", ["x-1", "x-1"]),
        ("x^2+1", ["x^2+1"]),
        ("x", ["x"]),
        ("5", ["5"]),
        ("x^2", ["x^2"]),
        ("-x+1", ["-1", "x-1"]),
    ])
    def test_factors(self, expr, expected):
        """Known factor lists."""
        assert displays(P(expr).factorize()) == expected

    @pytest.mark.parametrize("expr", [
        "x^2-5x+6", "x^2-1/4", "-2x^2+8", "6x^2+5x+1", "x^3-x", "x^3+x+1", "-3x^2+3",
    ])
    def test_product_of_factors(self, expr):
        """The factors multiply back to the polynomial."""
        p = P(expr)
        assert product(p.factorize()).is_equal(p)

    def test_factors_are_stored(self):
        """factorize() keeps its result on the polynomial."""
        p = P("x^2-5x+6")
        factors = p.factorize()
        assert displays(p.factors) == displays(factors)
        assert p.display == "x^2-5x+6"

    def test_zero(self):
        """The zero polynomial has the single factor 0."""
        assert displays(Polynomial.zero().factorize()) == ["0"]

    def test_bound(self):
        """Roots outside the search bound are not found."""
        assert displays(P("x^2-2500").factorize()) == ["x^2-2500"]
        assert displays(P("x^2-2500").factorize(max_value=50)) == ["x-50", "x+50"]

    def test_other_letters(self):
        """Common terms are extracted, the rest is kept whole."""
        assert displays(P("xy+x").factorize()) == ["x", "y+1"]
        assert displays(P("x^2+y").factorize()) == ["x^2+y"]

    def test_letter(self):
        """Factors can be searched in another letter."""
        assert displays(P("t^2-1").factorize(letter="t")) == ["t-1", "t+1"]


class TestGetZeroes:
    """Test the exact and rounded zeroes."""

    def test_constants(self):
        """Zero is zero everywhere, other constants never."""
        assert Polynomial.zero().get_zeroes() == [True]
        assert P("5").get_zeroes() == [False]

    def test_first_degree(self):
        """Exact zero of ax+b."""
        assert P("2x-4").get_zeroes() == [Fraction(2)]
        assert P("3x").get_zeroes() == [Fraction(0)]
        assert P("3x+1").get_zeroes()[0].display == "-1/3"

    def test_from_factors(self):
        """Zeroes of the linear factors, without repeats."""
        assert [z.display for z in P("x^2-5x+6").get_zeroes()] == ["3", "2"]
        assert sorted(P("x^2-4").get_zeroes()) == [Fraction(-2), Fraction(2)]
        assert [z.display for z in P("x^3-x").get_zeroes()] == ["0", "1", "-1"]
        assert [z.display for z in P("x^2-2x+1").get_zeroes()] == ["1"]
        assert [z.display for z in P("4x^2+4x+1").get_zeroes()] == ["-1/2"]

    def test_irrational(self):
        """Irrational zeroes are rounded to three decimals."""
        assert [z.display for z in P("x^2-2").get_zeroes()] == ["707/500", "-707/500"]

    def test_double_zero_outside_bound(self):
        """A null discriminant gives the exact double zero."""
        assert [z.display for z in P("x^2-50x+625").get_zeroes()] == ["25"]

    def test_no_real_zero(self):
        """Negative discriminants and cubic leftovers give nothing."""
        assert P("x^2+1").get_zeroes() == []
        assert P("x^3+x+1").get_zeroes() == []

    def test_uses_stored_factors(self):
        """Factors found earlier are reused."""
        p = P("x^2-2500")
        p.factorize(max_value=50)
        assert [z.display for z in p.get_zeroes()] == ["50", "-50"]


class TestApproximateRoots:
    """Test the floating point roots."""

    def test_quadratic(self):
        """Sorted real roots."""
        assert P("x^2-2").approximate_roots() == pytest.approx([-2 ** 0.5, 2 ** 0.5])

    def test_cubic(self):
        """Three real roots."""
        assert P("x^3-x").approximate_roots() == pytest.approx([-1, 0, 1], abs=1e-9)

    def test_no_real_roots(self):
        """Complex roots are dropped."""
        assert P("x^2+1").approximate_roots() == []
        assert P("5").approximate_roots() == []

    def test_letter(self):
        """Roots in another letter."""
        assert P("y^2-4").approximate_roots("y") == pytest.approx([-2, 2])

    def test_other_letters(self):
        """Only single letter polynomials are accepted."""
        with pytest.raises(ValueError):
            P("x+y").approximate_roots()
