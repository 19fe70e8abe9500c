"""Unit tests for the fraction layer."""

import pytest

from bigcalc import (
    ONE,
    ZERO,
    DivisionByZeroError,
    Fraction,
    add_fractions,
    create_fraction,
    divide_fractions,
    format_fraction,
    gcd,
    multiply_fractions,
    parse_fraction,
    parse_int,
    subtract_fractions,
)


def frac(text):
    return parse_fraction(text)


class TestGcd:
    """Tests for gcd."""

    def test_basic(self):
        assert gcd(parse_int("12"), parse_int("18")) == parse_int("6")

    def test_coprime(self):
        assert gcd(parse_int("7"), parse_int("12")) == ONE

    def test_ignores_signs(self):
        assert gcd(parse_int("-12"), parse_int("-18")) == parse_int("6")

    def test_zero_operand(self):
        assert gcd(ZERO, parse_int("5")) == parse_int("5")
        assert gcd(parse_int("5"), ZERO) == parse_int("5")


class TestCreateFraction:
    """Tests for create_fraction."""

    def test_already_reduced(self):
        f = create_fraction(parse_int("1"), parse_int("2"))
        assert f.numerator == parse_int("1")
        assert f.denominator == parse_int("2")

    def test_simplifies(self):
        f = create_fraction(parse_int("2"), parse_int("4"))
        assert f.numerator.magnitude == "1"
        assert f.denominator.magnitude == "2"

    def test_negative_denominator_moves_sign(self):
        f = create_fraction(parse_int("3"), parse_int("-6"))
        assert f.numerator == parse_int("-1")
        assert f.denominator == parse_int("2")

    def test_both_negative_is_positive(self):
        f = create_fraction(parse_int("-3"), parse_int("-6"))
        assert f.numerator == ONE
        assert f.denominator == parse_int("2")

    def test_zero_numerator(self):
        f = create_fraction(ZERO, parse_int("-17"))
        assert f.numerator == ZERO
        assert f.denominator == ONE

    def test_improper_fraction(self):
        f = create_fraction(parse_int("10"), parse_int("4"))
        assert str(f) == "5/2"

    def test_zero_denominator_raises(self):
        with pytest.raises(DivisionByZeroError):
            create_fraction(ONE, ZERO)

    def test_equality_uses_reduced_form(self):
        assert create_fraction(parse_int("2"), parse_int("4")) == Fraction(ONE, parse_int("2"))

    def test_default_denominator(self):
        assert str(Fraction(parse_int("-3"))) == "-3/1"


class TestFractionArithmetic:
    """Tests for the fraction operations."""

    def test_add(self):
        assert add_fractions(frac("1/2"), frac("1/12")) == frac("7/12")

    def test_add_improper(self):
        assert str(add_fractions(frac("3/4"), frac("1/2"))) == "5/4"

    def test_subtract(self):
        assert subtract_fractions(frac("1/2"), frac("1/3")) == frac("1/6")

    def test_subtract_to_negative(self):
        assert str(subtract_fractions(frac("1/3"), frac("1/2"))) == "-1/6"

    def test_subtract_to_zero(self):
        assert str(subtract_fractions(frac("2/3"), frac("4/6"))) == "0/1"

    def test_multiply(self):
        assert multiply_fractions(frac("2/3"), frac("3/4")) == frac("1/2")

    def test_divide(self):
        assert divide_fractions(frac("3/4"), frac("1/2")) == frac("3/2")

    def test_divide_by_negative(self):
        assert str(divide_fractions(frac("3/4"), frac("-1/2"))) == "-3/2"

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            divide_fractions(frac("3/4"), frac("0/5"))

    def test_operators(self):
        a, b = frac("1/2"), frac("1/3")
        assert a + b == frac("5/6")
        assert a - b == frac("1/6")
        assert a * b == frac("1/6")
        assert a / b == frac("3/2")

    def test_operator_with_other_type(self):
        with pytest.raises(TypeError):
            frac("1/2") + 1


class TestFormatFraction:
    """Tests for format_fraction."""

    def test_positive(self):
        assert format_fraction(frac("7/12")) == "7/12"

    def test_negative(self):
        assert format_fraction(frac("-7/12")) == "-7/12"

    def test_negative_denominator_input(self):
        assert format_fraction(frac("7/-12")) == "-7/12"

    def test_repr(self):
        assert repr(frac("2/4")) == "Fraction('1/2')"
