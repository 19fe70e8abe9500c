"""Unit tests for arithmetic operations."""

import pytest

from bigcalc import (
    ONE,
    ZERO,
    DivisionByZeroError,
    InvalidInputError,
    NegativeExponentError,
    NegativeInputError,
    add,
    divide,
    factorial,
    logarithm,
    modulo,
    multiply,
    parse_int,
    power,
    subtract,
)
from bigcalc.operations import add_magnitudes, multiply_by_digit, subtract_magnitudes


def n(text):
    return parse_int(text)


class TestMagnitudeHelpers:
    """Tests for the digit-string helpers."""

    def test_add_magnitudes_with_carry(self):
        assert add_magnitudes("999", "1") == "1000"

    def test_add_magnitudes_different_lengths(self):
        assert add_magnitudes("5", "12345") == "12350"

    def test_add_magnitudes_zero(self):
        assert add_magnitudes("0", "0") == "0"

    def test_subtract_magnitudes_with_borrow(self):
        assert subtract_magnitudes("1000", "1") == "999"

    def test_subtract_magnitudes_to_zero(self):
        assert subtract_magnitudes("4321", "4321") == "0"

    def test_subtract_magnitudes_trims_leading_zeros(self):
        assert subtract_magnitudes("10005", "10000") == "5"

    def test_subtract_magnitudes_rejects_larger_subtrahend(self):
        with pytest.raises(InvalidInputError):
            subtract_magnitudes("5", "12")

    def test_multiply_by_digit(self):
        assert multiply_by_digit("999", 9) == "8991"
        assert multiply_by_digit("123", 0) == "0"
        assert multiply_by_digit("123", 1) == "123"


class TestAdd:
    """Tests for the add function."""

    def test_add_positive_numbers(self):
        assert add(n("2"), n("3")) == n("5")

    def test_add_negative_numbers(self):
        assert add(n("-2"), n("-3")) == n("-5")

    def test_add_mixed_signs(self):
        assert add(n("-2"), n("3")) == n("1")
        assert add(n("2"), n("-3")) == n("-1")

    def test_add_opposites_is_canonical_zero(self):
        result = add(n("-12345"), n("12345"))
        assert result == ZERO
        assert not result.negative

    def test_add_with_zero(self):
        assert add(n("5"), ZERO) == n("5")
        assert add(ZERO, n("-5")) == n("-5")

    def test_add_large_numbers(self):
        a = n("999999999999999999999999999999")
        assert add(a, ONE) == n("1000000000000000000000000000000")


class TestSubtract:
    """Tests for the subtract function."""

    def test_subtract_positive_numbers(self):
        assert subtract(n("5"), n("3")) == n("2")

    def test_subtract_resulting_negative(self):
        assert subtract(n("3"), n("5")) == n("-2")

    def test_subtract_from_zero(self):
        assert subtract(ZERO, n("5")) == n("-5")

    def test_subtract_negative(self):
        assert subtract(n("5"), n("-5")) == n("10")

    def test_subtract_same_number(self):
        assert subtract(n("-7"), n("-7")) == ZERO

    def test_subtract_across_power_of_ten(self):
        assert subtract(n("1000000000000"), ONE) == n("999999999999")


class TestMultiply:
    """Tests for the multiply function."""

    def test_multiply_positive_numbers(self):
        assert multiply(n("3"), n("4")) == n("12")

    def test_multiply_with_negative(self):
        assert multiply(n("-3"), n("4")) == n("-12")
        assert multiply(n("3"), n("-4")) == n("-12")

    def test_multiply_two_negatives(self):
        assert multiply(n("-3"), n("-4")) == n("12")

    def test_multiply_by_zero_is_canonical(self):
        assert multiply(n("-1000"), ZERO) == ZERO
        assert not multiply(ZERO, n("-1000")).negative

    def test_multiply_by_one(self):
        assert multiply(n("42"), ONE) == n("42")

    def test_multiply_with_internal_zero_digits(self):
        assert multiply(n("1001"), n("1001")) == n("1002001")

    def test_multiply_large_numbers(self):
        a = n("123456789012345678901234567890")
        b = n("987654321098765432109876543210")
        expected = 123456789012345678901234567890 * 987654321098765432109876543210
        assert multiply(a, b) == n(str(expected))


class TestDivide:
    """Tests for the divide function."""

    def test_divide_evenly(self):
        quotient, remainder = divide(n("10"), n("2"))
        assert quotient == n("5")
        assert remainder == ZERO

    def test_divide_with_remainder(self):
        result = divide(n("17"), n("5"))
        assert result.quotient == n("3")
        assert result.remainder == n("2")

    def test_divide_smaller_dividend(self):
        assert divide(n("3"), n("7")) == (ZERO, n("3"))

    def test_divide_truncates_toward_zero(self):
        assert divide(n("-7"), n("2")) == (n("-3"), n("-1"))
        assert divide(n("7"), n("-2")) == (n("-3"), n("1"))
        assert divide(n("-7"), n("-2")) == (n("3"), n("-1"))

    def test_divide_exact_negative_has_zero_remainder(self):
        quotient, remainder = divide(n("-8"), n("2"))
        assert quotient == n("-4")
        assert not remainder.negative

    def test_divide_zero_by_negative(self):
        quotient, _ = divide(ZERO, n("-5"))
        assert quotient == ZERO
        assert not quotient.negative

    def test_divide_large(self):
        a = n("1000000000000000000000000000001")
        b = n("7")
        q, r = divmod(1000000000000000000000000000001, 7)
        assert divide(a, b) == (n(str(q)), n(str(r)))

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(n("5"), ZERO)
        assert exc_info.value.numerator == n("5")
        assert not exc_info.value.undefined

    def test_zero_by_zero_is_undefined(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(ZERO, ZERO)
        assert exc_info.value.undefined


class TestModulo:
    """Tests for the modulo function."""

    def test_modulo_basic(self):
        assert modulo(n("10"), n("3")) == ONE

    def test_modulo_even_division(self):
        assert modulo(n("10"), n("5")) == ZERO

    def test_modulo_negative_dividend(self):
        # Remainder keeps the sign of the dividend
        assert modulo(n("-10"), n("3")) == n("-1")

    def test_modulo_negative_divisor(self):
        assert modulo(n("10"), n("-3")) == ONE

    def test_modulo_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            modulo(n("10"), ZERO)


class TestPower:
    """Tests for the power function."""

    def test_power_positive_exponent(self):
        assert power(n("2"), n("3")) == n("8")

    def test_power_zero_exponent(self):
        assert power(n("5"), ZERO) == ONE

    def test_zero_to_the_zero_is_one(self):
        assert power(ZERO, ZERO) == ONE

    def test_power_one_exponent(self):
        assert power(n("5"), ONE) == n("5")

    def test_power_zero_base(self):
        assert power(ZERO, n("5")) == ZERO

    def test_power_negative_base(self):
        assert power(n("-2"), n("3")) == n("-8")
        assert power(n("-2"), n("4")) == n("16")

    def test_power_large_result(self):
        assert power(n("2"), n("100")) == n("1267650600228229401496703205376")

    def test_power_negative_exponent_raises(self):
        with pytest.raises(NegativeExponentError) as exc_info:
            power(n("2"), n("-1"))
        assert exc_info.value.exponent == n("-1")


class TestFactorial:
    """Tests for the factorial function."""

    def test_factorial_zero(self):
        assert factorial(ZERO) == ONE

    def test_factorial_one(self):
        assert factorial(ONE) == ONE

    def test_factorial_small(self):
        assert factorial(n("5")) == n("120")

    def test_factorial_large(self):
        assert factorial(n("25")) == n("15511210043330985984000000")

    def test_factorial_negative_raises(self):
        with pytest.raises(NegativeInputError):
            factorial(n("-3"))


class TestLogarithm:
    """Tests for the logarithm function."""

    def test_log_base_ten(self):
        assert logarithm(n("1000"), n("10")) == n("3")

    def test_log_base_two(self):
        assert logarithm(n("8"), n("2")) == n("3")

    def test_log_floors(self):
        assert logarithm(n("999"), n("10")) == n("2")
        assert logarithm(n("9"), n("2")) == n("3")

    def test_log_of_one(self):
        assert logarithm(ONE, n("7")) == ZERO

    def test_log_smaller_than_base(self):
        assert logarithm(n("5"), n("10")) == ZERO

    def test_log_large(self):
        assert logarithm(n("1" + "0" * 50), n("10")) == n("50")

    @pytest.mark.parametrize("num", ["0", "-8"])
    def test_log_of_non_positive_raises(self, num):
        with pytest.raises(InvalidInputError):
            logarithm(n(num), n("2"))

    @pytest.mark.parametrize("base", ["0", "1", "-2"])
    def test_log_invalid_base_raises(self, base):
        with pytest.raises(InvalidInputError):
            logarithm(n("8"), n(base))
