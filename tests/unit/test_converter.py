"""
Тесты для модуля Converter

Проверяет:
1. Нулевой случай ([0], а не пустой список)
2. Минимальную длину (без ведущих нулей)
3. Точность на больших значениях (> 2^53, 2^64, 2^200)
4. Валидацию входа
"""

import pytest

from base32_crockford.converter import (
    digits_to_string,
    from_digits,
    string_to_digits,
    to_digits,
    validate_value,
)
from base32_crockford.errors import InvalidInputError


# =============================================================================
# TO DIGITS
# =============================================================================


class TestToDigits:
    """Тесты для to_digits"""

    def test_zero_is_single_digit(self) -> None:
        assert to_digits(0) == [0]

    def test_single_digit_values(self) -> None:
        assert to_digits(1) == [1]
        assert to_digits(31) == [31]

    def test_multi_digit_values(self) -> None:
        assert to_digits(32) == [1, 0]
        assert to_digits(1234) == [1, 6, 18]
        assert to_digits(1439) == [1, 12, 31]

    def test_no_leading_zeros(self) -> None:
        for value in (1, 31, 32, 1023, 1024, 2**40 + 7):
            assert to_digits(value)[0] != 0

    def test_minimal_length(self) -> None:
        """Длина = число base-32 разрядов"""
        assert len(to_digits(31)) == 1
        assert len(to_digits(32)) == 2
        assert len(to_digits(32**5 - 1)) == 5
        assert len(to_digits(32**5)) == 6

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="non-negative integer"):
            to_digits(-1)


# =============================================================================
# FROM DIGITS
# =============================================================================


class TestFromDigits:
    """Тесты для from_digits"""

    def test_basic(self) -> None:
        assert from_digits([0]) == 0
        assert from_digits([1, 6, 18]) == 1234

    def test_leading_zeros_ignored(self) -> None:
        assert from_digits([0, 0, 1, 6, 18]) == 1234

    def test_empty_is_zero(self) -> None:
        assert from_digits([]) == 0

    def test_digit_out_of_range_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="digit must be in"):
            from_digits([32])

        with pytest.raises(InvalidInputError, match="digit must be in"):
            from_digits([-1])

    @pytest.mark.parametrize(
        "value",
        [2**53 - 1, 2**53, 2**53 + 1, 2**64 - 1, 2**64, 2**200 + 12345, 10**60],
    )
    def test_large_values_exact(self, value: int) -> None:
        """Нет потери точности за пределами float (2^53)"""
        assert from_digits(to_digits(value)) == value


# =============================================================================
# SYMBOLS
# =============================================================================


class TestSymbolConversion:
    """Тесты для digits_to_string / string_to_digits"""

    def test_digits_to_string(self) -> None:
        assert digits_to_string([1, 6, 18]) == "16J"
        assert digits_to_string([0]) == "0"

    def test_string_to_digits(self) -> None:
        assert string_to_digits("16J") == [1, 6, 18]
        assert string_to_digits("1OL") == [1, 0, 1]

    def test_invalid_symbol_returns_none(self) -> None:
        """Один невалидный символ — вся строка невалидна"""
        assert string_to_digits("16U") is None
        assert string_to_digits("*") is None
        assert string_to_digits("1-6") is None


class TestValidateValue:
    """Тесты для validate_value"""

    def test_accepts_non_negative(self) -> None:
        assert validate_value(0) == 0
        assert validate_value(2**100) == 2**100

    def test_rejects_bool(self) -> None:
        with pytest.raises(InvalidInputError):
            validate_value(True)

    def test_rejects_float(self) -> None:
        with pytest.raises(InvalidInputError, match="got float"):
            validate_value(1.0)  # type: ignore[arg-type]
