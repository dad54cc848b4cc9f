"""
Converter — Преобразование int <-> последовательность base-32 цифр

Позиционная система счисления с основанием 32, старшая цифра первой.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только целочисленная арифметика (divmod, умножение); никаких float/pow,
   иначе большие значения теряют точность
2. to_digits(0) == [0], а не пустая последовательность
3. Длина to_digits(v) минимальна (без ведущих нулей)
4. from_digits(to_digits(v)) == v для всех v >= 0
"""

from typing import Iterable, List, Optional

from base32_crockford.alphabet import BASE, decode_symbol, encode_symbol
from base32_crockford.errors import InvalidInputError


# =============================================================================
# VALIDATION
# =============================================================================


def validate_value(value: int) -> int:
    """
    Проверка предусловия encode: неотрицательный int.

    bool отклоняется явно (bool является подклассом int).

    Raises:
        InvalidInputError: если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(
            f"value must be a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidInputError(f"value must be a non-negative integer, got {value}")
    return value


# =============================================================================
# INT <-> DIGITS
# =============================================================================


def to_digits(value: int) -> List[int]:
    """
    Разложение числа на base-32 цифры (старшая первой).

    Args:
        value: неотрицательное целое

    Returns:
        Список цифр 0..31, минимальной длины; [0] для нуля

    Examples:
        >>> to_digits(0)
        [0]
        >>> to_digits(1234)
        [1, 6, 18]
    """
    validate_value(value)

    if value == 0:
        return [0]

    digits: List[int] = []
    while value > 0:
        value, remainder = divmod(value, BASE)
        digits.append(remainder)
    digits.reverse()
    return digits


def from_digits(digits: Iterable[int]) -> int:
    """
    Сборка числа из base-32 цифр (старшая первой), схема Горнера.

    Raises:
        InvalidInputError: цифра вне 0..31
    """
    value = 0
    for digit in digits:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < BASE:
            raise InvalidInputError(f"digit must be in [0, {BASE - 1}], got {digit!r}")
        value = value * BASE + digit
    return value


# =============================================================================
# DIGITS <-> SYMBOLS
# =============================================================================


def digits_to_string(digits: Iterable[int]) -> str:
    """Цифры -> строка канонических символов."""
    return "".join(encode_symbol(digit) for digit in digits)


def string_to_digits(text: str) -> Optional[List[int]]:
    """
    Строка символов -> цифры.

    Ожидает уже нормализованный текст (без дефисов). Один невалидный символ
    делает невалидной всю строку: частичный результат не возвращается.

    Returns:
        Список цифр или None, если встретился символ вне алфавита
    """
    digits: List[int] = []
    for char in text:
        digit = decode_symbol(char)
        if digit is None:
            return None
        digits.append(digit)
    return digits
