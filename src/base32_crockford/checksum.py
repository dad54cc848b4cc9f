"""
Checksum — Check symbol по модулю 37

Модуль 37: наименьшее простое число больше 32. Check symbol вычисляется из
исходного значения (а не из закодированных цифр) и пишется последним
символом строки. Значения 32..36 кодируются check-only символами * ~ $ = U.
"""

from typing import Final

from base32_crockford.alphabet import decode_check_symbol, encode_symbol, fold_case
from base32_crockford.converter import validate_value

CHECK_MODULUS: Final[int] = 37


def compute_check_value(value: int) -> int:
    """value mod 37."""
    return validate_value(value) % CHECK_MODULUS


def compute_check_symbol(value: int) -> str:
    """
    Check symbol для значения.

    Examples:
        >>> compute_check_symbol(31)
        'Z'
        >>> compute_check_symbol(1439)
        '~'
    """
    return encode_symbol(compute_check_value(value))


def verify_check_symbol(value: int, symbol: str) -> bool:
    """
    Сверка предъявленного check symbol со значением.

    Посимвольное сравнение после приведения к верхнему регистру. Символ вне
    37-символьного пространства (в т.ч. алиасы O/I/L) -> False.
    """
    if decode_check_symbol(symbol) is None:
        return False
    return fold_case(symbol) == compute_check_symbol(value)
