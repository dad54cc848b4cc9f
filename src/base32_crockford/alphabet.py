"""
Alphabet — Таблицы символов Crockford Base32

Канонический алфавит (32 символа, позиция = значение 0..31):
    0123456789ABCDEFGHJKMNPQRSTVWXYZ
(исключены I, L, O, U)

Check-only символы (значения 32..36, допустимы ТОЛЬКО в позиции checksum):
    * ~ $ = U

Алиасы декодирования (case-insensitive):
    O -> 0, I -> 1, L -> 1

Все таблицы строятся один раз при импорте и никогда не изменяются.
"""

import string
from types import MappingProxyType
from typing import Final, Mapping, Optional

from base32_crockford.errors import InvalidInputError

# =============================================================================
# SYMBOL TABLES
# =============================================================================

ENCODING_SYMBOLS: Final[str] = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
CHECK_SYMBOLS: Final[str] = "*~$=U"

# value -> symbol, 0..36
ENCODING_ALPHABET: Final[str] = ENCODING_SYMBOLS + CHECK_SYMBOLS

BASE: Final[int] = len(ENCODING_SYMBOLS)

ALIASES: Final[Mapping[str, int]] = MappingProxyType({"O": 0, "I": 1, "L": 1})

# Только ASCII: "ß".upper() == "SS", "ı".upper() == "I"
_ASCII_UPPER: Final[dict] = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

# symbol -> value, только payload-цифры
_DECODING_TABLE: Final[Mapping[str, int]] = MappingProxyType(
    {
        **{symbol: value for value, symbol in enumerate(ENCODING_SYMBOLS)},
        **ALIASES,
    }
)

# symbol -> value, позиция checksum: ровно 37 символов, без алиасов
_CHECK_DECODING_TABLE: Final[Mapping[str, int]] = MappingProxyType(
    {symbol: value for value, symbol in enumerate(ENCODING_ALPHABET)}
)


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def fold_case(text: str) -> str:
    """Верхний регистр только для ASCII-букв; прочие символы не меняются."""
    return text.translate(_ASCII_UPPER)


def encode_symbol(value: int) -> str:
    """
    Символ для значения 0..36.

    0..31 -> канонический алфавит, 32..36 -> check-only символы (* ~ $ = U).

    Raises:
        InvalidInputError: значение вне 0..36
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"symbol value must be int, got {type(value).__name__}")
    if not 0 <= value < len(ENCODING_ALPHABET):
        raise InvalidInputError(
            f"symbol value must be in [0, {len(ENCODING_ALPHABET) - 1}], got {value}"
        )
    return ENCODING_ALPHABET[value]


def decode_symbol(char: str) -> Optional[int]:
    """
    Значение payload-символа.

    Принимает 32 канонических символа и алиасы O/I/L без учёта регистра.
    Check-only символы (* ~ $ = U) и всё остальное -> None.

    Examples:
        >>> decode_symbol("z")
        31
        >>> decode_symbol("O")
        0
        >>> decode_symbol("U") is None
        True
    """
    return _DECODING_TABLE.get(fold_case(char))


def decode_check_symbol(char: str) -> Optional[int]:
    """
    Значение символа в позиции checksum.

    Только 37 символов ENCODING_ALPHABET (регистр не важен): 0..31 и
    * ~ $ = U -> 32..36. Алиасы O/I/L в этой позиции не допускаются.

    Examples:
        >>> decode_check_symbol("u")
        36
        >>> decode_check_symbol("O") is None
        True
    """
    return _CHECK_DECODING_TABLE.get(fold_case(char))
