"""
base32_crockford — Crockford Base32 для неотрицательных целых

Человеко-читаемое, компактное, устойчивое к ошибкам кодирование:
https://www.crockford.com/base32.html

    >>> from base32_crockford import encode, decode
    >>> encode(1439, checksum=True)
    '1CZ~'
    >>> decode("1cz~", checksum=True).value
    1439
"""

from base32_crockford.alphabet import (
    ALIASES,
    BASE,
    CHECK_SYMBOLS,
    ENCODING_ALPHABET,
    ENCODING_SYMBOLS,
    decode_check_symbol,
    decode_symbol,
    encode_symbol,
    fold_case,
)
from base32_crockford.checksum import (
    CHECK_MODULUS,
    compute_check_symbol,
    compute_check_value,
    verify_check_symbol,
)
from base32_crockford.codec import DecodeResult, decode, decode_strict, encode, is_valid
from base32_crockford.converter import (
    digits_to_string,
    from_digits,
    string_to_digits,
    to_digits,
)
from base32_crockford.errors import (
    Base32CrockfordError,
    ChecksumMismatchError,
    DecodeError,
    DecodeErrorKind,
    InvalidCharacterError,
    InvalidInputError,
)
from base32_crockford.formatter import SEPARATOR, normalize, partition, partition_lengths
from base32_crockford.options import DEFAULT_OPTIONS, CodecOptions

__version__ = "0.2.0"

__all__ = [
    # Public API
    "encode",
    "decode",
    "decode_strict",
    "is_valid",
    "DecodeResult",
    # Options
    "CodecOptions",
    "DEFAULT_OPTIONS",
    # Errors
    "Base32CrockfordError",
    "InvalidInputError",
    "DecodeError",
    "InvalidCharacterError",
    "ChecksumMismatchError",
    "DecodeErrorKind",
    # Alphabet
    "ENCODING_SYMBOLS",
    "CHECK_SYMBOLS",
    "ENCODING_ALPHABET",
    "ALIASES",
    "BASE",
    "encode_symbol",
    "decode_symbol",
    "decode_check_symbol",
    "fold_case",
    # Converter
    "to_digits",
    "from_digits",
    "digits_to_string",
    "string_to_digits",
    # Checksum
    "CHECK_MODULUS",
    "compute_check_value",
    "compute_check_symbol",
    "verify_check_symbol",
    # Formatter
    "SEPARATOR",
    "partition_lengths",
    "partition",
    "normalize",
]
