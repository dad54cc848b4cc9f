"""
Codec — Публичный API Crockford Base32

Поток encode:
    value -> [check symbol] -> base-32 цифры -> символы -> [группы через дефис]

Поток decode:
    text -> нормализация (дефисы, регистр) -> [отделение check symbol]
         -> цифры -> value -> [проверка check symbol]

decode() никогда не поднимает исключение на некорректной строке: ошибка
человеческого ввода является ожидаемым исходом, возвращается DecodeResult.
decode_strict() превращает неуспех в DecodeError.

Все функции чистые, без общего изменяемого состояния; безопасны для
одновременного вызова из нескольких потоков.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from base32_crockford.alphabet import decode_check_symbol, decode_symbol
from base32_crockford.checksum import compute_check_symbol, verify_check_symbol
from base32_crockford.converter import (
    digits_to_string,
    from_digits,
    string_to_digits,
    to_digits,
    validate_value,
)
from base32_crockford.errors import (
    ChecksumMismatchError,
    DecodeErrorKind,
    InvalidCharacterError,
    InvalidInputError,
)
from base32_crockford.formatter import SEPARATOR, normalize, partition, split_check_symbol
from base32_crockford.options import CodecOptions, resolve_options

logger = logging.getLogger(__name__)

OptionsArg = Union[CodecOptions, Mapping[str, Any], None]


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class DecodeResult:
    """Результат decode: либо value, либо причина ошибки."""

    ok: bool
    value: Optional[int]
    error: Optional[DecodeErrorKind]

    # Детали
    details: str

    @classmethod
    def success(cls, value: int) -> "DecodeResult":
        return cls(ok=True, value=value, error=None, details="")

    @classmethod
    def failure(cls, kind: DecodeErrorKind, details: str) -> "DecodeResult":
        return cls(ok=False, value=None, error=kind, details=details)

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> int:
        """
        Значение успешного результата.

        Raises:
            ChecksumMismatchError: если причина неуспеха в check symbol
            InvalidCharacterError: для остальных причин
        """
        if self.ok:
            return self.value
        if self.error is DecodeErrorKind.CHECKSUM_MISMATCH:
            raise ChecksumMismatchError(self.details)
        raise InvalidCharacterError(self.details, kind=self.error)


# =============================================================================
# ENCODE
# =============================================================================


def encode(
    value: int,
    options: OptionsArg = None,
    *,
    checksum: Optional[bool] = None,
    partitions: Optional[int] = None,
) -> str:
    """
    Кодирование неотрицательного целого в строку Crockford Base32.

    Args:
        value: неотрицательное целое (произвольной величины)
        options: CodecOptions или dict (опционально)
        checksum: добавить check symbol (переопределяет options)
        partitions: число групп через дефис (переопределяет options)

    Returns:
        Закодированная строка; encode(0) == "0"

    Raises:
        InvalidInputError: value < 0, value не int, невалидные опции

    Examples:
        >>> encode(1234)
        '16J'
        >>> encode(1439, checksum=True)
        '1CZ~'
        >>> encode(1_000_000_000, partitions=3)
        'XS-NJ-G0'
    """
    opts = resolve_options(options, checksum=checksum, partitions=partitions)
    validate_value(value)

    encoded = digits_to_string(to_digits(value))
    if opts.checksum:
        encoded += compute_check_symbol(value)

    return partition(encoded, opts.partitions)


# =============================================================================
# DECODE
# =============================================================================


def decode(
    text: str,
    options: OptionsArg = None,
    *,
    checksum: Optional[bool] = None,
) -> DecodeResult:
    """
    Декодирование строки Crockford Base32.

    Регистр не важен, дефисы игнорируются, O/I/L читаются как 0/1/1.
    partitions в опциях на decode не влияет.

    Args:
        text: закодированная строка
        options: CodecOptions или dict (опционально)
        checksum: последний символ является check symbol (переопределяет options)

    Returns:
        DecodeResult.success(value) или DecodeResult.failure(kind, details)

    Raises:
        InvalidInputError: text не str или невалидные опции (ошибка вызова,
            а не ввода)
    """
    opts = resolve_options(options, checksum=checksum)
    if not isinstance(text, str):
        raise InvalidInputError(f"text must be str, got {type(text).__name__}")

    result = _decode_normalized(text, normalize(text), opts.checksum)
    if not result.ok:
        logger.debug("decode failed: %s (%s)", result.error.value, result.details)
    return result


def _source_position(source: str, index: int) -> int:
    """Индекс символа нормализованной строки во входной строке (с дефисами)."""
    seen = -1
    for position, char in enumerate(source):
        if char != SEPARATOR:
            seen += 1
            if seen == index:
                return position
    raise IndexError(f"index {index} out of range for {source!r}")


def _invalid_character(source: str, index: int) -> DecodeResult:
    position = _source_position(source, index)
    return DecodeResult.failure(
        DecodeErrorKind.INVALID_CHARACTER,
        f"invalid character {source[position]!r} at position {position}",
    )


def _decode_normalized(source: str, text: str, checksum: bool) -> DecodeResult:
    check_symbol = None
    if checksum:
        if len(text) < 2:
            return DecodeResult.failure(
                DecodeErrorKind.EMPTY_INPUT,
                f"checksum input needs at least one digit and a check symbol, got {source!r}",
            )
        text, check_symbol = split_check_symbol(text)
    elif not text:
        return DecodeResult.failure(DecodeErrorKind.EMPTY_INPUT, "empty input")

    digits = string_to_digits(text)
    if digits is None:
        index = next(i for i, c in enumerate(text) if decode_symbol(c) is None)
        return _invalid_character(source, index)

    if check_symbol is not None and decode_check_symbol(check_symbol) is None:
        return _invalid_character(source, len(text))

    value = from_digits(digits)

    if check_symbol is not None and not verify_check_symbol(value, check_symbol):
        return DecodeResult.failure(
            DecodeErrorKind.CHECKSUM_MISMATCH,
            f"check symbol {check_symbol!r} does not match "
            f"expected {compute_check_symbol(value)!r}",
        )

    return DecodeResult.success(value)


def decode_strict(
    text: str,
    options: OptionsArg = None,
    *,
    checksum: Optional[bool] = None,
) -> int:
    """
    То же, что decode, но с исключением вместо DecodeResult.failure.

    Raises:
        InvalidCharacterError: символ вне алфавита или пустой вход
        ChecksumMismatchError: check symbol не совпадает
        InvalidInputError: text не str или невалидные опции

    Examples:
        >>> decode_strict("1CZ~", checksum=True)
        1439
    """
    return decode(text, options, checksum=checksum).unwrap()


def is_valid(
    text: str,
    options: OptionsArg = None,
    *,
    checksum: Optional[bool] = None,
) -> bool:
    """Проверка, что строка декодируется (и проходит checksum, если включён)."""
    return decode(text, options, checksum=checksum).ok
