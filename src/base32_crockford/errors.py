"""
Errors — Таксономия ошибок base32-crockford

Две категории:
- Нарушения контракта вызывающей стороны (InvalidInputError):
  отрицательное число в encode, не-int значение, не-str вход decode,
  невалидные опции. Это ошибка программирования, а не runtime-состояние.
- Ошибки декодирования (DecodeError): невалидный символ или несовпадение
  check symbol. В decode() они возвращаются как DecodeResult, в
  decode_strict() поднимаются как исключения.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class DecodeErrorKind(str, Enum):
    """Причина неуспешного декодирования."""

    INVALID_CHARACTER = "INVALID_CHARACTER"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"
    EMPTY_INPUT = "EMPTY_INPUT"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Base32CrockfordError(Exception):
    """Базовое исключение пакета."""
    pass


class InvalidInputError(Base32CrockfordError, ValueError):
    """
    Нарушение предусловий: отрицательное значение, неверный тип аргумента,
    невалидная конфигурация.
    """
    pass


class DecodeError(Base32CrockfordError, ValueError):
    """
    Строка не может быть декодирована.

    Attributes:
        kind: причина (DecodeErrorKind)
        details: человекочитаемое описание
    """

    def __init__(self, kind: DecodeErrorKind, details: str):
        super().__init__(details)
        self.kind = kind
        self.details = details


class InvalidCharacterError(DecodeError):
    """Символ вне алфавита (или пустой вход)."""

    def __init__(self, details: str, kind: DecodeErrorKind = DecodeErrorKind.INVALID_CHARACTER):
        super().__init__(kind, details)


class ChecksumMismatchError(DecodeError):
    """Check symbol не совпадает с value mod 37."""

    def __init__(self, details: str):
        super().__init__(DecodeErrorKind.CHECKSUM_MISMATCH, details)
