"""
Formatter — Разбиение на группы при encode, нормализация при decode

Encode: строка (check symbol уже добавлен) делится на N смежных групп,
соединённых дефисом. Длина каждой группы = floor(остаток / оставшиеся группы),
отделяется спереди, поэтому «лишние» символы уходят в последние группы:

    len=6, N=3 -> 2,2,2   XS-NJ-G0
    len=6, N=4 -> 1,1,2,2 X-S-NJ-G0

N in {0, 1} -> без разбиения. N > длины строки ограничивается длиной,
пустые группы не создаются.

Decode: удалить все дефисы, привести ASCII-буквы к верхнему регистру.
"""

from typing import Final, List, Tuple

from base32_crockford.alphabet import fold_case
from base32_crockford.errors import InvalidInputError

SEPARATOR: Final[str] = "-"


# =============================================================================
# PARTITIONING
# =============================================================================


def partition_lengths(total: int, partitions: int) -> List[int]:
    """
    Длины групп для строки длины total.

    Examples:
        >>> partition_lengths(6, 4)
        [1, 1, 2, 2]
        >>> partition_lengths(6, 1)
        [6]
    """
    if total < 0:
        raise InvalidInputError(f"total must be non-negative, got {total}")
    if partitions < 0:
        raise InvalidInputError(f"partitions must be non-negative, got {partitions}")

    if partitions <= 1 or total <= 1:
        return [total]

    remaining_partitions = min(partitions, total)
    remaining = total
    lengths: List[int] = []
    while remaining_partitions > 0:
        length = remaining // remaining_partitions
        lengths.append(length)
        remaining -= length
        remaining_partitions -= 1
    return lengths


def partition(text: str, partitions: int) -> str:
    """
    Разбиение строки на группы через дефис.

    Examples:
        >>> partition("XSNJG0", 3)
        'XS-NJ-G0'
        >>> partition("XSNJG0", 2)
        'XSN-JG0'
    """
    groups: List[str] = []
    start = 0
    for length in partition_lengths(len(text), partitions):
        groups.append(text[start:start + length])
        start += length
    return SEPARATOR.join(groups)


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize(text: str) -> str:
    """Удаление дефисов и приведение ASCII-букв к верхнему регистру."""
    return fold_case(text.replace(SEPARATOR, ""))


def split_check_symbol(text: str) -> Tuple[str, str]:
    """
    Отделение check symbol (последний символ) от payload.

    Args:
        text: нормализованная непустая строка

    Returns:
        (payload, check_symbol)
    """
    if not text:
        raise InvalidInputError("cannot split check symbol from empty string")
    return text[:-1], text[-1]
