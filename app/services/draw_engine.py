"""Unbiased random sampling for the number picker.

Pure functions only: nothing here keeps state between calls. Randomness comes
from ``secrets.token_bytes`` unless a byte source is passed explicitly.
"""

from __future__ import annotations

import re
import secrets
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum


ByteSource = Callable[[int], bytes]

_DECIMAL_TOKEN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_PREFIXED_TOKEN = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_MAX_MAGNITUDE = Decimal(sys.float_info.max)


class InvalidRangeError(ValueError):
    """Raised when the generator is asked for an empty range (max < min)."""


class ValidationErrorKind(str, Enum):
    INVALID_START = "invalid_start"
    INVALID_END = "invalid_end"
    RANGE_INVERTED = "range_inverted"
    INVALID_COUNT = "invalid_count"
    INSUFFICIENT_POOL = "insufficient_pool"


MESSAGES: dict[str, dict[ValidationErrorKind, str]] = {
    "en": {
        ValidationErrorKind.INVALID_START: "Please enter a valid start number.",
        ValidationErrorKind.INVALID_END: "Please enter a valid end number.",
        ValidationErrorKind.RANGE_INVERTED: "The start number cannot be greater than the end number.",
        ValidationErrorKind.INVALID_COUNT: "The number of picks must be at least 1.",
        ValidationErrorKind.INSUFFICIENT_POOL: (
            "Not enough numbers to draw from. (available: {available}, requested: {requested})"
        ),
    },
    "ko": {
        ValidationErrorKind.INVALID_START: "시작 숫자를 정확히 입력해주세요.",
        ValidationErrorKind.INVALID_END: "끝 숫자를 정확히 입력해주세요.",
        ValidationErrorKind.RANGE_INVERTED: "시작 숫자가 끝 숫자보다 클 수 없습니다.",
        ValidationErrorKind.INVALID_COUNT: "뽑을 갯수는 1 이상이어야 합니다.",
        ValidationErrorKind.INSUFFICIENT_POOL: (
            "뽑을 수 있는 숫자가 부족합니다. (가용: {available}개, 요청: {requested}개)"
        ),
    },
}

DEFAULT_LOCALE = "en"


@dataclass(frozen=True)
class ValidationFailure:
    kind: ValidationErrorKind
    message: str
    available: int | None = None
    requested: int | None = None


def _message(kind: ValidationErrorKind, locale: str, **params: int) -> str:
    table = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    return table[kind].format(**params)


def generate_uniform(min_value: int, max_value: int, randbytes: ByteSource = secrets.token_bytes) -> int:
    """Return a uniformly distributed integer in ``[min_value, max_value]``.

    Uses rejection sampling: raw values at or above the largest multiple of
    the range that fits in the drawn bytes are discarded, so no residue is
    favoured. The loop has no iteration cap; each attempt succeeds with
    probability above 1/2.

    Raises:
        InvalidRangeError: if ``max_value < min_value``.
    """

    span = max_value - min_value + 1
    if span <= 0:
        raise InvalidRangeError(f"max ({max_value}) must be >= min ({min_value})")

    # ceil(log2(span) / 8), at least one byte.
    bytes_needed = max(1, ((span - 1).bit_length() + 7) // 8)
    max_valid = (256**bytes_needed // span) * span

    while True:
        value = int.from_bytes(randbytes(bytes_needed), "big")
        if value < max_valid:
            return min_value + value % span


def _to_integer(token: str) -> int | None:
    """Read a trimmed token as a whole number, or ``None``.

    Accepts signed decimals with an optional exponent (``"4.0"``, ``"1e2"``,
    ``".0"``) and unsigned ``0x``/``0o``/``0b`` literals. Values beyond the
    double range are rejected, as are non-whole values.
    """

    if _PREFIXED_TOKEN.match(token):
        value = int(token, 0)
    elif _DECIMAL_TOKEN.match(token):
        try:
            number = Decimal(token)
        except InvalidOperation:
            return None
        if abs(number) > _MAX_MAGNITUDE or number != number.to_integral_value():
            return None
        value = int(number)
    else:
        return None
    return value if abs(value) <= _MAX_MAGNITUDE else None


def parse_exclusions(text: str | None) -> set[int]:
    """Parse a comma separated exclusion list.

    Empty tokens and tokens that are not whole numbers (``"abc"``, ``"3.5"``,
    a run of digits too long for a double) are dropped silently.
    """

    if not text or not text.strip():
        return set()

    result: set[int] = set()
    for part in text.split(","):
        token = part.strip()
        if not token:
            continue
        value = _to_integer(token)
        if value is not None:
            result.add(value)
    return result


def count_available(start: int, end: int, exclude: Iterable[int]) -> int:
    """Number of integers in ``[start, end]`` that are not excluded."""

    excluded_in_range = sum(1 for n in set(exclude) if start <= n <= end)
    return max(0, end - start + 1) - excluded_in_range


def validate(
    start: object,
    end: object,
    count: object,
    exclude: Iterable[int],
    locale: str = DEFAULT_LOCALE,
) -> ValidationFailure | None:
    """Check a draw request, returning the first failure or ``None``.

    Checks run in a fixed order: start, end, start <= end, count, pool size.
    """

    if not isinstance(start, int) or isinstance(start, bool):
        kind = ValidationErrorKind.INVALID_START
        return ValidationFailure(kind, _message(kind, locale))
    if not isinstance(end, int) or isinstance(end, bool):
        kind = ValidationErrorKind.INVALID_END
        return ValidationFailure(kind, _message(kind, locale))
    if start > end:
        kind = ValidationErrorKind.RANGE_INVERTED
        return ValidationFailure(kind, _message(kind, locale))
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        kind = ValidationErrorKind.INVALID_COUNT
        return ValidationFailure(kind, _message(kind, locale))

    available = count_available(start, end, exclude)
    if available < count:
        kind = ValidationErrorKind.INSUFFICIENT_POOL
        return ValidationFailure(
            kind,
            _message(kind, locale, available=available, requested=count),
            available=available,
            requested=count,
        )

    return None


def build_pool(start: int, end: int, exclude: Iterable[int]) -> list[int]:
    excluded = set(exclude)
    return [n for n in range(start, end + 1) if n not in excluded]


def _partial_shuffle(pool: list[int], count: int, randbytes: ByteSource) -> list[int]:
    # Fisher-Yates over the last `count` slots only.
    last = len(pool) - 1
    for i in range(last, last - count, -1):
        j = generate_uniform(0, i, randbytes)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[len(pool) - count :]


def draw(
    start: int,
    end: int,
    count: int,
    exclude: Iterable[int],
    randbytes: ByteSource = secrets.token_bytes,
) -> list[int]:
    """Draw ``count`` distinct numbers from the pool, sorted ascending.

    The request must already have passed :func:`validate`.
    """

    pool = build_pool(start, end, exclude)
    return sorted(_partial_shuffle(pool, count, randbytes))


def pick_preview(
    start: int,
    end: int,
    exclude: Iterable[int],
    limit: int = 30,
    randbytes: ByteSource = secrets.token_bytes,
) -> list[int]:
    """Pick the balls shown tumbling in the machine, in random order."""

    pool = build_pool(start, end, exclude)
    return _partial_shuffle(pool, min(len(pool), max(0, limit)), randbytes)
