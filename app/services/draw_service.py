"""Business logic for drawing numbers from raw user input."""

from __future__ import annotations

import logging
import re
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.errors import ValidationError
from app.services import draw_engine
from app.services.draw_engine import ByteSource, ValidationErrorKind, ValidationFailure


logger = logging.getLogger(__name__)

_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")


class LimitKind(str, Enum):
    RANGE_TOO_LARGE = "range_too_large"


_LIMIT_MESSAGES = {
    "en": "The range is too large (at most {max_range_size} numbers).",
    "ko": "범위가 너무 큽니다. (최대 {max_range_size}개)",
}


@dataclass(frozen=True)
class DrawRequest:
    start: int | None
    end: int | None
    count: int | None
    exclude: frozenset[int]


@dataclass(frozen=True)
class LimitFailure:
    kind: LimitKind
    message: str
    max_range_size: int


@dataclass(frozen=True)
class DrawOutcome:
    numbers: list[int]
    preview: list[int]
    start: int
    end: int
    count: int
    excluded: list[int]
    available: int


def parse_int(value: Any) -> int | None:
    """Turn a form/JSON value into an int, or ``None`` if it is not one."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_TEXT.match(text):
            try:
                return int(text)
            except ValueError:
                # Longer than the interpreter allows for str -> int.
                return None
    return None


class DrawService:
    """Validate and run number draws."""

    def __init__(
        self,
        *,
        locale: str = draw_engine.DEFAULT_LOCALE,
        max_range_size: int = 1_000_000,
        preview_limit: int = 30,
        randbytes: ByteSource = secrets.token_bytes,
    ) -> None:
        self._locale = locale
        self._max_range_size = max_range_size
        self._preview_limit = preview_limit
        self._randbytes = randbytes

    @classmethod
    def from_config(cls, config: Any) -> "DrawService":
        return cls(
            locale=str(config.get("DRAW_LOCALE", draw_engine.DEFAULT_LOCALE)),
            max_range_size=int(config.get("DRAW_MAX_RANGE_SIZE", 1_000_000)),
            preview_limit=int(config.get("DRAW_PREVIEW_LIMIT", 30)),
        )

    @staticmethod
    def prepare(start: Any, end: Any, count: Any, exclude: Any = None) -> DrawRequest:
        if isinstance(exclude, (set, frozenset)):
            excluded = {n for n in exclude if isinstance(n, int) and not isinstance(n, bool)}
        elif isinstance(exclude, (list, tuple)):
            excluded = draw_engine.parse_exclusions(",".join(str(token) for token in exclude))
        else:
            excluded = draw_engine.parse_exclusions(exclude)

        return DrawRequest(
            start=parse_int(start),
            end=parse_int(end),
            count=parse_int(count),
            exclude=frozenset(excluded),
        )

    def check(self, request: DrawRequest) -> ValidationFailure | LimitFailure | None:
        """Return the first problem with the request, or ``None``."""

        failure = draw_engine.validate(
            request.start, request.end, request.count, request.exclude, locale=self._locale
        )
        if failure is not None:
            return failure

        start, end = request.start, request.end
        if start is not None and end is not None and end - start + 1 > self._max_range_size:
            template = _LIMIT_MESSAGES.get(self._locale) or _LIMIT_MESSAGES["en"]
            return LimitFailure(
                kind=LimitKind.RANGE_TOO_LARGE,
                message=template.format(max_range_size=self._max_range_size),
                max_range_size=self._max_range_size,
            )
        return None

    def run(self, request: DrawRequest) -> DrawOutcome:
        """Draw numbers for a request that passed :meth:`check`."""

        start, end, count = request.start, request.end, request.count
        if start is None or end is None or count is None:
            raise ValidationError(
                message="Draw request has not been validated",
                details={"start": start, "end": end, "count": count},
            )

        numbers = draw_engine.draw(start, end, count, request.exclude, randbytes=self._randbytes)
        preview = draw_engine.pick_preview(
            start, end, request.exclude, limit=self._preview_limit, randbytes=self._randbytes
        )
        available = draw_engine.count_available(start, end, request.exclude)

        logger.info(
            "Drew %d of %d available numbers in [%d, %d] (%d excluded)",
            count,
            available,
            start,
            end,
            len(request.exclude),
        )

        return DrawOutcome(
            numbers=numbers,
            preview=preview,
            start=start,
            end=end,
            count=count,
            excluded=sorted(request.exclude),
            available=available,
        )


def failure_details(failure: ValidationFailure | LimitFailure) -> dict[str, int] | None:
    if isinstance(failure, LimitFailure):
        return {"max_range_size": failure.max_range_size}
    if failure.kind is ValidationErrorKind.INSUFFICIENT_POOL:
        return {"available": int(failure.available or 0), "requested": int(failure.requested or 0)}
    return None
