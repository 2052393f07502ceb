"""Tests for DrawService and the boundary integer parsing."""

import logging

import pytest

from app.errors import ValidationError
from app.services.draw_engine import ValidationErrorKind
from app.services.draw_service import (
    DrawService,
    LimitFailure,
    LimitKind,
    failure_details,
    parse_int,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, 5),
        ("5", 5),
        (" -12 ", -12),
        ("+3", 3),
        (4.0, 4),
        (4.5, None),
        ("4.5", None),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        ([1], None),
        ("9" * 5000, None),
        (" -" + "1" * 5000, None),
    ],
)
def test_parse_int(value, expected):
    assert parse_int(value) == expected


class TestPrepare:
    def test_parses_strings(self):
        request = DrawService.prepare("1", "45", "6", "3, 7, x")
        assert (request.start, request.end, request.count) == (1, 45, 6)
        assert request.exclude == frozenset({3, 7})

    def test_exclusion_list(self):
        request = DrawService.prepare(1, 10, 2, [1, "2", "nope", 3.5])
        assert request.exclude == frozenset({1, 2})

    def test_exclusion_set_passthrough(self):
        request = DrawService.prepare(1, 10, 2, {4, 5})
        assert request.exclude == frozenset({4, 5})

    def test_missing_exclusions(self):
        assert DrawService.prepare(1, 10, 2).exclude == frozenset()

    def test_bad_numbers_become_none(self):
        request = DrawService.prepare("one", "", None)
        assert (request.start, request.end, request.count) == (None, None, None)


class TestCheck:
    def test_engine_failures_pass_through(self):
        service = DrawService()
        failure = service.check(service.prepare("a", 10, 1))
        assert failure.kind is ValidationErrorKind.INVALID_START

    def test_range_ceiling(self):
        service = DrawService(max_range_size=100)
        failure = service.check(service.prepare(1, 101, 1))
        assert isinstance(failure, LimitFailure)
        assert failure.kind is LimitKind.RANGE_TOO_LARGE
        assert failure_details(failure) == {"max_range_size": 100}

    def test_range_at_ceiling_is_allowed(self):
        service = DrawService(max_range_size=100)
        assert service.check(service.prepare(1, 100, 1)) is None

    def test_validation_runs_before_ceiling(self):
        service = DrawService(max_range_size=10)
        failure = service.check(service.prepare(1, 100, 0))
        assert failure.kind is ValidationErrorKind.INVALID_COUNT

    def test_localized_messages(self):
        service = DrawService(locale="ko")
        failure = service.check(service.prepare(10, 1, 1))
        assert failure.message == "시작 숫자가 끝 숫자보다 클 수 없습니다."

    def test_insufficient_pool_details(self):
        service = DrawService()
        failure = service.check(service.prepare(1, 5, 10))
        assert failure_details(failure) == {"available": 5, "requested": 10}

    def test_other_failures_have_no_details(self):
        service = DrawService()
        assert failure_details(service.check(service.prepare(5, 1, 1))) is None


class TestRun:
    def test_outcome(self, caplog):
        service = DrawService(preview_limit=4)
        request = service.prepare(1, 10, 3, "2, 4, 99")
        assert service.check(request) is None

        with caplog.at_level(logging.INFO, logger="app.services.draw_service"):
            outcome = service.run(request)

        assert len(outcome.numbers) == 3
        assert outcome.numbers == sorted(outcome.numbers)
        assert not {2, 4} & set(outcome.numbers)
        assert len(outcome.preview) == 4
        assert not {2, 4} & set(outcome.preview)
        assert outcome.excluded == [2, 4, 99]
        assert outcome.available == 8
        assert (outcome.start, outcome.end, outcome.count) == (1, 10, 3)
        assert "Drew 3 of 8 available numbers" in caplog.text

    def test_unvalidated_request_raises(self):
        service = DrawService()
        with pytest.raises(ValidationError) as excinfo:
            service.run(service.prepare("x", 1, 1))
        assert excinfo.value.code == "validation_error"
        assert excinfo.value.status_code == 400

    def test_injected_byte_source(self, scripted_bytes):
        service = DrawService(preview_limit=0, randbytes=scripted_bytes([0, 0]))
        outcome = service.run(service.prepare(1, 5, 2))
        assert outcome.numbers == [1, 5]
        assert outcome.preview == []

    def test_from_config(self):
        service = DrawService.from_config({"DRAW_LOCALE": "ko", "DRAW_MAX_RANGE_SIZE": 7})
        failure = service.check(service.prepare(1, 8, 1))
        assert failure.max_range_size == 7
        assert failure.message == "범위가 너무 큽니다. (최대 7개)"
