"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from app.schemas.draw import DrawRequestSchema, DrawResponseSchema
from app.services.draw_service import DrawService, failure_details
from app.utils.responses import fail, ok


draw_bp = Blueprint("draw", __name__)

_request_schema = DrawRequestSchema()
_response_schema = DrawResponseSchema()


def _service() -> DrawService:
    return current_app.extensions["draw_service"]


@draw_bp.post("/draw")
def draw_numbers():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    service = _service()
    draw_request = service.prepare(data["start"], data["end"], data["count"], data["exclude"])

    failure = service.check(draw_request)
    if failure is not None:
        return fail(failure.kind.value, failure.message, 400, failure_details(failure))

    outcome = service.run(draw_request)
    return ok(
        _response_schema.dump(
            {
                "numbers": outcome.numbers,
                "preview": outcome.preview,
                "count": outcome.count,
                "start": outcome.start,
                "end": outcome.end,
                "excluded": outcome.excluded,
                "available": outcome.available,
            }
        )
    )
