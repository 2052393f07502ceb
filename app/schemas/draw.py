"""Schemas for the number draw API."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields

from app.services.draw_engine import parse_exclusions


class ExclusionField(fields.Field):
    """Exclusion list given as ``"1, 2, 3"`` or ``[1, "2", 3]``.

    Deserializes to a set of ints; tokens that are not integers are dropped.
    """

    def _deserialize(self, value: Any, attr: str | None, data: Any, **kwargs: Any) -> set[int]:
        if value is None:
            return set()
        if isinstance(value, str):
            return parse_exclusions(value)
        if isinstance(value, (list, tuple)):
            if any(isinstance(token, (dict, list)) for token in value):
                raise ValidationError("List items must be numbers or strings.")
            return parse_exclusions(",".join(str(token) for token in value))
        raise ValidationError("Must be a comma separated string or a list.")


class DrawRequestSchema(Schema):
    """Raw draw form.

    ``start``, ``end`` and ``count`` are left untyped here; the service turns
    them into ints so bad values surface as draw validation codes.
    """

    class Meta:
        unknown = EXCLUDE

    start = fields.Raw(required=False, load_default=None, allow_none=True)
    end = fields.Raw(required=False, load_default=None, allow_none=True)
    count = fields.Raw(required=False, load_default=None, allow_none=True)
    exclude = ExclusionField(required=False, load_default=set, allow_none=True)


class DrawResponseSchema(Schema):
    numbers = fields.List(fields.Integer(), required=True)

    # Balls shown in the machine before the reveal, unsorted.
    preview = fields.List(fields.Integer(), required=True)

    count = fields.Integer(required=True)
    start = fields.Integer(required=True)
    end = fields.Integer(required=True)
    excluded = fields.List(fields.Integer(), required=True)
    available = fields.Integer(required=True)
