"""Reading fields from decoded JSON request bodies."""

from typing import Any, Optional

from ..services.exceptions import ValidationError

MAX_ID = 2 ** 63 - 1
"""Identifiers are signed 64-bit integers."""

BAD_BODY = 'invalid request: body must be a JSON object'
BAD_STRING = 'invalid request: %s must be a string'
BAD_ENCODING = 'invalid request: %s is not valid UTF-8 text'
BAD_INTEGER = 'invalid request: %s must be an integer'
OUT_OF_RANGE = 'invalid request: %s is out of range'
MISSING = 'invalid request: %s is missing'


def string_field(op: str, payload: Any, field: str,
                 required: bool = True) -> Optional[str]:
    """
    Get a string field from a request body.

    A missing required field is returned as ``''`` so that the service can
    apply its own emptiness rules; a missing optional field is ``None``.

    Raises
    ------
    :class:`.ValidationError`
        If the body is not an object, the value is not a string, or it
        cannot be encoded as UTF-8 (e.g. it holds a lone surrogate).

    """
    value = _get(op, payload, field)
    if value is None:
        return '' if required else None
    if not isinstance(value, str):
        raise ValidationError(op, message=BAD_STRING % field)
    try:
        value.encode('utf-8')
    except UnicodeEncodeError as e:
        raise ValidationError(op, message=BAD_ENCODING % field) from e
    return value


def int_field(op: str, payload: Any, field: str) -> int:
    """Get a required identifier field from a request body."""
    value = _get(op, payload, field)
    if value is None:
        raise ValidationError(op, message=MISSING % field)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(op, message=BAD_INTEGER % field)
    if not -MAX_ID - 1 <= value <= MAX_ID:
        raise ValidationError(op, message=OUT_OF_RANGE % field)
    return value


def _get(op: str, payload: Any, field: str) -> Any:
    if not isinstance(payload, dict):
        raise ValidationError(op, message=BAD_BODY)
    return payload.get(field)
