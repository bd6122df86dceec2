"""Turns raw response bodies into typed results or errors.

The Hypothesis API signals errors with a ``{status, reason}`` body, so the
body alone decides the outcome; the HTTP status code is not consulted.
"""

from functools import lru_cache
import logging
from typing import Any
import pydantic
from pydantic import TypeAdapter
from hypothesisapi.entities.api_error import APIError
from hypothesisapi.exceptions import APIFailure, DecodeFailure

_LOGGER = logging.getLogger(__name__)

INPUT_SUGGESTION = 'Make sure input fields are valid'
QUERY_SUGGESTION = 'Make sure the query is valid'
ID_SUGGESTION = 'Make sure the given annotation ID exists'


@lru_cache(maxsize=None)
def _type_adapter(success_type: Any) -> TypeAdapter:
    return TypeAdapter(success_type)


def _as_bytes(body: str | bytes) -> bytes:
    if isinstance(body, str):
        return body.encode('utf-8')
    return body


def _parse_api_error(body: bytes) -> APIError | None:
    try:
        return APIError.model_validate_json(body)
    except pydantic.ValidationError:
        return None


def classify_response(body: str | bytes,
                      success_type: Any,
                      suggestion: str) -> Any:
    """Parse ``body`` as ``success_type``, falling back to the API error shape.

    Args:
        body: The raw response body.
        success_type: The expected payload type (a model or any hashable type pydantic can validate).
        suggestion: Hint attached to an :class:`APIFailure`.

    Returns:
        The decoded payload.

    Raises:
        APIFailure: If the body is an API error.
        DecodeFailure: If the body is neither. It carries the raw body and the success-type parse error.
    """
    raw_body = _as_bytes(body)
    try:
        return _type_adapter(success_type).validate_json(raw_body)
    except pydantic.ValidationError as e:
        api_error = _parse_api_error(raw_body)
        if api_error is not None:
            _LOGGER.info(f"API error: {api_error.status} - {api_error.reason}")
            raise APIFailure(api_error, suggestion, raw_body.decode('utf-8', errors='replace')) from None
        _LOGGER.error(f"Response is neither {success_type} nor an API error: {raw_body!r}")
        raise DecodeFailure(raw_body, e) from e


def raise_for_api_error(body: str | bytes, suggestion: str) -> None:
    """Raise :class:`APIFailure` if ``body`` is an API error, otherwise do nothing.

    Used by endpoints whose success response carries no payload: an empty
    body, or any JSON that is not an error, means success.
    """
    raw_body = _as_bytes(body)
    api_error = _parse_api_error(raw_body)
    if api_error is not None:
        raise APIFailure(api_error, suggestion, raw_body.decode('utf-8', errors='replace'))
