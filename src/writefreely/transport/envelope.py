"""
Request body serialization and response envelope unwrapping.
"""

from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from writefreely.errors import ParseError
from writefreely.models.envelope import ResponseEnvelope


def build_body(body: Any) -> Optional[Any]:
    """Turn a request body into JSON-ready data. Models drop unset (None) fields."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(body, (list, tuple)):
        return [build_body(item) for item in body]
    return body


def parse_envelope(text: str, target: Any) -> Any:
    """Parse a {code, data} envelope and validate `data` as `target`.

    Raises ParseError carrying the raw text when either step fails.
    """
    try:
        envelope = ResponseEnvelope.model_validate_json(text)
    except ValidationError as e:
        raise ParseError(text, f"Invalid response envelope: {e.error_count()} error(s)") from e
    try:
        return TypeAdapter(target).validate_python(envelope.data)
    except ValidationError as e:
        raise ParseError(text, f"Unexpected response data: {e.error_count()} error(s)") from e
