import json
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from u301mcp.Error.u301_error import (
    EmptyBatchError,
    InputValidationError,
    TooManyItemsError,
    UnexpectedResponseError,
)

MAX_BATCH_SIZE = 200


class ShortenRequestItem(BaseModel):
    """One URL to shorten, as the tool caller supplies it."""

    url: str = Field(..., min_length=1, description="URL to shorten e.g. https://example.com/very/long/url")
    slug: Optional[str] = Field(None, description="(optional) Custom slug for the shortened URL")
    expiredAt: Optional[str] = Field(
        None, description="(optional) Expiration date for the shortened URL, e.g. 2023-01-01T00:00:00Z"
    )
    password: Optional[str] = Field(None, description="(optional) Password for the shortened URL")
    comment: Optional[str] = Field(None, description="(optional) Comment, displayed on the dashboard")

    @field_validator("expiredAt", mode="before")
    @classmethod
    def check_expired_at(cls, value: Any) -> Any:
        # The string form is what goes over the wire; parsing only checks it
        if value is None:
            return value
        if isinstance(value, datetime):
            return value.isoformat()
        if not isinstance(value, str):
            raise ValueError("expiredAt must be an ISO-8601 timestamp string")
        try:
            datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"expiredAt is not a valid ISO-8601 timestamp: {value!r}")
        return value


class ShortenedURL(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    url: str
    shortLink: str
    slug: Optional[str] = None
    isCustomSlug: bool = False
    domain: Optional[str] = None
    isReused: bool = False
    comment: Optional[str] = None


class ShortenedURLFailure(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    url: Optional[str] = None
    error: str
    message: Optional[str] = None

    @field_validator("error", mode="before")
    @classmethod
    def stringify_error(cls, value: Any) -> Any:
        # Some failures carry a structured error object instead of a code
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        if value is not None and not isinstance(value, str):
            return str(value)
        return value


ShortenResult = Union[ShortenedURL, ShortenedURLFailure]

_batch_adapter = TypeAdapter(List[ShortenRequestItem])


def validate_batch(urls: Any) -> List[ShortenRequestItem]:
    """
    Validate a tool-call batch.

    Shape is checked first, then the size limits.

    Raises:
        InputValidationError: an item is malformed or the value is not a list
        TooManyItemsError: more than MAX_BATCH_SIZE items
        EmptyBatchError: no items
    """
    try:
        items = _batch_adapter.validate_python(urls)
    except ValidationError as e:
        raise InputValidationError(f"Invalid URL items: {e}") from e

    if len(items) > MAX_BATCH_SIZE:
        raise TooManyItemsError("Too many URLs provided")
    elif len(items) == 0:
        raise EmptyBatchError("No URLs provided")
    return items


def parse_result(raw: Any) -> ShortenResult:
    """Decode one element of the bulk response; an `error` key marks a failed item."""
    if not isinstance(raw, dict):
        raise UnexpectedResponseError(f"Unexpected item in U301 response: {raw!r}")
    try:
        if raw.get("error") is not None:
            return ShortenedURLFailure.model_validate(raw)
        return ShortenedURL.model_validate(raw)
    except ValidationError as e:
        raise UnexpectedResponseError(f"Unexpected item in U301 response: {e}") from e
