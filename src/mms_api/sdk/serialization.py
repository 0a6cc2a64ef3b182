"""
JSON encode/decode rules shared by every MMS API endpoint.

Outgoing bodies use camelCase keys and leave out None values. Incoming bodies
are matched case-insensitively (see CamelCaseModel) and accept numbers sent
as strings, which pydantic's lax mode already allows.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from mms_api.sdk.errors import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Decoded(Generic[T]):
    """Outcome of a decode attempt: exactly one of value/error is meaningful."""
    value: Optional[T] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def encode(value: Any) -> bytes:
    """Encode a DTO (or list/dict of DTOs) as a UTF-8 JSON document."""
    return to_json(value, by_alias=True, exclude_none=True)


def try_decode(type_: Type[T], content: bytes) -> Decoded[T]:
    """
    Decode a JSON document into `type_` without raising.

    Args:
        type_: Target type, e.g. MemberAccount or List[Rfid]
        content: Raw response body

    Returns:
        Decoded with either `value` or `error` set
    """
    try:
        value = _adapter(type_).validate_json(content)
    except ValidationError as e:
        name = getattr(type_, "__name__", str(type_))
        error = DecodeError(f"Could not decode body as {name}", cause=e)
        error.__cause__ = e
        return Decoded(error=error)
    return Decoded(value=value)


def decode(type_: Type[T], content: bytes) -> T:
    """
    Decode a JSON document into `type_`.

    Raises:
        DecodeError: If the body is not valid JSON or does not fit `type_`
    """
    result = try_decode(type_, content)
    if not result.ok:
        raise result.error
    return result.value
