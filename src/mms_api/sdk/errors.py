"""
MMS API error model.

MmsApiError is the only exception raised for a call that reached the server
and came back with a non-2xx status. When the body matched the server's error
shape it is available as `detail`; otherwise only the status and the raw
message survive.
"""

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict

from mms_api.sdk.base import CamelCaseModel


class FieldError(CamelCaseModel):
    """One rejected input field."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    message: Optional[str] = None
    # Whatever the caller sent; the server may reject any JSON shape.
    rejected_value: Any = None


class ErrorDetail(CamelCaseModel):
    """Structured error payload returned by the server."""

    model_config = ConfigDict(frozen=True)

    timestamp: Optional[str] = None
    path: Optional[str] = None
    request_id: Optional[str] = None
    status: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    message: Optional[str] = None
    field_errors: Optional[List[FieldError]] = None
    metadata: Optional[Dict[str, str]] = None


class DecodeError(Exception):
    """A response body could not be decoded into the requested type."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class MmsApiError(Exception):
    """
    HTTP-level failure of an MMS API call.

    Attributes:
        http_status: Status code of the response (always set)
        detail: Parsed error payload, or None if the body did not match it
        message: Response body text, or the reason phrase for an empty body
        cause: The DecodeError raised while parsing the body, if any
    """

    def __init__(
        self,
        http_status: int,
        message: str,
        detail: Optional[ErrorDetail] = None,
        cause: Optional[DecodeError] = None,
    ):
        super().__init__(message)
        self.http_status = http_status
        self.message = message
        self.detail = detail
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.http_status}: {self.message}"


class RequestCancelled(Exception):
    """The caller cancelled the call before it completed."""
