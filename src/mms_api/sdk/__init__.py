"""
MMS API v2 Low-Level SDK.

Thin typed wrapper over the MMS HTTP API.
Each endpoint function maps 1:1 to an MMS endpoint and is a single call to
one MmsClient verb primitive.
"""

from mms_api.sdk.client import MmsClient, OwnedSession, SharedSession
from mms_api.sdk.errors import (
    DecodeError,
    ErrorDetail,
    FieldError,
    MmsApiError,
    RequestCancelled,
)
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.request_options import MemberAccountsRequest, TasksRequest
from mms_api.sdk.types import MembershipType, TagFormat, TaskType

__all__ = [
    "MmsClient",
    "OwnedSession",
    "SharedSession",
    "Dispatcher",
    "DecodeError",
    "ErrorDetail",
    "FieldError",
    "MmsApiError",
    "RequestCancelled",
    "MemberAccountsRequest",
    "TasksRequest",
    "MembershipType",
    "TagFormat",
    "TaskType",
]
