"""
Shared pytest fixtures for MMS API client testing.
"""
import io
import json
from unittest.mock import Mock

import pytest
import requests

from mms_api.sdk.client import MmsClient


API_URL = "https://mms.test"
API_KEY = "test_api_key"


def make_response(status_code=200, body=None, reason=None, url=None):
    """Build a real requests.Response whose body can be streamed.

    `body` may be bytes, a str, or any JSON-serializable value.
    """
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.raw = io.BytesIO(content)
    response.url = url or API_URL
    response.headers["Content-Length"] = str(len(content))
    return response


def sent_body(mock_request):
    """Decode the JSON body passed to a mocked session.request call."""
    data = mock_request.call_args.kwargs["data"]
    return json.loads(data) if data else None


@pytest.fixture
def client():
    """A client that owns its session. Patch client._session.request in tests."""
    client = MmsClient.connect(API_KEY, API_URL)
    yield client
    client.close()


@pytest.fixture
def mock_dispatcher():
    """A Dispatcher double for endpoint-function tests."""
    return Mock(spec=MmsClient)
