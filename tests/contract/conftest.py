"""
Contract test fixtures.

These tests hit a REAL MMS API endpoint, normally a mock server that serves
the published OpenAPI document and honours the `Prefer: code=...` header.

Provide the target via environment variables:
  MMS_API_URL  = base URL of the (mock) server
  MMS_API_KEY  = API key to send

Run: pytest tests/contract/ -v
"""

import os

import pytest
import requests

from mms_api.sdk.client import MmsClient


@pytest.fixture(scope="session")
def contract_settings():
    api_url = os.environ.get("MMS_API_URL")
    api_key = os.environ.get("MMS_API_KEY")
    if not api_url or not api_key:
        pytest.skip("No MMS API target: set MMS_API_URL and MMS_API_KEY")
    return {"api_url": api_url, "api_key": api_key}


@pytest.fixture
def session(contract_settings):
    session = requests.Session()
    session.headers.update({
        "Accept": "application/json",
        "x-api-key": contract_settings["api_key"],
    })
    yield session
    session.close()


@pytest.fixture
def prefer(session):
    """Ask the mock server for a specific response, e.g. prefer("code=400, dynamic=true")."""
    def _prefer(value: str):
        session.headers["Prefer"] = value
    return _prefer


@pytest.fixture
def mms(session, contract_settings):
    return MmsClient.from_session(session, contract_settings["api_url"])
