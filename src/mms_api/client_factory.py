"""
Client factory for the MMS API.

Builds an MmsClient from explicit settings or from environment variables:
- MMS_API_KEY: partner API key (required)
- MMS_API_URL: base URL of the MMS API (required)
- MMS_API_TIMEOUT: per-request timeout in seconds (default: 30)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from mms_api.sdk.client import DEFAULT_TIMEOUT, MmsClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings for an MMS API client."""
    api_key: str
    base_url: str
    timeout: float = DEFAULT_TIMEOUT


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientSettings:
    """
    Read client settings from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Raises:
        ValueError: If a required variable is missing or the timeout is not a number
    """
    environ = os.environ if environ is None else environ

    api_key = environ.get("MMS_API_KEY")
    if not api_key:
        raise ValueError("MMS_API_KEY is not set")

    base_url = environ.get("MMS_API_URL")
    if not base_url:
        raise ValueError("MMS_API_URL is not set")

    timeout = environ.get("MMS_API_TIMEOUT")
    try:
        timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
    except ValueError:
        raise ValueError(f"MMS_API_TIMEOUT must be a number of seconds, got '{timeout}'")

    return ClientSettings(api_key=api_key, base_url=base_url, timeout=timeout)


def create_client(settings: ClientSettings) -> MmsClient:
    """Create a client that owns its HTTP session. Close it when done."""
    logger.debug("Creating MMS API client for %s (timeout %ss)", settings.base_url, settings.timeout)
    return MmsClient.connect(settings.api_key, settings.base_url, timeout=settings.timeout)


def create_client_from_env(environ: Optional[Mapping[str, str]] = None) -> MmsClient:
    """Create a client configured from MMS_API_* environment variables."""
    return create_client(settings_from_env(environ))
