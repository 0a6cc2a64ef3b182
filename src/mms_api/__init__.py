"""
Python client for the MMS API v2.

Typed access to member accounts, RFIDs, gym visits, product bookings,
trainer tasks, webhooks and push notifications.

    from mms_api import create_client_from_env
    from mms_api.sdk import accounts

    with create_client_from_env() as client:
        account = accounts.retrieve_account(client, "A1")
"""

from mms_api.client_factory import (
    ClientSettings,
    create_client,
    create_client_from_env,
    settings_from_env,
)
from mms_api.sdk import MmsApiError, MmsClient

__all__ = [
    "ClientSettings",
    "create_client",
    "create_client_from_env",
    "settings_from_env",
    "MmsApiError",
    "MmsClient",
]
