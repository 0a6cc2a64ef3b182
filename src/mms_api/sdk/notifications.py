"""
MMS partner push notification SDK functions.
"""

import threading
from typing import Optional

from mms_api.sdk.models import PartnerPushNotification
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.request_options import path_segment
from mms_api.sdk.types import ACCOUNT_API_ROOT


def send_notification_by_account_id(
    client: Dispatcher,
    account_id: str,
    notification: PartnerPushNotification,
    cancel: Optional[threading.Event] = None,
) -> None:
    """POST accounts/{accountId}/notifications"""
    client.send_void(
        f"{ACCOUNT_API_ROOT}/{path_segment(account_id)}/notifications", notification, cancel
    )


def send_notification_by_membership_id(
    client: Dispatcher,
    membership_id: str,
    notification: PartnerPushNotification,
    cancel: Optional[threading.Event] = None,
) -> None:
    """POST accounts/membership/{membershipId}/notifications"""
    client.send_void(
        f"{ACCOUNT_API_ROOT}/membership/{path_segment(membership_id)}/notifications",
        notification,
        cancel,
    )
