"""
MMS gym visit SDK functions: check-ins, check-outs and admissions.
"""

import threading
from typing import Optional

from mms_api.sdk.models import Admission, UserPresence
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.request_options import path_segment
from mms_api.sdk.types import ACCOUNT_API_ROOT


def check_in(
    client: Dispatcher,
    account_id: str,
    presence: Optional[UserPresence] = None,
    cancel: Optional[threading.Event] = None,
) -> None:
    """
    Check a member into the gym.

    POST accounts/{accountId}/checkins

    Args:
        presence: When the member arrived; defaults to now (server time)
    """
    client.send_void(
        f"{ACCOUNT_API_ROOT}/{path_segment(account_id)}/checkins",
        presence or UserPresence(),
        cancel,
    )


def check_out(
    client: Dispatcher,
    account_id: str,
    presence: Optional[UserPresence] = None,
    cancel: Optional[threading.Event] = None,
) -> None:
    """
    Check a member out of the gym.

    POST accounts/{accountId}/checkouts
    """
    client.send_void(
        f"{ACCOUNT_API_ROOT}/{path_segment(account_id)}/checkouts",
        presence or UserPresence(),
        cancel,
    )


def admission(
    client: Dispatcher, account_id: str, cancel: Optional[threading.Event] = None
) -> Admission:
    """
    Record a member admission.

    POST accounts/{accountId}/admissions (no body)

    Returns:
        Admission {first_admission}
    """
    return client.send(f"{ACCOUNT_API_ROOT}/{path_segment(account_id)}/admissions", Admission, None, cancel)
