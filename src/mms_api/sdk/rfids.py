"""
MMS RFID SDK functions.

Covers api/v2/accounts/{accountId}/rfids.
"""

import threading
from typing import List, Optional, Union

from mms_api.sdk.models import Rfid, RfidList
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.request_options import path_segment
from mms_api.sdk.types import ACCOUNT_API_ROOT


def _rfids_path(account_id: str) -> str:
    return f"{ACCOUNT_API_ROOT}/{path_segment(account_id)}/rfids"


def retrieve_user_rfids(
    client: Dispatcher, account_id: str, cancel: Optional[threading.Event] = None
) -> List[Rfid]:
    """GET accounts/{accountId}/rfids"""
    return client.fetch(_rfids_path(account_id), List[Rfid], cancel)


def update_all_rfids(
    client: Dispatcher,
    account_id: str,
    rfids: Union[RfidList, List[Rfid]],
    cancel: Optional[threading.Event] = None,
) -> None:
    """
    Replace every RFID of a member.

    PUT accounts/{accountId}/rfids

    Args:
        rfids: The complete new set, as a RfidList or a plain list
    """
    if not isinstance(rfids, RfidList):
        rfids = RfidList(rfids=list(rfids))
    client.put_void(_rfids_path(account_id), rfids, cancel)


def add_rfid(
    client: Dispatcher, account_id: str, rfid: Rfid, cancel: Optional[threading.Event] = None
) -> Rfid:
    """POST accounts/{accountId}/rfids"""
    return client.send(_rfids_path(account_id), Rfid, rfid, cancel)


def remove_rfid(
    client: Dispatcher,
    account_id: str,
    rfid: Union[Rfid, str],
    tag_format: Optional[str] = None,
    cancel: Optional[threading.Event] = None,
) -> None:
    """
    Remove one RFID from a member.

    DELETE accounts/{accountId}/rfids/{rfid}[?tagFormat={tagFormat}]

    Args:
        rfid: The RFID value, or an Rfid whose tag format is used as well
        tag_format: Tag format to disambiguate the RFID (see TagFormat)
    """
    if isinstance(rfid, Rfid):
        tag_format = tag_format or rfid.tag_format
        rfid = rfid.rfid

    path = f"{_rfids_path(account_id)}/{path_segment(rfid)}"
    if tag_format:
        path += f"?tagFormat={path_segment(tag_format)}"
    client.remove(path, cancel)
