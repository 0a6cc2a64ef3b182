"""
MMS member account SDK functions.

Covers api/v2/accounts and api/v2/migrate.
"""

import threading
from typing import Optional

from mms_api.sdk.models import MemberAccount, MemberAccountPage, RoleAssignment
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.request_options import MemberAccountsRequest, path_segment
from mms_api.sdk.types import ACCOUNT_API_ROOT, MIGRATE_API_ROOT


def _account_path(account_id: str) -> str:
    return f"{ACCOUNT_API_ROOT}/{path_segment(account_id)}"


def retrieve_account(
    client: Dispatcher, account_id: str, cancel: Optional[threading.Event] = None
) -> MemberAccount:
    """
    Retrieve a member account.

    GET accounts/{accountId}
    """
    return client.fetch(_account_path(account_id), MemberAccount, cancel)


def update_account(
    client: Dispatcher,
    account_id: str,
    account: MemberAccount,
    cancel: Optional[threading.Event] = None,
) -> MemberAccount:
    """
    Replace a member account.

    PUT accounts/{accountId}

    Returns:
        The account as stored by the server
    """
    return client.put(_account_path(account_id), MemberAccount, account, cancel)


def delete_account(
    client: Dispatcher,
    account_id: str,
    erase_member_data: bool = False,
    cancel: Optional[threading.Event] = None,
) -> None:
    """
    Delete a member account.

    DELETE accounts/{accountId}?eraseMemberData={true|false}

    Args:
        erase_member_data: Also erase the member's personal data
    """
    client.remove(
        f"{_account_path(account_id)}?eraseMemberData={str(erase_member_data).lower()}",
        cancel,
    )


def upload_account_image(
    client: Dispatcher,
    account_id: str,
    file_bytes: bytes,
    file_name: str,
    cancel: Optional[threading.Event] = None,
) -> None:
    """
    Upload a profile image.

    PUT accounts/{accountId}/images (multipart/form-data, part "file")
    """
    client.put_file(f"{_account_path(account_id)}/images", file_bytes, file_name, cancel)


def delete_account_image(
    client: Dispatcher, account_id: str, cancel: Optional[threading.Event] = None
) -> None:
    """
    Delete the profile image.

    DELETE accounts/{accountId}/images
    """
    client.remove(f"{_account_path(account_id)}/images", cancel)


def list_member_accounts(
    client: Dispatcher,
    request: Optional[MemberAccountsRequest] = None,
    cancel: Optional[threading.Event] = None,
) -> MemberAccountPage:
    """
    List member accounts, one page at a time.

    GET accounts?currentGymOnly=...&limit=...&offset=...

    Returns:
        MemberAccountPage {offset, limit, items, total, has_next}
    """
    request = request or MemberAccountsRequest()
    return client.fetch(ACCOUNT_API_ROOT + request.to_query_params(), MemberAccountPage, cancel)


def create_account(
    client: Dispatcher, account: MemberAccount, cancel: Optional[threading.Event] = None
) -> MemberAccount:
    """
    Create a member account.

    POST accounts

    Returns:
        The created account, including its accountId
    """
    return client.send(ACCOUNT_API_ROOT, MemberAccount, account, cancel)


def set_account_roles(
    client: Dispatcher,
    account_id: str,
    roles: RoleAssignment,
    cancel: Optional[threading.Event] = None,
) -> None:
    """
    Assign roles to a member.

    POST accounts/{accountId}/roles
    """
    client.send_void(f"{_account_path(account_id)}/roles", roles, cancel)


def retrieve_account_by_membership_id(
    client: Dispatcher, membership_id: str, cancel: Optional[threading.Event] = None
) -> MemberAccount:
    """GET accounts/membership/{membershipId}"""
    return client.fetch(
        f"{ACCOUNT_API_ROOT}/membership/{path_segment(membership_id)}", MemberAccount, cancel
    )


def retrieve_account_by_email(
    client: Dispatcher, email: str, cancel: Optional[threading.Event] = None
) -> MemberAccount:
    """GET accounts/email/{email}"""
    return client.fetch(f"{ACCOUNT_API_ROOT}/email/{path_segment(email)}", MemberAccount, cancel)


def migrate_account(
    client: Dispatcher, legacy_user_id: int, cancel: Optional[threading.Event] = None
) -> MemberAccount:
    """
    Migrate a legacy user into a member account.

    POST migrate?legacyUserId={legacyUserId} (no body)
    """
    return client.send(f"{MIGRATE_API_ROOT}?legacyUserId={legacy_user_id}", MemberAccount, None, cancel)
