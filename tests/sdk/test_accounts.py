"""Tests for SDK member account functions."""

import threading
from datetime import datetime
from unittest.mock import patch

import pytest

from mms_api.sdk import accounts
from mms_api.sdk.errors import MmsApiError
from mms_api.sdk.models import MemberAccount, MemberAccountPage, RoleAssignment
from mms_api.sdk.request_options import MemberAccountsRequest
from tests.conftest import make_response, sent_body


class TestRetrieveAccount:
    def test_calls_fetch(self, mock_dispatcher):
        mock_dispatcher.fetch.return_value = MemberAccount(account_id="A1")
        result = accounts.retrieve_account(mock_dispatcher, "A1")

        assert result.account_id == "A1"
        mock_dispatcher.fetch.assert_called_once_with("api/v2/accounts/A1", MemberAccount, None)

    def test_passes_cancel_signal(self, mock_dispatcher):
        cancel = threading.Event()
        accounts.retrieve_account(mock_dispatcher, "A1", cancel)
        assert mock_dispatcher.fetch.call_args[0][2] is cancel

    def test_end_to_end(self, client):
        with patch.object(client._session, "request") as mock_req:
            mock_req.return_value = make_response(200, {"accountId": "A1", "email": "a@x.com"})
            account = accounts.retrieve_account(client, "A1")

            assert account.account_id == "A1"
            assert mock_req.call_args[0] == ("GET", "https://mms.test/api/v2/accounts/A1")


class TestUpdateAccount:
    def test_calls_put(self, mock_dispatcher):
        account = MemberAccount(first_name="Ada")
        accounts.update_account(mock_dispatcher, "A1", account)
        mock_dispatcher.put.assert_called_once_with("api/v2/accounts/A1", MemberAccount, account, None)


class TestDeleteAccount:
    def test_default_keeps_member_data(self, mock_dispatcher):
        accounts.delete_account(mock_dispatcher, "A1")
        mock_dispatcher.remove.assert_called_once_with("api/v2/accounts/A1?eraseMemberData=false", None)

    def test_erase_member_data(self, mock_dispatcher):
        accounts.delete_account(mock_dispatcher, "A1", erase_member_data=True)
        assert mock_dispatcher.remove.call_args[0][0] == "api/v2/accounts/A1?eraseMemberData=true"


class TestAccountImages:
    def test_upload(self, mock_dispatcher):
        accounts.upload_account_image(mock_dispatcher, "A1", b"img", "me.jpg")
        mock_dispatcher.put_file.assert_called_once_with("api/v2/accounts/A1/images", b"img", "me.jpg", None)

    def test_delete(self, mock_dispatcher):
        accounts.delete_account_image(mock_dispatcher, "A1")
        mock_dispatcher.remove.assert_called_once_with("api/v2/accounts/A1/images", None)


class TestListMemberAccounts:
    def test_default_request(self, mock_dispatcher):
        accounts.list_member_accounts(mock_dispatcher)
        mock_dispatcher.fetch.assert_called_once_with(
            "api/v2/accounts?currentGymOnly=true&limit=10&offset=0", MemberAccountPage, None
        )

    def test_custom_request(self, mock_dispatcher):
        request = MemberAccountsRequest(limit=50, offset=100, from_timestamp=datetime(2024, 3, 1))
        accounts.list_member_accounts(mock_dispatcher, request)
        assert mock_dispatcher.fetch.call_args[0][0] == (
            "api/v2/accounts?currentGymOnly=true&fromTimestamp=2024-03-01T00:00:00.0000000&limit=50&offset=100"
        )

    def test_decodes_page(self, client):
        with patch.object(client._session, "request") as mock_req:
            mock_req.return_value = make_response(200, {
                "offset": 0, "limit": 10, "total": 1, "hasNext": False,
                "items": [{"accountId": "A1"}],
            })
            page = accounts.list_member_accounts(client)

            assert page.total == 1
            assert page.has_next is False
            assert page.items[0].account_id == "A1"


class TestCreateAccount:
    def test_calls_send(self, mock_dispatcher):
        account = MemberAccount(email="a@x.com")
        accounts.create_account(mock_dispatcher, account)
        mock_dispatcher.send.assert_called_once_with("api/v2/accounts", MemberAccount, account, None)


class TestSetAccountRoles:
    def test_calls_send_void(self, mock_dispatcher):
        roles = RoleAssignment(trainer=True)
        accounts.set_account_roles(mock_dispatcher, "A1", roles)
        mock_dispatcher.send_void.assert_called_once_with("api/v2/accounts/A1/roles", roles, None)

    def test_rejected_role_raises_api_error(self, client):
        with patch.object(client._session, "request") as mock_req:
            mock_req.return_value = make_response(
                400, {"status": 400, "error": "Bad Request", "message": "invalid role"}
            )
            with pytest.raises(MmsApiError) as exc_info:
                accounts.set_account_roles(client, "A1", RoleAssignment(trainer=True))

            assert sent_body(mock_req) == {"trainer": True}
            assert exc_info.value.http_status == 400
            assert exc_info.value.detail.message == "invalid role"


class TestLookups:
    def test_by_membership_id(self, mock_dispatcher):
        accounts.retrieve_account_by_membership_id(mock_dispatcher, "M-42")
        mock_dispatcher.fetch.assert_called_once_with("api/v2/accounts/membership/M-42", MemberAccount, None)

    def test_by_email(self, mock_dispatcher):
        accounts.retrieve_account_by_email(mock_dispatcher, "a@x.com")
        mock_dispatcher.fetch.assert_called_once_with("api/v2/accounts/email/a@x.com", MemberAccount, None)


class TestMigrateAccount:
    def test_posts_without_body(self, mock_dispatcher):
        accounts.migrate_account(mock_dispatcher, 12345)
        mock_dispatcher.send.assert_called_once_with(
            "api/v2/migrate?legacyUserId=12345", MemberAccount, None, None
        )
