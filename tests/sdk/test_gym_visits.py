"""Tests for SDK gym visit functions."""

from unittest.mock import patch

from mms_api.sdk import gym_visits
from mms_api.sdk.models import Admission, UserPresence
from tests.conftest import make_response, sent_body


class TestCheckIn:
    def test_default_presence(self, mock_dispatcher):
        gym_visits.check_in(mock_dispatcher, "A1")
        mock_dispatcher.send_void.assert_called_once_with("api/v2/accounts/A1/checkins", UserPresence(), None)

    def test_default_presence_is_an_empty_object(self, client):
        with patch.object(client._session, "request") as mock_req:
            mock_req.return_value = make_response(204)
            gym_visits.check_in(client, "A1")
            assert sent_body(mock_req) == {}

    def test_explicit_timestamp(self, mock_dispatcher):
        presence = UserPresence(timestamp=1717236000000)
        gym_visits.check_in(mock_dispatcher, "A1", presence)
        assert mock_dispatcher.send_void.call_args[0][1] is presence


class TestCheckOut:
    def test_calls_send_void(self, mock_dispatcher):
        gym_visits.check_out(mock_dispatcher, "A1")
        mock_dispatcher.send_void.assert_called_once_with("api/v2/accounts/A1/checkouts", UserPresence(), None)


class TestAdmission:
    def test_posts_without_body(self, mock_dispatcher):
        gym_visits.admission(mock_dispatcher, "A1")
        mock_dispatcher.send.assert_called_once_with("api/v2/accounts/A1/admissions", Admission, None, None)

    def test_decodes_first_admission(self, client):
        with patch.object(client._session, "request") as mock_req:
            mock_req.return_value = make_response(200, {"firstAdmission": True})
            result = gym_visits.admission(client, "A1")

            assert result.first_admission is True
            assert mock_req.call_args.kwargs["data"] == b""
