"""Tests for the Form Collector client: validation, single request, terminal states."""

from unittest.mock import MagicMock

import pytest
import requests

from client import (
    NETWORK_ERROR_MESSAGE,
    SERVER_FALLBACK_MESSAGE,
    VALIDATION_MESSAGE,
    WORK_EMAIL_MESSAGE,
    CampaignGeneratorClient,
    ViewState,
    outcome_from_envelope,
    validate_fields,
)
from views import build_results_view


def make_session(payload=None, json_error=None, post_error=None):
    session = MagicMock(spec=requests.Session)
    if post_error is not None:
        session.post.side_effect = post_error
        return session
    response = MagicMock()
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session.post.return_value = response
    return session


def success_payload(assessment="Clear Value Prop: Your messaging resonates"):
    return {
        "success": True,
        "data": {
            "analysis": {
                "positioningAssessmentOutput": assessment,
                "reportHtml": "<p>Report</p>",
            },
            "companyName": "Acme",
            "positioningInput": "unsure",
        },
    }


class TestValidateFields:
    @pytest.mark.parametrize(
        "email,website,positioning",
        [
            ("", "https://b.com", "yes"),
            ("a@b.com", "", "yes"),
            ("a@b.com", "https://b.com", ""),
            ("  ", "https://b.com", "yes"),
            (None, None, None),
        ],
    )
    def test_missing_fields(self, email, website, positioning):
        assert validate_fields(email, website, positioning) == VALIDATION_MESSAGE

    @pytest.mark.parametrize("email", ["me@gmail.com", "me@Yahoo.com", "me@outlook.com"])
    def test_free_email_domains(self, email):
        assert validate_fields(email, "https://b.com", "no") == WORK_EMAIL_MESSAGE

    def test_work_email_passes(self):
        assert validate_fields("jane@acme.io", "acme.io", "yes") is None


class TestSubmit:
    @pytest.mark.parametrize("missing", ["email", "website", "positioning"])
    def test_empty_field_never_hits_network(self, missing):
        session = make_session(success_payload())
        client = CampaignGeneratorClient(session=session)
        fields = {"email": "a@b.com", "website": "https://b.com", "positioning": "unsure"}
        fields[missing] = ""

        outcome = client.submit(**fields)

        session.post.assert_not_called()
        assert outcome.state is ViewState.SHOWING_ERROR
        assert outcome.error == VALIDATION_MESSAGE
        assert client.state is ViewState.SHOWING_ERROR

    def test_success_sends_exactly_one_request(self):
        session = make_session(success_payload())
        client = CampaignGeneratorClient(base_url="http://relay.test/", session=session)

        outcome = client.submit("a@b.com", "https://b.com", "unsure")

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "http://relay.test/api/generate-campaigns"
        assert kwargs["json"] == {"email": "a@b.com", "website": "https://b.com", "positioning": "unsure"}
        assert outcome.state is ViewState.SHOWING_RESULTS
        assert outcome.error is None
        assert outcome.data["companyName"] == "Acme"
        assert client.outcome is outcome

    def test_server_error_message_is_shown(self):
        session = make_session({"success": False, "error": "AI analysis service failed. Please try again."})
        client = CampaignGeneratorClient(session=session)

        outcome = client.submit("a@b.com", "https://b.com", "yes")

        assert outcome.state is ViewState.SHOWING_ERROR
        assert outcome.error == "AI analysis service failed. Please try again."
        assert outcome.data is None

    @pytest.mark.parametrize("payload", [{"success": False}, {"success": False, "error": ""}, {"success": False, "error": None}])
    def test_server_error_without_message_uses_fallback(self, payload):
        client = CampaignGeneratorClient(session=make_session(payload))

        outcome = client.submit("a@b.com", "https://b.com", "yes")

        assert outcome.error == SERVER_FALLBACK_MESSAGE

    def test_connection_error(self):
        session = make_session(post_error=requests.ConnectionError("refused"))
        client = CampaignGeneratorClient(session=session)

        outcome = client.submit("a@b.com", "https://b.com", "yes")

        assert outcome.state is ViewState.SHOWING_ERROR
        assert outcome.error == NETWORK_ERROR_MESSAGE
        assert NETWORK_ERROR_MESSAGE != SERVER_FALLBACK_MESSAGE

    def test_non_json_response(self):
        session = make_session(json_error=ValueError("Expecting value"))
        client = CampaignGeneratorClient(session=session)

        outcome = client.submit("a@b.com", "https://b.com", "yes")

        assert outcome.error == NETWORK_ERROR_MESSAGE

    def test_new_submission_restarts_from_idle(self):
        session = make_session(post_error=requests.Timeout("slow"))
        client = CampaignGeneratorClient(session=session)
        client.submit("a@b.com", "https://b.com", "yes")

        session.post.side_effect = None
        session.post.return_value = MagicMock(json=MagicMock(return_value=success_payload()))
        outcome = client.submit("a@b.com", "https://b.com", "yes")

        assert outcome.state is ViewState.SHOWING_RESULTS
        assert session.post.call_count == 2


def test_outcome_from_non_dict_payload():
    outcome = outcome_from_envelope(["unexpected"])

    assert outcome.state is ViewState.SHOWING_ERROR
    assert outcome.error == SERVER_FALLBACK_MESSAGE


def test_submission_renders_headline_detail_and_company():
    session = make_session(success_payload())
    client = CampaignGeneratorClient(session=session)

    outcome = client.submit("a@b.com", "https://b.com", "unsure")
    view = build_results_view(outcome.data)

    assert view.headline == "Clear Value Prop"
    assert view.detail == "Your messaging resonates"
    assert view.company_name == "Acme"
