"""Tests for the results view model."""

import pytest

from views import DEFAULT_PROSPECT_COUNT, build_results_view, extract_prospect_count, split_assessment
from tests.conftest import make_claude_payload


@pytest.mark.parametrize(
    "assessment,expected",
    [
        ("Clear Value Prop: Your messaging resonates", ("Clear Value Prop", "Your messaging resonates")),
        ("UNCLEAR: Ratio 3:1 of features to outcomes", ("UNCLEAR", "Ratio 3:1 of features to outcomes")),
        ("No colon at all", ("No colon at all", "")),
        ("Trailing colon:", ("Trailing colon", "")),
        ("", ("", "")),
    ],
)
def test_split_assessment(assessment, expected):
    assert split_assessment(assessment) == expected


@pytest.mark.parametrize(
    "note,expected",
    [
        ("would target approximately 3,000-4,000 qualified prospects", "3,000"),
        ("roughly 12,500 prospects", "12,500"),
        ("about 900 prospects", DEFAULT_PROSPECT_COUNT),
        ("", DEFAULT_PROSPECT_COUNT),
    ],
)
def test_extract_prospect_count(note, expected):
    assert extract_prospect_count(note) == expected


def test_build_results_view_from_envelope_data():
    payload = make_claude_payload()
    company = payload.pop("companyName")
    data = {"analysis": payload, "companyName": company, "positioningInput": "yes"}

    view = build_results_view(data)

    assert view.company_name == "Acme"
    assert view.positioning_input == "yes"
    assert view.headline == "Clear Value Prop"
    assert view.industry == "Logistics SaaS"
    assert view.persona_count == 3
    assert view.campaign_count == 3
    assert view.prospect_count == "5,000"
    assert view.case_studies_found is False


def test_build_results_view_sanitizes_report_html():
    payload = make_claude_payload(reportHtml='<p>ok</p><iframe src="https://evil.test"></iframe><img src=x onerror=alert(1)>')
    payload.pop("companyName")
    data = {"analysis": payload, "companyName": "Acme", "positioningInput": "no"}

    view = build_results_view(data)

    assert "<p>ok</p>" in view.report_html
    assert "<iframe" not in view.report_html
    assert "<img" not in view.report_html
    assert "onerror" not in view.report_html
