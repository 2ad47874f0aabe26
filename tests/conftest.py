"""Shared test fixtures."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from config import settings


def make_claude_payload(**overrides) -> dict:
    """A well-formed analysis as Claude is asked to return it."""
    payload = {
        "companyName": "Acme",
        "positioningAssessmentOutput": "Clear Value Prop: Your messaging resonates",
        "idealCustomerProfile": {
            "industry": "Logistics SaaS",
            "companySize": "200-2,000 employees",
            "characteristics": ["Runs 3+ fleet tools", "Growing ops team"],
        },
        "personas": [
            {"title": "VP of Fleet Operations", "painPoints": "Too many systems, poor data"},
            {"title": "Director of Safety", "painPoints": "False positive alerts"},
            {"title": "Fleet Manager", "painPoints": "Manual tasks"},
        ],
        "campaigns": [
            {"name": "The False Positive Eliminator", "target": "Safety Directors", "exampleEmail": "Hi Jessica, ..."},
            {"name": "Hidden Fuel Theft Detector", "target": "CFOs", "exampleEmail": "Hi Robert, ..."},
            {"name": "Fleet Tech ROI Rescue", "target": "VP Operations", "exampleEmail": "Hi David, ..."},
        ],
        "caseStudiesFound": False,
        "positioningRecommendation": "Lead with one killer use case.",
        "prospectTargetingNote": "These campaigns would target approximately 5,000-8,000 qualified prospects.",
        "reportHtml": "<h2>Positioning Assessment</h2><p><strong>Clear Value Prop</strong></p>",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def claude_payload() -> dict:
    return make_claude_payload()


@pytest.fixture
def mock_claude(claude_payload):
    """Patch the Anthropic call made by the generator; returns the AsyncMock."""
    with patch(
        "utils.campaign_generator.call_anthropic_api_with_retry",
        new=AsyncMock(return_value=json.dumps(claude_payload)),
    ) as mocked:
        yield mocked


@pytest.fixture(autouse=True)
def no_report_emails(monkeypatch):
    monkeypatch.setattr(settings, "RESEND_API_KEY", "")


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def submission() -> dict:
    return {"email": "a@b.com", "website": "https://b.com", "positioning": "unsure"}
