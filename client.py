"""
Form Collector for the Campaign Generator.

Validates the three submission fields, sends exactly one request to the relay
and resolves to exactly one terminal view state. The HTML page reuses
validate_fields() and outcome_from_envelope() so the browser flow and this
client agree on every message.

Usage:
    python client.py --email jane@acme.io --website acme.io --positioning unsure
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

from models import PositioningClarity

logger = logging.getLogger(__name__)

GENERATE_CAMPAIGNS_PATH = "/api/generate-campaigns"

VALIDATION_MESSAGE = "Please fill in all fields"
WORK_EMAIL_MESSAGE = "Please enter a work email address"
SERVER_FALLBACK_MESSAGE = "Something went wrong. Please try again."
NETWORK_ERROR_MESSAGE = "Network error. Please try again."

FREE_EMAIL_DOMAINS = frozenset(
    {"gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "aol.com"}
)

POSITIONING_CHOICES = [
    (PositioningClarity.YES.value, "Yes"),
    (PositioningClarity.NO.value, "No"),
    (PositioningClarity.UNSURE.value, "Not sure"),
]


class ViewState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SHOWING_RESULTS = "showing_results"
    SHOWING_ERROR = "showing_error"


@dataclass
class SubmissionOutcome:
    state: ViewState
    data: Optional[dict] = None
    error: Optional[str] = None


def validate_fields(email: str, website: str, positioning: str) -> Optional[str]:
    """Return the validation prompt for a submission, or None when it may be sent."""
    if not (email or "").strip() or not (website or "").strip() or not (positioning or "").strip():
        return VALIDATION_MESSAGE

    _, at, domain = email.strip().partition("@")
    if at and domain.lower() in FREE_EMAIL_DOMAINS:
        return WORK_EMAIL_MESSAGE

    return None


def outcome_from_envelope(payload: Any) -> SubmissionOutcome:
    """Map a parsed relay envelope onto a terminal view state."""
    if isinstance(payload, dict) and payload.get("success"):
        return SubmissionOutcome(state=ViewState.SHOWING_RESULTS, data=payload.get("data"))

    error = payload.get("error") if isinstance(payload, dict) else None
    return SubmissionOutcome(
        state=ViewState.SHOWING_ERROR, error=error or SERVER_FALLBACK_MESSAGE
    )


class CampaignGeneratorClient:
    """
    Python client for POST /api/generate-campaigns.

    State machine: idle -> submitting -> {showing_results | showing_error}.
    A failed validation goes straight to showing_error without a request.
    Nothing is retried; a new submit() starts again from idle.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.state = ViewState.IDLE
        self.outcome: Optional[SubmissionOutcome] = None

    def submit(self, email: str, website: str, positioning: str) -> SubmissionOutcome:
        self.state = ViewState.IDLE
        self.outcome = None

        error = validate_fields(email, website, positioning)
        if error:
            return self._finish(SubmissionOutcome(state=ViewState.SHOWING_ERROR, error=error))

        self.state = ViewState.SUBMITTING
        try:
            response = self.session.post(
                f"{self.base_url}{GENERATE_CAMPAIGNS_PATH}",
                json={"email": email, "website": website, "positioning": positioning},
                timeout=self.timeout,
            )
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Campaign request failed: {str(e)}")
            return self._finish(
                SubmissionOutcome(state=ViewState.SHOWING_ERROR, error=NETWORK_ERROR_MESSAGE)
            )

        return self._finish(outcome_from_envelope(payload))

    def _finish(self, outcome: SubmissionOutcome) -> SubmissionOutcome:
        self.state = outcome.state
        self.outcome = outcome
        return outcome


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Request a campaign analysis")
    parser.add_argument("--email", required=True)
    parser.add_argument("--website", required=True)
    parser.add_argument(
        "--positioning", required=True, choices=[value for value, _ in POSITIONING_CHOICES]
    )
    parser.add_argument("--base-url", default="http://localhost:8000")
    args = parser.parse_args(argv)

    print("⏳ Generating campaigns (usually 15-20 seconds)...")
    client = CampaignGeneratorClient(base_url=args.base_url)
    outcome = client.submit(args.email, args.website, args.positioning)

    if outcome.state is ViewState.SHOWING_RESULTS:
        print(json.dumps(outcome.data, indent=2))
        return 0

    print(f"❌ {outcome.error}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
