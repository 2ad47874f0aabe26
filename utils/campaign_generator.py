"""
Campaign generation for the relay endpoint.

Builds the prompt for one submission, calls Claude, parses the JSON it
returns and normalises it into AnalysisData. Errors propagate to the route,
which turns them into the success:false envelope.
"""

import logging
import re
from urllib.parse import urlparse

from pydantic import ValidationError

from analysis_prompt import get_campaign_prompt
from models import AnalysisData, CampaignAnalysis, CampaignRequest, PositioningClarity
from templating import render_fragment
from utils.anthropic_client import call_anthropic_api_with_retry
from utils.parsing.json import repair_and_parse_json
from utils.sanitizer import sanitize_html

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^https?://", flags=re.IGNORECASE)


def normalize_website(website: str) -> str:
    """Prefix https:// when the prospect typed a bare domain."""
    website = (website or "").strip()
    if not website or _SCHEME_RE.match(website):
        return website
    return "https://" + website.lstrip("/")


def company_from_website(website: str) -> str:
    """
    Fallback company name: the website host without a leading "www.".

    https://www.acme.io/pricing -> acme.io
    """
    host = urlparse(normalize_website(website)).hostname or website
    if host.startswith("www."):
        host = host[len("www."):]
    return host


def build_analysis_data(
    payload: dict, website: str, positioning: PositioningClarity
) -> AnalysisData:
    """
    Normalise Claude's parsed JSON into AnalysisData.

    reportHtml is sanitized when Claude supplied one; otherwise it is rendered
    from the structured fields so the renderer always has a fragment.

    Raises:
        ValueError: If the payload lacks the fields a results page needs
    """
    payload = dict(payload)
    company_name = str(payload.pop("companyName", "") or "").strip()
    if not company_name:
        company_name = company_from_website(website)

    try:
        analysis = CampaignAnalysis.model_validate(payload)
    except ValidationError as e:
        raise ValueError(
            f"Claude's analysis is missing required fields ({e.error_count()} errors)"
        ) from e

    if analysis.reportHtml.strip():
        report_html = sanitize_html(analysis.reportHtml)
    else:
        logger.info(f"No reportHtml from Claude for {website}; rendering from fields")
        report_html = render_report_html(analysis, company_name)

    return AnalysisData(
        analysis=analysis.model_copy(update={"reportHtml": report_html}),
        companyName=company_name,
        positioningInput=positioning,
    )


def render_report_html(analysis: CampaignAnalysis, company_name: str) -> str:
    headline, _, detail = analysis.positioningAssessmentOutput.partition(":")
    fragment = render_fragment(
        "_report.html",
        analysis=analysis,
        company_name=company_name,
        headline=headline.strip(),
        detail=detail.strip(),
    )
    return sanitize_html(fragment)


async def generate_campaign_analysis(request: CampaignRequest) -> AnalysisData:
    """
    Generates the campaign analysis for one submission.

    Args:
        request: A validated submission

    Returns:
        AnalysisData ready to be wrapped in a success envelope

    Raises:
        anthropic.APIError: Upstream failure after the bounded retry
        ValueError: Claude's output could not be parsed into an analysis
    """
    website = normalize_website(request.website)
    prompt = get_campaign_prompt(website, request.positioning.value)

    logger.info(f"Generating campaigns for {website} (positioning={request.positioning.value})")
    response_text = await call_anthropic_api_with_retry(prompt)

    payload = repair_and_parse_json(response_text)
    data = build_analysis_data(payload, website, request.positioning)

    logger.info(
        f"Generated {len(data.analysis.campaigns)} campaigns for {data.companyName}"
    )
    return data
