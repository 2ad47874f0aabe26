from dataclasses import dataclass
import asyncio
import logging

import anthropic
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from client import (
    POSITIONING_CHOICES,
    VALIDATION_MESSAGE,
    ViewState,
    outcome_from_envelope,
    validate_fields,
)
from config import settings
from models import CampaignRequest, CampaignResponse
from templating import templates
from utils.campaign_generator import generate_campaign_analysis
from utils.email_report import send_report_email
from views import build_results_view

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to generate analysis. Please try again."
PROVIDER_ERROR = "AI analysis service failed. Please try again."
PARSE_ERROR = "We couldn't read the AI's analysis. Please try again."
TIMEOUT_ERROR = "Analysis took too long. Please try again."

# Create router
router = APIRouter()


@dataclass
class RelayOutcome:
    status_code: int
    response: CampaignResponse
    emailed: bool = False


def envelope(response: CampaignResponse, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        content=response.model_dump(mode="json", exclude_none=True),
        status_code=status_code,
    )


async def run_relay(request: CampaignRequest) -> RelayOutcome:
    """
    Runs one generation and always resolves to an envelope.

    Every failure is logged here and converted to success=false; nothing
    raised by the provider call reaches the client.
    """
    logger.info(
        f"Lead received: email={request.email} website={request.website} "
        f"positioning={request.positioning.value}"
    )

    try:
        data = await asyncio.wait_for(
            generate_campaign_analysis(request), timeout=settings.RELAY_TIMEOUT
        )
    except asyncio.TimeoutError:
        logger.error(f"⏱️ Generation timeout after {settings.RELAY_TIMEOUT}s for {request.website}")
        return RelayOutcome(504, CampaignResponse(success=False, error=TIMEOUT_ERROR))
    except anthropic.AnthropicError as e:
        logger.exception(f"Anthropic API failure for {request.website}: {str(e)}")
        return RelayOutcome(502, CampaignResponse(success=False, error=PROVIDER_ERROR))
    except ValueError as e:
        logger.exception(f"Analysis parsing failed for {request.website}: {str(e)}")
        return RelayOutcome(502, CampaignResponse(success=False, error=PARSE_ERROR))
    except Exception as e:
        logger.exception(f"Unexpected failure for {request.website}: {str(e)}")
        return RelayOutcome(500, CampaignResponse(success=False, error=GENERIC_ERROR))

    emailed = await asyncio.to_thread(
        send_report_email, request.email, data.companyName, data.analysis.reportHtml
    )
    return RelayOutcome(200, CampaignResponse(success=True, data=data), emailed=emailed)


# ======================
# JSON API
# ======================

@router.post("/api/generate-campaigns")
async def generate_campaigns(request: CampaignRequest):
    """
    Generates three cold email campaign ideas for the submitted website.

    Returns {"success": true, "data": {"analysis": {...}, "companyName": ...}}
    or {"success": false, "error": "..."}. Typical latency is 15-20 seconds.
    """
    outcome = await run_relay(request)
    return envelope(outcome.response, outcome.status_code)


@router.get("/api/generate-campaigns")
async def generate_campaigns_status():
    return {"message": "Campaign Generator API is running"}


@router.get("/health")
async def health_check():
    return {"status": "healthy"}


# ======================
# HTML pages
# ======================

def render_form(
    request: Request,
    *,
    email: str = "",
    website: str = "",
    positioning: str = "",
    error: str = "",
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "email": email,
            "website": website,
            "positioning": positioning,
            "positioning_choices": POSITIONING_CHOICES,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return render_form(request)


@router.post("/", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    email: str = Form(""),
    website: str = Form(""),
    positioning: str = Form(""),
):
    """Browser form submit: validate, run the relay once, render results or the error banner."""
    fields = {"email": email, "website": website, "positioning": positioning}

    error = validate_fields(email, website, positioning)
    if error:
        return render_form(request, **fields, error=error, status_code=400)

    try:
        campaign_request = CampaignRequest(**fields)
    except ValidationError:
        return render_form(request, **fields, error=VALIDATION_MESSAGE, status_code=400)

    relay = await run_relay(campaign_request)
    outcome = outcome_from_envelope(
        relay.response.model_dump(mode="json", exclude_none=True)
    )

    if outcome.state is not ViewState.SHOWING_RESULTS:
        return render_form(request, **fields, error=outcome.error, status_code=relay.status_code)

    return templates.TemplateResponse(
        request,
        "results.html",
        {
            "view": build_results_view(outcome.data),
            "email": email,
            "emailed": relay.emailed,
        },
    )
