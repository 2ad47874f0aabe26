"""
Result Renderer view models.

Turns an AnalysisData payload into the flat values the results template
shows. Only reportHtml reaches the page as markup, and only after it has been
through the sanitizer; everything else is auto-escaped by Jinja2.
"""

import re
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from markupsafe import Markup

from models import AnalysisData, CampaignIdea, Persona
from utils.sanitizer import sanitize_html

DEFAULT_PROSPECT_COUNT = "10,000+"
_PROSPECT_COUNT_RE = re.compile(r"(\d+,\d+)")


def split_assessment(assessment: str) -> Tuple[str, str]:
    """Split "<headline>: <detail>" on the first colon; detail is "" when there is none."""
    headline, _, detail = (assessment or "").partition(":")
    return headline.strip(), detail.strip()


def extract_prospect_count(note: str) -> str:
    match = _PROSPECT_COUNT_RE.search(note or "")
    return match.group(1) if match else DEFAULT_PROSPECT_COUNT


@dataclass
class ResultsView:
    company_name: str
    positioning_input: str
    headline: str
    detail: str
    industry: str
    company_size: str
    characteristics: List[str] = field(default_factory=list)
    personas: List[Persona] = field(default_factory=list)
    campaigns: List[CampaignIdea] = field(default_factory=list)
    prospect_count: str = DEFAULT_PROSPECT_COUNT
    case_studies_found: bool = True
    recommendation: str = ""
    report_html: Markup = Markup("")

    @property
    def persona_count(self) -> int:
        return len(self.personas)

    @property
    def campaign_count(self) -> int:
        return len(self.campaigns)


def build_results_view(data: Union[AnalysisData, dict]) -> ResultsView:
    """
    Build the results page view model.

    Accepts either a validated AnalysisData or the raw ``data`` dict of a
    success envelope (as received by CampaignGeneratorClient).
    """
    if not isinstance(data, AnalysisData):
        data = AnalysisData.model_validate(data)

    analysis = data.analysis
    headline, detail = split_assessment(analysis.positioningAssessmentOutput)

    return ResultsView(
        company_name=data.companyName,
        positioning_input=data.positioningInput.value,
        headline=headline,
        detail=detail,
        industry=analysis.idealCustomerProfile.industry,
        company_size=analysis.idealCustomerProfile.companySize,
        characteristics=list(analysis.idealCustomerProfile.characteristics),
        personas=list(analysis.personas),
        campaigns=list(analysis.campaigns),
        prospect_count=extract_prospect_count(analysis.prospectTargetingNote),
        case_studies_found=analysis.caseStudiesFound,
        recommendation=analysis.positioningRecommendation,
        # Sanitized again at the render boundary: data may come from a remote relay
        report_html=Markup(sanitize_html(analysis.reportHtml)),
    )
