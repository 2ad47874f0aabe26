from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PositioningClarity(str, Enum):
    YES = "yes"
    NO = "no"
    UNSURE = "unsure"


# Request
class CampaignRequest(BaseModel):
    email: str
    website: str
    positioning: PositioningClarity

    @field_validator("email", "website")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


# Analysis models (camelCase on the wire)
class IdealCustomerProfile(BaseModel):
    industry: str = ""
    companySize: str = ""
    characteristics: List[str] = Field(default_factory=list)


class Persona(BaseModel):
    title: str
    painPoints: str = ""

    @field_validator("painPoints", mode="before")
    @classmethod
    def join_pain_points(cls, value):
        # Claude sometimes returns the pain points as a list
        if isinstance(value, list):
            return ", ".join(str(item) for item in value)
        return value


class CampaignIdea(BaseModel):
    name: str
    target: str = ""
    exampleEmail: str = ""


class CampaignAnalysis(BaseModel):
    model_config = ConfigDict(extra="ignore")

    positioningAssessmentOutput: str
    reportHtml: str = ""
    idealCustomerProfile: IdealCustomerProfile = Field(default_factory=IdealCustomerProfile)
    personas: List[Persona] = Field(default_factory=list)
    campaigns: List[CampaignIdea] = Field(default_factory=list)
    caseStudiesFound: bool = True
    positioningRecommendation: str = ""
    prospectTargetingNote: str = ""


class AnalysisData(BaseModel):
    analysis: CampaignAnalysis
    companyName: str
    positioningInput: PositioningClarity


# Response envelope
class CampaignResponse(BaseModel):
    success: bool
    data: Optional[AnalysisData] = None
    error: Optional[str] = None
