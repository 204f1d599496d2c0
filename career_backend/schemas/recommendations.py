"""
Pydantic schemas for career recommendation endpoints.

These models define the request/response contracts for
POST /recommendations/generate and GET /recommendations, plus the strict
CareerRecommendation schema that language-model output must satisfy.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

JobType = Literal["full-time", "internship"]
RecommendationSource = Literal["ai_generated", "rule_based"]

JOB_TYPES = ("full-time", "internship")
DEFAULT_JOB_TYPE: JobType = "full-time"


# ============================================================================
# CORE MODEL
# ============================================================================

class CareerRecommendation(BaseModel):
    """
    A single career suggestion.

    Used both for validating language-model output and for the response
    payload. Any entry that does not satisfy this schema makes the whole
    model response unusable and triggers the rule-based fallback.
    """
    title: str = Field(
        ...,
        description="Job title phrased as a job-search query",
        min_length=1,
        examples=["Data Analyst", "Software Engineering Intern"]
    )
    match_score: StrictInt = Field(
        ...,
        description="How well this career matches the user (0-100), integers only",
        ge=0,
        le=100,
        examples=[85]
    )
    description: str = Field(
        ...,
        description="Brief description of the role"
    )
    skills: List[str] = Field(
        ...,
        description="3-5 relevant skills, most important first",
        min_length=3,
        max_length=5,
        examples=[["SQL", "Python", "Data Visualization"]]
    )
    reasoning: str = Field(
        ...,
        description="Why this career fits the user's resume and quiz answers"
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("skills")
    @classmethod
    def skills_not_blank(cls, value: List[str]) -> List[str]:
        if any(not skill.strip() for skill in value):
            raise ValueError("skills must not contain blank entries")
        return value


# ============================================================================
# REQUEST MODELS
# ============================================================================

class GenerateRecommendationsRequest(BaseModel):
    """
    Request to (re)generate the recommendation set for a user.

    Field names follow the wire contract used by the web client
    (camelCase), exposed in Python as snake_case.
    """
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(
        ...,
        alias="userId",
        description="Owner of the recommendation set; must match the token's user",
        min_length=1,
        examples=["3f1c2a8e-8d0b-4a57-9a8f-1f5f0b2d8c11"]
    )
    job_type: JobType = Field(
        DEFAULT_JOB_TYPE,
        alias="jobType",
        description="Which recommendation set to generate",
        examples=["full-time", "internship"]
    )

    @field_validator("user_id")
    @classmethod
    def user_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("userId must not be blank")
        return value


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class GenerateRecommendationsResponse(BaseModel):
    """Response for a successful generation (AI-derived or rule-based)."""
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    recommendations: List[CareerRecommendation] = Field(
        ...,
        description="Exactly 3 recommendations in ranked order",
        min_length=3,
        max_length=3
    )
    message: str = Field(
        ...,
        examples=["internship career recommendations generated successfully"]
    )
    source: RecommendationSource = Field(
        ...,
        description="Whether the set came from the language model or the fallback"
    )
    job_type: JobType = Field(..., alias="jobType")


class StoredRecommendation(BaseModel):
    """A persisted row of career_recommendations."""
    id: Optional[str] = None
    user_id: str
    career_title: str
    match_score: int
    description: Optional[str] = None
    recommended_skills: List[str] = Field(default_factory=list)
    reasoning: Optional[str] = None
    job_type: JobType
    created_at: str


class RecommendationListResponse(BaseModel):
    """Response for GET /recommendations."""
    model_config = ConfigDict(populate_by_name=True)

    recommendations: List[StoredRecommendation]
    job_type: JobType = Field(..., alias="jobType")


class ErrorResponse(BaseModel):
    """Error body shared by all recommendation endpoints."""
    error: str = Field(..., examples=["Failed to generate career recommendations"])
    details: Optional[str] = Field(None, examples=["Failed to fetch profile: timeout"])
