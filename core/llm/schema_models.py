"""
Pydantic models for JSON schemas used in structured completions.

This module provides:
1. Wire models for the filter extraction and match scoring responses
2. Runtime JSON schema generation for OpenAI structured output

All schemas follow OpenAI's structured output requirements with strict validation:
every field is required and nullable fields are expressed as Optional.
Domain models with defaults live next to the code that consumes them.
"""
from typing import List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict


# ============================================================================
# FILTER EXTRACTION SCHEMA
# ============================================================================

class FilterExtraction(BaseModel):
    """Job list filter changes requested in a chat message."""
    model_config = ConfigDict(extra='forbid')

    workMode: Optional[Literal["remote", "hybrid", "onsite"]] = Field(
        description="Requested work mode, or null if not mentioned"
    )
    jobType: Optional[Literal["full_time", "part_time", "contract", "internship"]] = Field(
        description="Requested contract type, or null if not mentioned"
    )
    location: Optional[str] = Field(description="Requested location, or null if not mentioned")
    matchScore: Optional[Literal["high", "medium", "all"]] = Field(
        description="Requested match score tier, or null if not mentioned"
    )
    clear: bool = Field(description="True when the user asks to remove all filters")


FILTER_EXTRACTION_SCHEMA = {
    "name": "filter_extraction_schema",
    "strict": True,
    "schema": FilterExtraction.model_json_schema()
}


# ============================================================================
# MATCH SCORING SCHEMA
# ============================================================================

class MatchAnalysis(BaseModel):
    """Resume to job posting fit analysis."""
    model_config = ConfigDict(extra='forbid')

    score: int = Field(description="Overall match score between 0 and 100")
    matchingSkills: List[str] = Field(description="Skills from the resume that match the job")
    relevantExperience: List[str] = Field(
        description="Relevant work experience or projects from the resume"
    )
    keywordOverlap: List[str] = Field(
        description="Important keywords that appear in both resume and job description"
    )
    explanation: str = Field(description="Explanation of the match score")


MATCH_SCORING_SCHEMA = {
    "name": "match_scoring_schema",
    "strict": True,
    "schema": MatchAnalysis.model_json_schema()
}
