#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ChatRequest(BaseModel):
    """Chat message sent to the assistant."""
    message: Optional[str] = Field(None, description="User message")


class JobPosting(BaseModel):
    """
    Job record to score.

    Only title, company and description are required; any other field
    (location, contract_type, ids, ...) is passed through untouched.
    """
    model_config = ConfigDict(extra='allow')

    title: str
    company: str
    description: str


class ScoreJobsRequest(BaseModel):
    """Jobs to score against a resume."""
    model_config = ConfigDict(populate_by_name=True)

    jobs: List[JobPosting] = Field(default_factory=list, description="Jobs to score")
    resume_text: Optional[str] = Field(
        None,
        alias="resumeText",
        description="Plain resume text; omit to get unscored jobs"
    )
