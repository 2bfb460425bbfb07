#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class ChatResponse(BaseModel):
    """Assistant reply with optional filter changes."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "reply": "Updated filters: remote, in Berlin.",
                "filterActions": {
                    "workMode": "remote",
                    "jobType": None,
                    "location": "Berlin",
                    "matchScore": None,
                    "clear": False
                }
            }
        }
    )

    success: bool
    reply: str
    filter_actions: Optional[Dict[str, Any]] = Field(None, alias="filterActions")


class ClearHistoryResponse(BaseModel):
    """Response after clearing conversation history."""
    success: bool
    message: str


class ScoredJobsResponse(BaseModel):
    """Jobs annotated with matchScore, matchLevel and matchDetails."""
    success: bool
    count: int
    jobs: List[Dict[str, Any]]
    message: Optional[str] = None
