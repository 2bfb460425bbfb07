#!/usr/bin/env python3
"""
Scoring Models - Data structures for match scoring results.
"""

import math
from typing import List, Dict, Any
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_EXPLANATION = "No explanation available"


class MatchResult(BaseModel):
    """Fit between one resume and one job posting. Score is always within 0-100."""
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    score: int = Field(default=0, ge=0, le=100)
    matching_skills: List[str] = Field(default_factory=list, alias="matchingSkills")
    relevant_experience: List[str] = Field(default_factory=list, alias="relevantExperience")
    keyword_overlap: List[str] = Field(default_factory=list, alias="keywordOverlap")
    explanation: str = NO_EXPLANATION

    @field_validator("score", mode="before")
    @classmethod
    def _clamp_score(cls, value: Any) -> int:
        if value is None or value == "":
            return 0
        if isinstance(value, bool):
            raise ValueError("score must be a number")
        try:
            number = float(value)
        except TypeError:
            raise ValueError(f"score must be a number, got {type(value).__name__}")
        if math.isnan(number):
            raise ValueError("score must be a number")
        return int(round(min(100.0, max(0.0, number))))

    @field_validator("matching_skills", "relevant_experience", "keyword_overlap", mode="before")
    @classmethod
    def _default_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [str(item) for item in value]
        return value

    @field_validator("explanation", mode="before")
    @classmethod
    def _default_explanation(cls, value: Any) -> Any:
        return value or NO_EXPLANATION

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


@dataclass
class ScoredJob:
    """A job mapping annotated with its match result."""
    job: Dict[str, Any]
    match: MatchResult
    index: int = 0

    @property
    def match_score(self) -> int:
        return self.match.score

    def to_payload(self) -> Dict[str, Any]:
        """Job fields passed through untouched, plus matchScore and matchDetails."""
        return {
            **self.job,
            "matchScore": self.match.score,
            "matchDetails": self.match.to_payload(),
        }
