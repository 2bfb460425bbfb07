#!/usr/bin/env python3
"""
Match service - business logic for job scoring endpoints.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.scorer import MatchScorer, ScoredJob, match_level, unscored_jobs

logger = logging.getLogger(__name__)


class JobMatchService:
    """Service for ranking jobs against a resume."""

    def __init__(self, scorer: MatchScorer):
        self.scorer = scorer

    def score_jobs(
        self,
        jobs: Sequence[Mapping[str, Any]],
        resume_text: Optional[str]
    ) -> List[Dict[str, Any]]:
        """
        Score and rank jobs.

        Args:
            jobs: Job mappings (title, company, description required).
            resume_text: Resume text, or None when the user has not uploaded one.

        Returns:
            Job payloads with matchScore, matchLevel and matchDetails,
            highest score first. Without a resume every job gets a zero
            score and keeps its order.
        """
        if not resume_text:
            return [self._to_payload(s) for s in unscored_jobs(jobs)]

        scored = self.scorer.batch_score(jobs, resume_text)
        return [self._to_payload(s) for s in scored]

    def best_matches(
        self,
        jobs: Sequence[Mapping[str, Any]],
        resume_text: str
    ) -> List[Dict[str, Any]]:
        """
        Get the strongest matches for a resume.

        Returns:
            Up to the configured limit of job payloads scoring at least the
            configured minimum.
        """
        best = self.scorer.best_matches(jobs, resume_text)
        logger.info(f"Best matches: {len(best)} of {len(jobs)} jobs")
        return [self._to_payload(s) for s in best]

    @staticmethod
    def _to_payload(scored: ScoredJob) -> Dict[str, Any]:
        payload = scored.to_payload()
        payload["matchLevel"] = match_level(scored.match_score)
        return payload
