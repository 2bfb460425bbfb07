#!/usr/bin/env python3
"""
Match Scoring Service - resume/job fit scores.

Each job is scored by one structured model call. When the call fails,
times out, or returns something that does not validate, a deterministic
keyword heuristic scores the pair instead, so scoring always produces a
well-formed MatchResult.

Batch scoring fans out over a bounded thread pool and returns jobs ranked
by score (highest first), ties kept in input order.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Optional, Sequence
import logging

from core.config_loader import MatchingConfig
from core.llm.interfaces import LLMProvider
from core.llm.schema_models import MATCH_SCORING_SCHEMA
from core.llm.system_prompts import MATCH_SCORING_PROMPT, MATCH_SCORING_SYSTEM_PROMPT
from core.scorer.fallback import keyword_fallback
from core.scorer.models import MatchResult, ScoredJob

logger = logging.getLogger(__name__)

UNABLE_TO_SCORE_EXPLANATION = "Unable to calculate match score"
NO_RESUME_EXPLANATION = "Upload your resume to see match scores"

HIGH_MATCH_THRESHOLD = 70
MEDIUM_MATCH_THRESHOLD = 40


def match_level(score: int) -> str:
    """Bucket a score into high (>70), medium (>=40) or low."""
    if score > HIGH_MATCH_THRESHOLD:
        return "high"
    if score >= MEDIUM_MATCH_THRESHOLD:
        return "medium"
    return "low"


def unscored_jobs(jobs: Sequence[Mapping[str, Any]]) -> List[ScoredJob]:
    """Annotate jobs with a zero score when there is no resume to compare against."""
    return [
        ScoredJob(job=dict(job), match=MatchResult(score=0, explanation=NO_RESUME_EXPLANATION), index=i)
        for i, job in enumerate(jobs)
    ]


class MatchScorer:
    """
    Scores jobs against a resume.

    Thread safe: holds no mutable state between calls.
    """

    def __init__(self, llm: LLMProvider, config: Optional[MatchingConfig] = None):
        self.llm = llm
        self.config = config or MatchingConfig()

    def score_job(self, job: Optional[Mapping[str, Any]], resume_text: Optional[str]) -> MatchResult:
        """
        Score one job against a resume. Never raises.

        Args:
            job: Job mapping with at least title, company and description.
            resume_text: Plain resume text.

        Returns:
            MatchResult. Zero score without a model call when either input is missing.
        """
        if not resume_text or job is None:
            return MatchResult(score=0, explanation=UNABLE_TO_SCORE_EXPLANATION)

        prompt = MATCH_SCORING_PROMPT.format(
            job_title=job.get("title") or "",
            company=job.get("company") or "",
            job_description=job.get("description") or "",
            resume_text=resume_text[:self.config.resume_char_limit],
        )

        try:
            data = self.llm.extract_structured_data(
                prompt,
                MATCH_SCORING_SCHEMA,
                system_prompt=MATCH_SCORING_SYSTEM_PROMPT,
                temperature=self.config.temperature
            )
            return MatchResult.model_validate(data)
        except Exception as e:
            logger.warning(f"AI match scoring failed for '{job.get('title')}', using keyword fallback: {e}")
            return keyword_fallback(job, resume_text)

    def batch_score(
        self,
        jobs: Sequence[Optional[Mapping[str, Any]]],
        resume_text: Optional[str]
    ) -> List[ScoredJob]:
        """
        Score every job and rank them.

        Returns:
            One ScoredJob per input job, sorted by score descending; equal
            scores keep their input order.
        """
        if not jobs:
            return []

        indexed = list(enumerate(jobs))
        workers = min(self.config.max_concurrency, len(indexed))

        def _score(item) -> ScoredJob:
            index, job = item
            payload = dict(job) if job is not None else {}
            return ScoredJob(job=payload, match=self.score_job(job, resume_text), index=index)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="match-scorer") as executor:
            scored = list(executor.map(_score, indexed))

        scored.sort(key=lambda s: (-s.match_score, s.index))
        logger.info(f"Scored {len(scored)} jobs with up to {workers} concurrent calls")
        return scored

    def best_matches(
        self,
        jobs: Sequence[Mapping[str, Any]],
        resume_text: Optional[str],
        min_score: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[ScoredJob]:
        """Top-ranked jobs scoring at least ``min_score``."""
        min_score = self.config.best_match_min_score if min_score is None else min_score
        limit = self.config.best_match_limit if limit is None else limit

        ranked = self.batch_score(jobs, resume_text)
        return [s for s in ranked if s.match_score >= min_score][:limit]
