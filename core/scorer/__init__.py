#!/usr/bin/env python3
"""
Scoring Module - resume/job match scoring.

Public API:
- MatchScorer: score_job, batch_score and best_matches
- MatchResult: structured score for one job/resume pair
- ScoredJob: job mapping annotated with its MatchResult

Modules:
- models.py: Data structures (MatchResult, ScoredJob)
- fallback.py: Deterministic keyword heuristic used when the model fails
- service.py: MatchScorer orchestrator
"""

from core.scorer.models import MatchResult, ScoredJob
from core.scorer.service import MatchScorer, match_level, unscored_jobs

__all__ = ['MatchScorer', 'MatchResult', 'ScoredJob', 'match_level', 'unscored_jobs']
