#!/usr/bin/env python3
"""
Job scoring endpoints - rank jobs against a resume.
"""

import logging
from fastapi import APIRouter, Depends

from ..dependencies import get_match_service
from ..services.match_service import JobMatchService
from ..models.requests import ScoreJobsRequest
from ..models.responses import ScoredJobsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.post("/score", response_model=ScoredJobsResponse)
def score_jobs(
    body: ScoreJobsRequest,
    service: JobMatchService = Depends(get_match_service)
):
    """
    Score jobs against a resume.

    Returns every job annotated with matchScore, matchLevel and
    matchDetails, sorted by score (highest first). Without resume text the
    jobs come back unscored in their original order.
    """
    jobs = [job.model_dump() for job in body.jobs]
    scored = service.score_jobs(jobs, body.resume_text)

    message = None
    if not body.resume_text:
        message = "Upload your resume to see match scores"
        logger.info(f"Returned {len(scored)} unscored jobs: no resume provided")

    return ScoredJobsResponse(success=True, count=len(scored), jobs=scored, message=message)


@router.post("/best-matches", response_model=ScoredJobsResponse)
def best_matches(
    body: ScoreJobsRequest,
    service: JobMatchService = Depends(get_match_service)
):
    """
    Get the strongest matches for a resume.

    Returns at most 8 jobs scoring 40 or more by default (see the
    matching section of config.yaml).
    """
    if not body.resume_text:
        logger.info("Best matches requested without a resume")
        return ScoredJobsResponse(
            success=True,
            count=0,
            jobs=[],
            message="Please upload your resume to see best matches"
        )

    jobs = [job.model_dump() for job in body.jobs]
    matches = service.best_matches(jobs, body.resume_text)

    return ScoredJobsResponse(success=True, count=len(matches), jobs=matches)
