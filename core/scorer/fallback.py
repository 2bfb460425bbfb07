"""
Keyword fallback used when the model cannot score a match.

Deterministic and total: it never raises for any job/resume pair.
"""
from typing import Any, Mapping, Optional

from core.scorer.models import MatchResult

TECH_KEYWORDS = (
    'react', 'node', 'javascript', 'python', 'java', 'typescript',
    'sql', 'mongodb', 'aws', 'docker', 'kubernetes', 'api',
    'frontend', 'backend', 'fullstack', 'devops', 'ml', 'ai',
)

BASE_SCORE = 20
POINTS_PER_KEYWORD = 10


def keyword_fallback(job: Optional[Mapping[str, Any]], resume_text: Optional[str]) -> MatchResult:
    """Score by shared vocabulary keywords (case-insensitive substring match)."""
    resume_lower = (resume_text or "").lower()
    description_lower = str((job or {}).get("description") or "").lower()

    matching = [
        keyword for keyword in TECH_KEYWORDS
        if keyword in resume_lower and keyword in description_lower
    ]

    return MatchResult(
        score=min(100, len(matching) * POINTS_PER_KEYWORD + BASE_SCORE),
        matching_skills=matching,
        relevant_experience=["Basic keyword analysis performed"],
        keyword_overlap=list(matching),
        explanation=(
            f"Found {len(matching)} matching keywords between your resume and this job posting."
        ),
    )
