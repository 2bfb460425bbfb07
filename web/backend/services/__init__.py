"""Business logic services."""

from .match_service import JobMatchService
