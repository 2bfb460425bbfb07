#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from fastapi import Request

from core.app_context import AppContext
from core.assistant import AssistantOrchestrator
from core.scorer import MatchScorer
from .services.match_service import JobMatchService


def get_app_context(request: Request) -> AppContext:
    """
    FastAPI dependency returning the application context built at startup.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(context: AppContext = Depends(get_app_context)):
            ...
    """
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Application context is not initialised")
    return context


def get_assistant(request: Request) -> AssistantOrchestrator:
    return get_app_context(request).assistant


def get_match_scorer(request: Request) -> MatchScorer:
    return get_app_context(request).match_scorer


def get_match_service(request: Request) -> JobMatchService:
    return JobMatchService(get_match_scorer(request))
