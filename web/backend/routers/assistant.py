#!/usr/bin/env python3
"""
Assistant endpoints - chat with the job assistant.
"""

import logging
from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.assistant import AssistantOrchestrator
from ..config import get_config
from ..dependencies import get_assistant
from ..exceptions import InvalidRequestException
from ..models.requests import ChatRequest
from ..models.responses import ChatResponse, ClearHistoryResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/assistant", tags=["assistant"])

DEFAULT_USER_ID = "test-user"


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": str(exc), "type": "RateLimitExceeded"}
    )


def _chat_rate_limit() -> str:
    return get_config().web.chat_rate_limit


@router.post("/chat", response_model=ChatResponse)
@limiter.limit(_chat_rate_limit)
def chat(
    request: Request,
    body: ChatRequest,
    user_id: str = Header(default=DEFAULT_USER_ID),
    assistant: AssistantOrchestrator = Depends(get_assistant)
):
    """
    Send a message to the assistant.

    Returns the reply and, when the message asked to change the job list
    filters, the filter changes for the UI to apply. The assistant always
    answers, falling back to a fixed message when the model is unavailable.
    """
    if not body.message or not body.message.strip():
        raise InvalidRequestException("Message is required")

    result = assistant.process_query(user_id, body.message)

    return ChatResponse(
        success=True,
        reply=result.reply,
        filter_actions=result.filter_actions.to_payload() if result.filter_actions else None
    )


@router.delete("/history", response_model=ClearHistoryResponse)
def clear_history(
    user_id: str = Header(default=DEFAULT_USER_ID),
    assistant: AssistantOrchestrator = Depends(get_assistant)
):
    """Forget the conversation so far for the calling user."""
    assistant.clear_history(user_id)
    logger.info(f"Cleared assistant history for {user_id}")

    return ClearHistoryResponse(success=True, message="Conversation history cleared")
