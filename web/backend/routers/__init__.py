"""API route handlers."""

from .assistant import router as assistant_router
from .jobs import router as jobs_router
