"""
Filter extraction - turns a chat message into job list filter changes.
"""
import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.llm.interfaces import LLMProvider
from core.llm.schema_models import FILTER_EXTRACTION_SCHEMA
from core.llm.system_prompts import FILTER_EXTRACTION_PROMPT, FILTER_EXTRACTION_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

FILTERS_CLEARED_REPLY = "All filters have been cleared."
NO_FILTER_CHANGES_REPLY = "I couldn't detect any filter changes."


class FilterAction(BaseModel):
    """
    Structured instruction to change the active job list filters.

    ``None`` means "leave unchanged"; ``clear=True`` overrides every other field.
    Serialised with camelCase keys (workMode, jobType, location, matchScore, clear).
    """
    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)

    work_mode: Optional[Literal["remote", "hybrid", "onsite"]] = Field(default=None, alias="workMode")
    job_type: Optional[Literal["full_time", "part_time", "contract", "internship"]] = Field(
        default=None, alias="jobType"
    )
    location: Optional[str] = None
    match_score: Optional[Literal["high", "medium", "all"]] = Field(default=None, alias="matchScore")
    clear: bool = False

    @field_validator("clear", mode="before")
    @classmethod
    def _null_clear_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("location", mode="before")
    @classmethod
    def _blank_location_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def build_filter_reply(filters: FilterAction) -> str:
    """Describe the filter change in one sentence. No model call."""
    if filters.clear:
        return FILTERS_CLEARED_REPLY

    parts = []
    if filters.work_mode:
        parts.append(filters.work_mode)
    if filters.job_type:
        parts.append(filters.job_type.replace("_", " ", 1))
    if filters.location:
        parts.append(f"in {filters.location}")
    if filters.match_score == "high":
        parts.append("high match score jobs")

    if not parts:
        return NO_FILTER_CHANGES_REPLY
    return f"Updated filters: {', '.join(parts)}."


class FilterExtractor:
    """Single-shot structured extraction of filter intent."""

    def __init__(self, llm: LLMProvider, temperature: Optional[float] = None):
        self.llm = llm
        self.temperature = temperature

    def extract(self, message: str) -> FilterAction:
        """
        Extract filter changes from a message. Never raises.

        Returns an empty FilterAction (no change) when the call fails or the
        response does not validate.
        """
        try:
            data = self.llm.extract_structured_data(
                FILTER_EXTRACTION_PROMPT.format(message=message),
                FILTER_EXTRACTION_SCHEMA,
                system_prompt=FILTER_EXTRACTION_SYSTEM_PROMPT,
                temperature=self.temperature
            )
            return FilterAction.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Filter extraction returned an invalid payload: {e.error_count()} errors")
        except Exception as e:
            logger.warning(f"Filter extraction failed: {e}")
        return FilterAction()
