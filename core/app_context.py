from dataclasses import dataclass

from core.config_loader import AppConfig, LlmConfig
from core.llm.interfaces import LLMProvider
from core.llm.openai_service import OpenAIService
from core.assistant import AssistantOrchestrator, SessionStore
from core.scorer import MatchScorer


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Built once at startup and closed at shutdown. The session store lives
    exactly as long as the context.
    """
    config: AppConfig
    ai_service: LLMProvider
    session_store: SessionStore
    assistant: AssistantOrchestrator
    match_scorer: MatchScorer

    @classmethod
    def build(cls, config: AppConfig, ai_service: LLMProvider = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            ai_service: Optional provider to use instead of building an OpenAIService

        Returns:
            Fully wired AppContext instance
        """
        if ai_service is None:
            ai_service = cls._build_ai_service(config.llm)

        session_store = SessionStore(history_limit=config.assistant.history_limit)
        assistant = AssistantOrchestrator(
            llm=ai_service,
            session_store=session_store,
            config=config.assistant
        )
        match_scorer = MatchScorer(llm=ai_service, config=config.matching)

        return cls(
            config=config,
            ai_service=ai_service,
            session_store=session_store,
            assistant=assistant,
            match_scorer=match_scorer
        )

    @staticmethod
    def _build_ai_service(llm_config: LlmConfig) -> OpenAIService:
        """Build OpenAI service from LLM configuration."""
        model_config = {
            'model': llm_config.model,
        }

        return OpenAIService(
            base_url=llm_config.base_url,
            api_key=llm_config.api_key,
            model_config=model_config,
            timeout_seconds=llm_config.request_timeout_seconds
        )

    def close(self) -> None:
        self.session_store.close()
