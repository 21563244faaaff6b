"""Agno agent service for the Gemini chat model.

The agent is stateless: each request carries only the
user's latest text, with no stored session, history or knowledge base.
The service is created once per process and handed to every
conversation that needs a reply.
"""

import logging

from agno.agent import Agent
from agno.models.google import Gemini

from gemini_chatbox.agent.config import AgentConfig, get_agent_config

logger = logging.getLogger(__name__)


class ModelResponseError(Exception):
    """Raised when the model run fails or produces no text content."""

    pass


def _run_failed(response: object) -> bool:
    # Agno reports some provider failures through the run status instead of raising
    status = getattr(response, "status", None)
    return str(getattr(status, "value", status)).upper() == "ERROR"


class AgentService:
    """Service for managing the Gemini chat agent.

    Wraps Agno's Agent with:
    - Gemini model configured from AgentConfig
    - Single-shot requests without conversation history
    - Singleton lifecycle management
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the agent service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()
        logger.info(
            f"Agent service ready (model={self._config.model_name}, "
            f"api_key_set={self._config.has_api_key})"
        )

    @property
    def config(self) -> AgentConfig:
        return self._config

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Agent backed by a Gemini model, with no storage attached.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_output_tokens,
        )

        return Agent(
            model=model,
            add_history_to_context=False,
            markdown=False,
        )

    async def get_response(self, message: str) -> str:
        """Get the complete model response for a message.

        Args:
            message: The user's message, sent as-is.

        Returns:
            The generated text, unmodified.

        Raises:
            ModelResponseError: If the run failed or returned no text.
            Exception: Any error from Agno or the Gemini client propagates.
        """
        response = await self._agent.arun(message)
        content = getattr(response, "content", None)
        if _run_failed(response):
            raise ModelResponseError(f"Model run ended with an error: {content}")
        if not isinstance(content, str):
            raise ModelResponseError(
                f"Model returned no text content (got {type(content).__name__})"
            )
        return content


# Module-level singleton instance
_agent_service: AgentService | None = None


def get_agent_service() -> AgentService:
    """Get or create the global agent service.

    Returns:
        The AgentService instance.
    """
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
    return _agent_service
