"""Agno agent logic for the Gemini model.

Responsibilities:
    - Agent initialization with Gemini models
    - Configuration loading from the environment
    - Single-shot response generation

Maintains clean separation from the conversation and UI layers.
"""

from gemini_chatbox.agent.chat_agent import (
    AgentService,
    ModelResponseError,
    get_agent_service,
)
from gemini_chatbox.agent.config import AgentConfig, get_agent_config

__all__ = [
    "AgentConfig",
    "AgentService",
    "ModelResponseError",
    "get_agent_config",
    "get_agent_service",
]
