"""Conversation state and turn handling.

Keeps the message sequence and busy flag for a single chat, independent
of how the chat is displayed.
"""

from gemini_chatbox.conversation.turn_manager import (
    FALLBACK_MESSAGE,
    ConversationTurnManager,
    ResponseGenerator,
)

__all__ = ["FALLBACK_MESSAGE", "ConversationTurnManager", "ResponseGenerator"]
