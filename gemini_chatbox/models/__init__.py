"""Pydantic models for the chat conversation.

Provides type safety and validation for the message sequence.

Models:
    - MessageRole: Speaker of a message (user or assistant)
    - Message: Individual message in the conversation
"""

from gemini_chatbox.models.schemas import Message, MessageRole

__all__ = ["Message", "MessageRole"]
