from enum import Enum

from pydantic import BaseModel, ConfigDict


class MessageRole(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single message in the conversation.

    Messages are immutable once created; the conversation only ever
    appends new ones.

    Attributes:
        role: Who produced the message (user or assistant).
        content: The message text, stored exactly as submitted or received.
    """

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=content)

    @property
    def is_user(self) -> bool:
        return self.role is MessageRole.USER
