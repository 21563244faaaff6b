"""Turn-taking between the user and the remote model.

A ConversationTurnManager owns one conversation: the ordered, append-only
message list and the busy flag that is set while a reply is outstanding.
Every remote failure is folded into a fixed apology message, so a turn
always ends with exactly one assistant message.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from gemini_chatbox.models.schemas import Message

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Sorry, I encountered an error. Please try again."


class ResponseGenerator(Protocol):
    """Anything that can turn user text into a model reply."""

    async def get_response(self, message: str) -> str: ...


class ConversationTurnManager:
    """Holds one conversation and runs its turns.

    The manager is driven by exactly two events, a submit and the remote
    call settling, and reports every change through the optional
    callbacks instead of relying on whoever renders it.

    Args:
        generator: Client used to obtain model replies.
        timeout: Seconds to wait for a reply; None waits indefinitely.
        on_message: Called with each message right after it is appended.
        on_busy_change: Called with the new value whenever busy flips.
    """

    def __init__(
        self,
        generator: ResponseGenerator,
        timeout: float | None = None,
        on_message: Callable[[Message], None] | None = None,
        on_busy_change: Callable[[bool], None] | None = None,
    ) -> None:
        self._generator = generator
        self._timeout = timeout
        self._on_message = on_message
        self._on_busy_change = on_busy_change
        self._messages: list[Message] = []
        self._busy = False

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def busy(self) -> bool:
        return self._busy

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        if self._on_message is not None:
            self._on_message(message)

    def _set_busy(self, busy: bool) -> None:
        if busy == self._busy:
            return
        self._busy = busy
        if self._on_busy_change is not None:
            self._on_busy_change(busy)

    async def submit(self, text: str) -> bool:
        """Run one turn for the given user text.

        Empty or whitespace-only text, and any submit made while a turn is
        still pending, are ignored.

        Args:
            text: The user's message. Stored and sent unchanged.

        Returns:
            True if a turn was run, False if the submit was ignored.
        """
        if not text or not text.strip():
            logger.debug("Ignoring empty submission")
            return False
        if self._busy:
            logger.debug("Ignoring submission while a turn is pending")
            return False

        self._append(Message.user(text))
        try:
            self._set_busy(True)
            reply = await self._request_reply(text)
            self._append(Message.assistant(reply))
        finally:
            self._set_busy(False)
        return True

    async def _request_reply(self, text: str) -> str:
        try:
            reply = await asyncio.wait_for(
                self._generator.get_response(text), timeout=self._timeout
            )
            if not isinstance(reply, str):
                raise TypeError(f"Expected reply text, got {type(reply).__name__}")
        except TimeoutError:
            logger.warning(f"Gemini API did not reply within {self._timeout}s")
            return FALLBACK_MESSAGE
        except Exception:
            logger.exception("Error calling Gemini API")
            return FALLBACK_MESSAGE

        logger.info(f"Turn settled ({len(text)} chars in, {len(reply)} chars out)")
        return reply
