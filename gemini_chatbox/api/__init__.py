"""FastAPI host for the chat page.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI at startup)
"""

from gemini_chatbox.api.app import app, create_app

__all__ = ["app", "create_app"]
