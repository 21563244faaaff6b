"""Gemini Chatbox - a single-page chat with Google's Gemini models.

Combines NiceGUI for the chat page, Agno for the model client,
FastAPI for hosting, and Pydantic for data validation.

Components:
    - conversation: turn-taking between the user and the model
    - agent: Gemini client configuration and invocation
    - ui: Web interface for chat interactions
    - api: HTTP host and health endpoint
    - models: Message schemas
"""

__version__ = "0.1.0"
