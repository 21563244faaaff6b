"""NiceGUI interface - thin visualization layer for the chat.

Responsibilities:
    - Chat message display with a loading indicator
    - Text input and submit trigger

Contains no turn logic. Renders whatever the ConversationTurnManager
reports through its callbacks.
"""
