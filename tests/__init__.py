"""Test package for Gemini Chatbox.

Structure:
    - unit/: Turn manager, schema, config and agent tests
    - integration/: HTTP host and live Gemini round trips
"""
