"""Integration tests for the HTTP host and the live model.

Live tests are skipped unless GEMINI_API_KEY is set.
"""
