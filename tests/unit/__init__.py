"""Unit tests for individual components in isolation.

Coverage:
    - conversation/: Turn lifecycle, rejection and fallback
    - models/: Pydantic validation and serialization
    - agent/: Configuration loading and agent construction

Uses mocks for the Agno classes and a scripted generator for the model.
"""
