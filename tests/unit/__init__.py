"""Unit tests for individual components in isolation.

Coverage:
    - state/: Session store and submission controller
    - gateway/: Configuration and Ollama client
    - ui/: Gateway HTTP client
"""
