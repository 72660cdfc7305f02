"""Integration tests for components working together.

Coverage:
    - POST /api/chat against a stub Ollama server
    - Full chat workflow from controller through the gateway
"""
