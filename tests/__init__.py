"""Test package for Ollama Chat.

Structure:
    - unit/: State, configuration and client tests
    - integration/: Gateway endpoint and end-to-end chat workflow tests

Ollama itself is never required: the upstream server is replaced by an
httpx.MockTransport stub.
"""
