"""Unit tests for individual components in isolation.

Coverage:
    - engine/: Reveal state machine and conversation sessions
    - llm/: Gemini configuration and request/response mapping
    - content/: Transcript client, prompts and grounded answers
    - parsing/: PDF validation and extraction
"""
