"""NexChat - Gemini chat and chat-with-content web front-ends.

Combines FastAPI for HTTP and SSE, httpx for the Gemini REST API,
NiceGUI for the web interface, and Pydantic for data validation.

Components:
    - engine: Conversation sessions, typewriter reveal, request orchestration
    - llm: Gemini client and configuration
    - content: Transcript, translation, analysis and grounded Q&A
    - parsing: PDF text extraction
    - api: HTTP endpoints and streaming responses
    - ui: Web interface for both apps
    - models: Request/response schemas
"""

__version__ = "0.1.0"
