"""Gemini model access.

Responsibilities:
    - Configuration of model, generation parameters and safety thresholds
    - Conversion of session messages to Gemini request contents
    - Extraction of the reply text from responses

Talks to the REST endpoint directly with httpx.
"""

from nexchat.llm.client import GeminiClient, get_gemini_client
from nexchat.llm.config import GeminiConfig, get_gemini_config

__all__ = ["GeminiClient", "GeminiConfig", "get_gemini_client", "get_gemini_config"]
