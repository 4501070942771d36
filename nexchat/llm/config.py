"""Gemini configuration with environment variable loading.

Pydantic-based configuration for the Gemini generateContent endpoint.
Generation parameters and safety thresholds are fixed per deployment,
not per call.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

HARM_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


class GeminiConfig(BaseModel):
    """Configuration for the Gemini client.

    Attributes:
        api_key: API key for the Generative Language API.
        base_url: API base URL up to and including the version segment.
        model_name: Model identifier to use.
        temperature: Sampling temperature.
        top_k: Number of highest-probability tokens considered.
        top_p: Nucleus sampling threshold.
        max_output_tokens: Maximum tokens in generated response.
        candidate_count: Number of candidates requested.
        safety_threshold: Block threshold applied to every harm category.
        timeout: Request timeout in seconds.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_AI_API_KEY", "")),
        description="API key for Gemini",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        ),
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        description="Model to use",
    )
    temperature: float = Field(default=0.5, ge=0.0, le=2.0)
    top_k: int = Field(default=1, ge=1)
    top_p: float = Field(default=0.8, ge=0.0, le=1.0)
    max_output_tokens: int = Field(default=1024, ge=1, le=65536)
    candidate_count: int = Field(default=1, ge=1, le=8)
    safety_threshold: str = "BLOCK_MEDIUM_AND_ABOVE"
    timeout: float = Field(default=60.0, gt=0)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY or GOOGLE_AI_API_KEY in .env")
        return v.strip()

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url.rstrip('/')}/models/{self.model_name}:generateContent"

    def generation_config(self) -> dict[str, float | int]:
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
            "candidateCount": self.candidate_count,
        }

    def safety_settings(self) -> list[dict[str, str]]:
        return [
            {"category": category, "threshold": self.safety_threshold}
            for category in HARM_CATEGORIES
        ]


def get_gemini_config() -> GeminiConfig:
    """Create Gemini configuration from environment.

    Returns:
        Configured GeminiConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return GeminiConfig()
