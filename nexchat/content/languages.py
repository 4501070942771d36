"""Languages offered for transcripts and translation."""

LANGUAGES: dict[str, str] = {
    "English": "en",
    "Hindi": "hi",
    "Spanish": "es",
    "French": "fr",
    "German": "de",
    "Chinese": "zh",
    "Japanese": "ja",
    "Korean": "ko",
    "Russian": "ru",
    "Arabic": "ar",
    "Portuguese": "pt",
    "Italian": "it",
    "Dutch": "nl",
    "Turkish": "tr",
    "Vietnamese": "vi",
    "Thai": "th",
    "Indonesian": "id",
}

DEFAULT_LANGUAGE_CODE = "en"
DEFAULT_TARGET_LANGUAGE = "Hindi"


def is_language_code(code: str) -> bool:
    """Whether ``code`` looks like a 2-letter ISO 639-1 code."""
    return isinstance(code, str) and len(code) == 2 and code.isalpha()
