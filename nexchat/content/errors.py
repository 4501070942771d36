"""Errors raised while preparing content for a grounded chat."""


class InvalidContentRequest(ValueError):
    """Raised when a content request is malformed (bad URL, language, empty text)."""
