"""Error taxonomy for the conversation engine."""


class EngineError(Exception):
    """Base class for engine failures. None of them are fatal."""


class EmptyInput(EngineError):
    """Raised when submitted text is empty after trimming."""

    def __init__(self) -> None:
        super().__init__("Message is empty")


class Busy(EngineError):
    """Raised when a request or reveal is already in flight."""

    def __init__(self, message: str = "A response is already in progress") -> None:
        super().__init__(message)


class RequestFailed(EngineError):
    """Raised when an outbound call to the model or an auxiliary endpoint fails.

    Attributes:
        detail: Human readable failure description for display.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFound(EngineError):
    """Raised when a session id does not exist."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id
