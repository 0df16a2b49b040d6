from typing import Optional


class ValidationError(Exception):
    """User input rejected before any network call."""


class TransportError(Exception):
    """Non-2xx response, transport failure, or unparseable response body."""


class NetworkError(TransportError):
    def __init__(self, message: str, status_code: Optional[int] = None, status_text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class AssistantError(TransportError):
    pass
