# START OF FILE: astrosolar/domain/errors.py

from typing import Optional


class RelayError(Exception):
    """Base error. `message` and `details` are safe to show to the caller."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class MethodNotAllowed(RelayError):
    status_code = 405
    default_message = "Method not allowed"


class InvalidInput(RelayError):
    status_code = 400
    default_message = "Invalid request body"


class ConfigurationError(RelayError):
    status_code = 500
    default_message = "Server configuration error"


class ProviderError(RelayError):
    # status_code is the upstream one, set per instance
    status_code = 502
    default_message = "AI provider error"


class ProviderUnavailable(RelayError):
    status_code = 503
    default_message = "AI provider unavailable"


class StorageError(RelayError):
    status_code = 500
    default_message = "Failed to save lead data"


class InternalError(RelayError):
    status_code = 500
    default_message = "Failed to process request"

# END OF FILE: astrosolar/domain/errors.py
