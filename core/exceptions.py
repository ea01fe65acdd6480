class AppError(Exception):
    """Base class for errors surfaced at the HTTP boundary."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Raised when an input field is missing, malformed or out of range."""

    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class NotFoundError(AppError):
    status_code = 404


class UpstreamError(AppError):
    """Raised when the inference provider fails or cannot be reached.

    Never retried here; the caller decides whether to try again.
    """

    status_code = 500


class UpstreamConfigError(UpstreamError):
    """Raised when the inference provider is not configured (missing API key)."""


class MalformedUpstreamContent(Exception):
    """Raised when model output holds no usable JSON. Absorbed by the normalizer."""
