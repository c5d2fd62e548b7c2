from typing import Optional


class AppError(Exception):
    """Base class for failures raised by controllers and providers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ValidationError(AppError):
    """Missing or malformed caller input."""


class ConfigurationError(AppError):
    """A provider credential or setting is absent from the environment."""


class PayloadTooLargeError(AppError):
    """Uploaded content exceeds the configured size ceiling."""


class UpstreamError(AppError):
    """A third-party provider rejected or failed the call.

    `status` and `code` carry whatever the provider reported, when it
    reported anything; the original exception is kept as `__cause__`.
    """

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.code = code
