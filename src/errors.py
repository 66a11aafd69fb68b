"""Errors raised while generating store names."""

NOT_CONFIGURED_MESSAGE = (
    "Gemini is not configured. Please set GOOGLE_PROJECT_ID to continue."
)
GENERIC_FAILURE_MESSAGE = "An error occurred while generating store names"


class NameGenerationError(Exception):
    """Base class for name generation failures."""

    kind = "request_failed"


class NotConfiguredError(NameGenerationError):
    """The text generation capability has no usable configuration."""

    kind = "not_configured"

    def __init__(self, message: str = NOT_CONFIGURED_MESSAGE):
        super().__init__(message)


class RequestFailedError(NameGenerationError):
    """The call to the text generation capability failed."""

    kind = "request_failed"

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message or GENERIC_FAILURE_MESSAGE)
