class U301Error(Exception):
    """Base class for everything this server raises."""


class InputValidationError(U301Error):
    """A tool call carried a malformed batch of URL items."""


class TooManyItemsError(InputValidationError):
    pass


class EmptyBatchError(InputValidationError):
    pass


class U301ApiError(U301Error):
    """Custom exception for non-success responses from the U301 API."""

    def __init__(self, status_code: int, status_text: str, body_text: str = ""):
        super().__init__(f"U301 API error: {status_code} {status_text}\n{body_text}")
        self.status_code = status_code
        self.status_text = status_text
        self.body_text = body_text


class TransportError(U301Error):
    """The U301 API could not be reached (DNS, refused connection, timeout)."""


class EmptyResponseError(U301Error):
    pass


class UnexpectedResponseError(U301Error):
    pass


class ConfigurationError(U301Error):
    """Startup configuration is missing or invalid."""
