FALLBACK_MESSAGE = "API request failed"


class ConfigError(ValueError):
    pass


class RequestFailure(Exception):
    """
    Base error for every failed call. str(error) is the human-readable message.
    """

    def __init__(self, message: str, endpoint: str = ""):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint


class ApiResponseError(RequestFailure):
    """The service answered with a non-success status."""

    def __init__(self, message: str, endpoint: str = "", status_code: int = 0, payload=None):
        super().__init__(message, endpoint)
        self.status_code = status_code
        self.payload = payload


class TransportError(RequestFailure):
    """No response was received (connection refused, timeout, DNS failure...)."""


class ResponseDecodeError(RequestFailure):
    """A success response whose body is not valid JSON."""


class RequestEncodeError(RequestFailure):
    """The request body could not be serialized to JSON; nothing was sent."""
