"""
Custom exceptions for the EdgeGrid client library.
"""


class EdgeGridError(Exception):
    """Base exception for EdgeGrid client errors."""
    pass


class InvalidCredentialSetError(EdgeGridError):
    """Raised when a credential set is missing a token, secret, host or scheme."""
    pass


class RandomSourceError(EdgeGridError):
    """Raised when the nonce entropy source cannot be read."""
    pass


class MalformedHeaderError(EdgeGridError):
    """Raised when an authorization header is structurally invalid."""
    pass


class MissingKeyError(MalformedHeaderError):
    """Raised when an authorization header field is absent or out of order."""

    def __init__(self, key: str):
        super().__init__(f"Missing key {key}")
        self.key = key


class VerificationError(EdgeGridError):
    """Raised when a request signature could not be recomputed for checking."""
    pass


class ConfigurationError(EdgeGridError):
    """Raised when credential or client configuration is invalid."""
    pass


class InputTooLargeError(EdgeGridError):
    """Raised when a request body exceeds the configured size limit."""
    pass


class HTTPError(EdgeGridError):
    """Raised when an HTTP request fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code=None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseFormatError(EdgeGridError):
    """Raised when a response body cannot be decoded into its expected shape."""
    pass
