"""Exception hierarchy for the ObjectScale management API client.

Every failure surfaced by the dispatcher or a resource client derives from
APIClientError so callers can catch the whole family in one place.
"""

from typing import Optional


class APIClientError(Exception):
    """Base exception for API client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.is_retryable: bool = False


class InvalidRequestError(APIClientError):
    """Exception raised when a request is malformed before any I/O happens."""

    pass


class TransportError(APIClientError):
    """Exception raised when the HTTP exchange itself fails."""

    def __init__(self, message: str, user_guidance: Optional[str] = None):
        super().__init__(message)
        self.user_guidance = user_guidance or ""


class NetworkConnectionError(TransportError):
    """Exception raised for connection-related network failures."""

    pass


class NetworkTimeoutError(TransportError):
    """Exception raised for timeout-related network failures."""

    def __init__(self, message: str, user_guidance: Optional[str] = None):
        super().__init__(message, user_guidance)
        self.is_retryable = True


class DNSResolutionError(TransportError):
    """Exception raised for DNS resolution failures."""

    pass


class SSLCertificateError(TransportError):
    """Exception raised for SSL certificate verification failures."""

    pass


class AuthenticationError(APIClientError):
    """Exception raised when a session cannot be established or renewed."""

    pass


class APIError(APIClientError):
    """Exception raised when the server answers with a non-success status.

    Attributes:
        status_code: HTTP status of the response
        code: Service error code from the payload, or the status code as text
        message: Human readable description
        details: Additional detail text, if the payload carried any
        body: Raw response body
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[str] = None,
        retryable: bool = False,
        body: str = "",
    ):
        super().__init__(message, status_code=status_code)
        self.code = code
        self.details = details
        self.body = body
        self.is_retryable = retryable

    @property
    def is_not_found(self) -> bool:
        """True for a 404 or the service's "resource not found" code."""
        return self.status_code == 404 or self.code == "1004"

    def __str__(self) -> str:
        text = f"HTTP {self.status_code} [{self.code}]: {self.message}"
        if self.details:
            text += f" ({self.details})"
        return text


class CodecError(APIClientError):
    """Base exception for payload serialization failures."""

    pass


class EncodeError(CodecError):
    """Exception raised when a request body cannot be serialized."""

    pass


class DecodeError(CodecError):
    """Exception raised when a response body does not match the expected shape."""

    pass
