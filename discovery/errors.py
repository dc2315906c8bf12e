"""Exception classes raised by the Discovery API client."""

from __future__ import annotations


class DiscoveryError(Exception):
    """Base exception for Discovery API client errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidURL(DiscoveryError):
    """Raised when a base URL or path segment cannot form a request URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid URL {url!r}: {reason}", "INVALID_URL")
        self.url = url


class NetworkError(DiscoveryError):
    """Raised on transport-level failures (DNS, connect, read, timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "NETWORK_ERROR")


class UnexpectedStatus(DiscoveryError):
    """Raised when the API answers with anything other than 200."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Status code: {status_code}: {body}", "UNEXPECTED_STATUS")
        self.status_code = status_code
        self.body = body


class DecodeError(DiscoveryError):
    """Raised when a response body is not JSON of the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "DECODE_ERROR")


class DepthLimitExceeded(DiscoveryError):
    """Raised when pagination has gone as deep as the API allows."""

    def __init__(self, depth: int) -> None:
        super().__init__(f"Max page depth reached ({depth})", "DEPTH_LIMIT_EXCEEDED")
        self.depth = depth
