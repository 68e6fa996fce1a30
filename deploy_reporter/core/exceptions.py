"""Custom exceptions for Deploy Reporter."""

from typing import Any


class ReporterError(Exception):
    """Base exception for Deploy Reporter."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(ReporterError):
    """Required setting missing or invalid."""

    def __init__(self, message: str, fields: list[str] | None = None):
        details = {}
        if fields:
            details["fields"] = fields
        super().__init__(f"Configuration error: {message}", details)


class RepositoryURLError(ReporterError):
    """Repository URL matches neither the HTTPS nor the SSH form."""

    def __init__(self, url: str):
        super().__init__(
            f"invalid repository URL: {url!r}",
            {"repository_url": url},
        )


class TransportError(ReporterError):
    """Request could not be sent or no response was received."""

    def __init__(self, url: str, error: Exception):
        super().__init__(
            f"failed to send the request: {error}",
            {"url": url, "error_type": type(error).__name__},
        )


class UnexpectedStatusError(ReporterError):
    """Response status was not 201 Created."""

    def __init__(self, url: str, status_code: int, reason: str):
        super().__init__(
            f"server error, unexpected status code: {status_code} {reason}".rstrip(),
            {"url": url, "status_code": status_code},
        )
        self.status_code = status_code


class ResponseParsingError(ReporterError):
    """Response body could not be read or deserialized."""

    def __init__(self, url: str, message: str):
        super().__init__(
            f"unable to parse response body: {message}",
            {"url": url},
        )
