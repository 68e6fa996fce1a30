"""Core functionality for Deploy Reporter."""

from deploy_reporter.core.exceptions import (
    ConfigurationError,
    ReporterError,
    RepositoryURLError,
    ResponseParsingError,
    TransportError,
    UnexpectedStatusError,
)
from deploy_reporter.core.repository import parse_repository_url
from deploy_reporter.core.status import resolve_description, resolve_state

__all__ = [
    "ReporterError",
    "ConfigurationError",
    "RepositoryURLError",
    "TransportError",
    "UnexpectedStatusError",
    "ResponseParsingError",
    "parse_repository_url",
    "resolve_state",
    "resolve_description",
]
