"""Utility functions for Deploy Reporter."""

from deploy_reporter.utils.debug import dump_exchange, dump_request, dump_response
from deploy_reporter.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "dump_exchange",
    "dump_request",
    "dump_response",
]
