"""Step entry point."""

import sys

import httpx

from deploy_reporter import __version__
from deploy_reporter.config import Settings, get_settings
from deploy_reporter.core.exceptions import ConfigurationError, ReporterError
from deploy_reporter.core.reporter import DeploymentReporter
from deploy_reporter.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def run(settings: Settings, transport: httpx.BaseTransport | None = None) -> int:
    """Report the deployment, returning the process exit code."""
    try:
        result = DeploymentReporter(settings, transport=transport).run()
    except ReporterError as exc:
        logger.error("reporter.failed", error=exc.message, **exc.details)
        return 1

    logger.info(
        "reporter.succeeded",
        deployment_id=result.deployment_id,
        state=result.state,
    )
    return 0


def main() -> int:
    """Load settings from the environment and run the step."""
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        configure_logging()
        logger.error("reporter.configuration_invalid", error=exc.message, **exc.details)
        return 1

    configure_logging(settings.log_level, settings.log_format)
    logger.info("reporter.starting", version=__version__, **settings.summary())

    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
