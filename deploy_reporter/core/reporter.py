"""Deployment Reporter.

Reports a build as a GitHub deployment in two chained calls:
1. create the deployment for the commit
2. attach the resolved state to the deployment id returned by step 1
"""

import httpx

from deploy_reporter.config import Settings
from deploy_reporter.core.repository import parse_repository_url
from deploy_reporter.core.status import resolve_description, resolve_state
from deploy_reporter.models.deployment import (
    DeploymentRequest,
    DeploymentStatusRequest,
    ReportResult,
)
from deploy_reporter.services.github import GitHubDeploymentsClient
from deploy_reporter.utils.logging import get_logger


class DeploymentReporter:
    """Creates a deployment for the configured commit and reports its status.

    No rollback: if the status call fails, the deployment created by the
    first call stays on GitHub.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings
        self.transport = transport
        self.logger = get_logger("reporter")

    def run(self) -> ReportResult:
        """Run both calls.

        Raises:
            ReporterError: If any step fails; the status call is skipped
                when the deployment could not be created
        """
        settings = self.settings
        repository = parse_repository_url(settings.repository_url)
        state = resolve_state(
            settings.set_specific_status, settings.bitrise_build_status
        )
        description = resolve_description(
            settings.description,
            settings.set_specific_status,
            settings.bitrise_build_status,
        )

        self.logger.info(
            "reporter.started",
            repository=str(repository),
            ref=settings.commit_hash,
            state=state,
        )

        with GitHubDeploymentsClient(
            auth_token=settings.auth_token,
            api_base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            verbose=settings.verbose,
            transport=self.transport,
        ) as client:
            deployment = client.create_deployment(
                repository,
                DeploymentRequest(
                    ref=settings.commit_hash,
                    description=description,
                ),
            )
            print("deployment id", deployment.id)

            client.create_deployment_status(
                repository,
                deployment.id,
                DeploymentStatusRequest(
                    environment_url=settings.build_url,
                    state=state,
                    description=description,
                ),
            )

        self.logger.info(
            "reporter.completed",
            repository=str(repository),
            deployment_id=deployment.id,
            state=state,
        )

        return ReportResult(
            repository=repository,
            deployment_id=deployment.id,
            state=state,
            description=description,
        )
