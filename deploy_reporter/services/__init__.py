"""External service clients."""

from deploy_reporter.services.github import GitHubDeploymentsClient

__all__ = ["GitHubDeploymentsClient"]
