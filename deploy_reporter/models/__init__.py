"""Data models for Deploy Reporter."""

from deploy_reporter.models.deployment import (
    DEPLOYMENT_ENVIRONMENT,
    DeploymentRequest,
    DeploymentResponse,
    DeploymentStatusRequest,
    ReportResult,
    RepositoryRef,
)

__all__ = [
    "DEPLOYMENT_ENVIRONMENT",
    "RepositoryRef",
    "DeploymentRequest",
    "DeploymentStatusRequest",
    "DeploymentResponse",
    "ReportResult",
]
