"""Deployment data models.

Wire formats for the GitHub deployments API:
https://docs.github.com/en/rest/deployments/deployments#create-a-deployment
https://docs.github.com/en/rest/deployments/statuses#create-a-deployment-status
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEPLOYMENT_ENVIRONMENT = "staging"

DeploymentState = Literal["pending", "success", "error", "failure"]


class RepositoryRef(BaseModel):
    """Owner and name of a hosted repository."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


class DeploymentRequest(BaseModel):
    """Body of the create-deployment call."""

    required_contexts: list[str] = Field(default_factory=list)
    ref: str
    environment: str = DEPLOYMENT_ENVIRONMENT
    state: str | None = None
    target_url: str | None = None
    description: str | None = None
    context: str | None = None


class DeploymentStatusRequest(BaseModel):
    """Body of the create-deployment-status call."""

    environment_url: str = ""
    environment: str = DEPLOYMENT_ENVIRONMENT
    state: DeploymentState
    description: str | None = None


class DeploymentResponse(BaseModel):
    """Fields read back from a created deployment."""

    id: int
    url: str | None = None


class ReportResult(BaseModel):
    """Outcome of a complete reporting run."""

    repository: RepositoryRef
    deployment_id: int
    state: DeploymentState
    description: str
