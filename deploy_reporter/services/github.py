"""GitHub deployments API client."""

from types import TracebackType

import httpx
from pydantic import BaseModel, ValidationError

from deploy_reporter.config import DEFAULT_API_BASE_URL
from deploy_reporter.core.exceptions import (
    ResponseParsingError,
    TransportError,
    UnexpectedStatusError,
)
from deploy_reporter.models.deployment import (
    DeploymentRequest,
    DeploymentResponse,
    DeploymentStatusRequest,
    RepositoryRef,
)
from deploy_reporter.utils.debug import dump_exchange
from deploy_reporter.utils.logging import get_logger

logger = get_logger(__name__)

ACCEPT = "application/vnd.github+json"


class GitHubDeploymentsClient:
    """Creates deployments and deployment statuses.

    Every call must answer 201 Created. When it does not, or when the client
    is verbose, the full request and response are printed to stdout before
    the status is checked.
    """

    def __init__(
        self,
        auth_token: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 30.0,
        verbose: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_base_url = api_base_url.rstrip("/")
        self.verbose = verbose
        self._client = httpx.Client(
            headers={
                "Authorization": f"token {auth_token}",
                "Accept": ACCEPT,
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "GitHubDeploymentsClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def deployments_url(self, repository: RepositoryRef) -> str:
        return f"{self.api_base_url}/repos/{repository.owner}/{repository.name}/deployments"

    def statuses_url(self, repository: RepositoryRef, deployment_id: int) -> str:
        return f"{self.deployments_url(repository)}/{deployment_id}/statuses"

    def create_deployment(
        self, repository: RepositoryRef, request: DeploymentRequest
    ) -> DeploymentResponse:
        """Create a deployment and return its id and URL.

        Raises:
            TransportError: If the request could not be sent
            UnexpectedStatusError: If the response is not 201
            ResponseParsingError: If the body has no integer id
        """
        url = self.deployments_url(repository)
        response = self._post(url, request)

        try:
            deployment = DeploymentResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseParsingError(url, str(e)) from e

        logger.info(
            "github.deployment_created",
            repository=str(repository),
            deployment_id=deployment.id,
            url=deployment.url,
        )
        return deployment

    def create_deployment_status(
        self,
        repository: RepositoryRef,
        deployment_id: int,
        request: DeploymentStatusRequest,
    ) -> None:
        """Attach a status to an existing deployment."""
        self._post(self.statuses_url(repository, deployment_id), request)
        logger.info(
            "github.deployment_status_created",
            repository=str(repository),
            deployment_id=deployment_id,
            state=request.state,
        )

    def _post(self, url: str, payload: BaseModel) -> httpx.Response:
        body = payload.model_dump(exclude_none=True)
        logger.debug("github.request", method="POST", url=url, body=body)

        try:
            # post() reads the whole body and returns the connection to the pool
            response = self._client.post(url, json=body)
        except httpx.RequestError as e:
            raise TransportError(url, e) from e

        logger.debug("github.response", url=url, status_code=response.status_code)

        if response.status_code != httpx.codes.CREATED or self.verbose:
            print(dump_exchange(response))

        if response.status_code != httpx.codes.CREATED:
            raise UnexpectedStatusError(
                url, response.status_code, response.reason_phrase
            )

        return response
