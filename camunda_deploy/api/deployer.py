"""Deployer API for deployment operations"""

import base64
import logging
from typing import Any, Dict, List, Optional, Tuple

import aiofiles
import httpx

from ..constants import (
    DEPLOYMENT_CREATE_PATH,
    DEFAULT_REQUEST_TIMEOUT,
    DEPLOY_CHANGED_ONLY,
    FIELD_DEPLOYMENT_NAME,
    FIELD_TENANT_ID,
    FIELD_DEPLOYMENT_SOURCE,
    FIELD_DEPLOY_CHANGED_ONLY,
)
from ..models import (
    EndpointConfig,
    AuthMode,
    NoAuth,
    BasicAuth,
    BearerAuth,
    DeploymentRequest,
    Resource,
)
from ..utils.async_utils import run_async
from .exceptions import (
    ConfigError,
    DeploymentError,
    DeploymentTransportError,
    ResourceError,
)

logger = logging.getLogger(__name__)

# (field name, (filename or None, content))
MultipartField = Tuple[str, Tuple[Optional[str], Any]]


class Deployer:
    """Deploys resources to a Camunda engine REST endpoint"""

    def __init__(self,
                 endpoint_config: EndpointConfig,
                 timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize deployer

        Args:
            endpoint_config: Engine endpoint and credentials
            timeout: Request timeout in seconds, None disables it
            transport: Optional httpx transport, used instead of the network
        """
        self.endpoint_config = endpoint_config
        self.timeout = timeout
        self._transport = transport

    @property
    def deployment_url(self) -> str:
        """URL deployments are posted to"""
        return f"{self.endpoint_config.base_url}{DEPLOYMENT_CREATE_PATH}"

    def deploy(self, deployment: DeploymentRequest) -> Any:
        """
        Deploy resources

        Args:
            deployment: Deployment request

        Returns:
            Parsed engine response

        Raises:
            DeploymentError: If the engine rejects the deployment or
                cannot be reached
        """
        return run_async(self.deploy_async(deployment))

    async def deploy_async(self, deployment: DeploymentRequest) -> Any:
        """Async implementation of deploy"""
        fields = await self._build_body(deployment)
        headers = get_auth_headers(self.endpoint_config.auth)
        url = self.deployment_url

        logger.debug(
            "POST %s (%d resources, auth=%s)",
            url,
            len(deployment.resources),
            self.endpoint_config.auth.type
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout,
                                         transport=self._transport) as client:
                response = await client.post(url, files=fields, headers=headers)
        except httpx.TransportError as e:
            raise DeploymentTransportError(
                str(e) or e.__class__.__name__,
                deployment,
                url=url
            ) from e

        if not response.is_success:
            raise get_error_from_response(response, deployment)

        try:
            return response.json()
        except ValueError:
            logger.warning(
                "Engine answered %s without a JSON body, using status text as result",
                response.status_code
            )
            return response.reason_phrase

    async def _build_body(self, deployment: DeploymentRequest) -> List[MultipartField]:
        """Build the multipart fields of a deployment

        Every part goes through ``files`` so the request stays
        multipart even when there are no resources.
        """
        fields: List[MultipartField] = [
            (FIELD_DEPLOYMENT_NAME, (None, deployment.name)),
        ]

        if deployment.tenant_id:
            fields.append((FIELD_TENANT_ID, (None, deployment.tenant_id)))

        if deployment.source:
            fields.append((FIELD_DEPLOYMENT_SOURCE, (None, deployment.source)))

        fields.append((FIELD_DEPLOY_CHANGED_ONLY, (None, DEPLOY_CHANGED_ONLY)))

        for resource in deployment.resources:
            content = await self._read_resource(resource, deployment)
            fields.append((resource.name, (resource.name, content)))

        return fields

    async def _read_resource(self, resource: Resource, deployment: DeploymentRequest) -> bytes:
        try:
            async with aiofiles.open(resource.path, 'rb') as f:
                return await f.read()
        except OSError as e:
            raise ResourceError(
                f"Failed to read resource {resource.name}: {e.strerror or e}",
                deployment,
                str(resource.path)
            ) from e


def get_auth_headers(auth: AuthMode) -> Dict[str, str]:
    """Build the Authorization header for an auth mode

    Args:
        auth: Auth mode

    Returns:
        Header mapping, empty for anonymous access

    Raises:
        ConfigError: If the auth mode is not supported
    """
    if isinstance(auth, NoAuth):
        return {}

    if isinstance(auth, BearerAuth):
        return {'Authorization': f"Bearer {auth.token}"}

    if isinstance(auth, BasicAuth):
        credentials = f"{auth.username}:{auth.password or ''}".encode('utf-8')
        return {'Authorization': f"Basic {base64.b64encode(credentials).decode('ascii')}"}

    raise ConfigError(f"unknown auth type: {getattr(auth, 'type', auth)!r}")


def get_error_from_response(response: httpx.Response,
                            deployment: DeploymentRequest) -> DeploymentError:
    """Turn a failed engine response into a DeploymentError"""
    message = None

    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and isinstance(body.get("message"), str):
        message = body["message"]

    return DeploymentError(
        message or response.reason_phrase or f"HTTP {response.status_code}",
        deployment,
        status=response.status_code,
        status_text=response.reason_phrase,
        url=str(response.request.url)
    )


def deploy(endpoint_config: EndpointConfig,
           deployment: DeploymentRequest,
           **options) -> Any:
    """
    Deploy resources to an engine endpoint

    This is a convenience function that creates a Deployer instance
    and performs the deployment.

    Example:
        config = EndpointConfig(url="http://localhost:8080/engine-rest")

        result = deploy(config, DeploymentRequest(
            name="invoice",
            resources=[Resource(name="invoice.bpmn", path="./invoice.bpmn")]
        ))

    Args:
        endpoint_config: Engine endpoint and credentials
        deployment: Deployment request
        **options: Passed to Deployer (timeout, transport)

    Returns:
        Parsed engine response

    Raises:
        DeploymentError: If deployment fails
    """
    return Deployer(endpoint_config, **options).deploy(deployment)
