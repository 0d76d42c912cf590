"""Deploy service implementation"""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from ..api.deployer import Deployer
from ..api.exceptions import ValidationError
from ..constants import SYMBOL_PROGRESS
from ..core.resource_collector import collect_resources
from ..core.result_classifier import classify_deployment
from ..models import DeploymentRequest, DeploymentSummary
from ..utils.async_utils import run_async
from .config_service import resolve_endpoint_config, resolve_request_timeout

logger = logging.getLogger(__name__)


class DeployService:
    """Runs a deployment from command line input to classified result"""

    def __init__(self, reporter=None, transport=None):
        """Initialize deploy service

        Args:
            reporter: Progress reporter, nothing is reported when None
            transport: Optional httpx transport handed to the deployer
        """
        self.reporter = reporter
        self.transport = transport

    def run(self,
            patterns: Iterable[str],
            name: Optional[str],
            env: Mapping[str, str],
            tenant_id: Optional[str] = None,
            source: Optional[str] = None,
            cwd: Optional[Union[str, Path]] = None) -> DeploymentSummary:
        """Deploy the resources matched by ``patterns``

        Args:
            patterns: File names or glob patterns
            name: Deployment name
            env: Environment holding the endpoint configuration
            tenant_id: Optional tenant
            source: Optional deployment source
            cwd: Directory patterns are relative to

        Returns:
            Created/updated breakdown of the deployment

        Raises:
            ValidationError: If the deployment name is missing
            ConfigError: If the endpoint is not configured
            DeploymentError: If the deployment fails
        """
        resources = collect_resources(patterns, cwd)
        endpoint_config = resolve_endpoint_config(env)

        if not name:
            raise ValidationError("missing deployment name")

        deployment = DeploymentRequest(
            name=name,
            resources=resources,
            tenant_id=tenant_id,
            source=source
        )

        self._log(
            SYMBOL_PROGRESS,
            f"preparing deployment ({len(deployment.resources)} resources)",
            {
                "name": deployment.name,
                "tenantId": deployment.tenant_id,
                "source": deployment.source,
                "resources": deployment.resource_names,
            }
        )
        self._log(SYMBOL_PROGRESS, "deploying to Camunda", endpoint_config.to_dict())

        deployer = Deployer(
            endpoint_config,
            timeout=resolve_request_timeout(env),
            transport=self.transport
        )
        result = run_async(deployer.deploy_async(deployment))

        summary = classify_deployment(result)
        logger.debug(
            "Deployment %s: %d created, %d updated",
            deployment.name,
            summary.created,
            summary.updated
        )

        if self.reporter:
            self.reporter.summary(summary)

        return summary

    def _log(self, symbol: str, message: str, payload: Any = None) -> None:
        if self.reporter:
            self.reporter.log(symbol, message, payload)
