"""Camunda Deploy - deploy BPMN, CMMN and DMN resources to a Camunda engine.

Resources are uploaded in a single deployment through the engine's REST
API. The engine result is classified into newly created and updated
definitions.
"""

from .__version__ import __version__, __version_info__, __license__

# Core API
from .api.deployer import Deployer, deploy, get_auth_headers

# Data models
from .models import (
    EndpointConfig,
    AuthMode,
    NoAuth,
    BasicAuth,
    BearerAuth,
    Resource,
    DeploymentRequest,
    DeployedArtifact,
    DeploymentSummary,
)

# Exceptions
from .api.exceptions import (
    CamundaDeployError,
    ConfigError,
    ValidationError,
    DeploymentError,
    DeploymentTransportError,
    ResourceError,
)

# Services
from .core import classify_deployment, collect_resources
from .services import resolve_endpoint_config, load_environment, DeployService

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Deployer",
    "DeployService",

    # Core API functions
    "deploy",
    "get_auth_headers",
    "resolve_endpoint_config",
    "load_environment",
    "classify_deployment",
    "collect_resources",

    # Data models
    "EndpointConfig",
    "AuthMode",
    "NoAuth",
    "BasicAuth",
    "BearerAuth",
    "Resource",
    "DeploymentRequest",
    "DeployedArtifact",
    "DeploymentSummary",

    # Exceptions
    "CamundaDeployError",
    "ConfigError",
    "ValidationError",
    "DeploymentError",
    "DeploymentTransportError",
    "ResourceError",
]
