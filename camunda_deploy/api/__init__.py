# camunda_deploy/api/__init__.py
"""API layer for camunda-deploy"""

from .exceptions import (
    CamundaDeployError,
    ConfigError,
    ValidationError,
    DeploymentError,
    DeploymentTransportError,
    ResourceError,
)
from .deployer import Deployer, deploy, get_auth_headers

__all__ = [
    # Main classes
    "Deployer",

    # Convenience functions
    "deploy",
    "get_auth_headers",

    # Exceptions
    "CamundaDeployError",
    "ConfigError",
    "ValidationError",
    "DeploymentError",
    "DeploymentTransportError",
    "ResourceError",
]
