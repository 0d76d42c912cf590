# camunda_deploy/models/__init__.py
"""Data models for camunda-deploy"""

from .config import EndpointConfig, AuthMode, NoAuth, BasicAuth, BearerAuth
from .deployment import Resource, DeploymentRequest
from .result import DeployedArtifact, DeploymentSummary

__all__ = [
    # Config models
    "EndpointConfig",
    "AuthMode",
    "NoAuth",
    "BasicAuth",
    "BearerAuth",

    # Deployment models
    "Resource",
    "DeploymentRequest",

    # Result models
    "DeployedArtifact",
    "DeploymentSummary",
]
