# camunda_deploy/services/__init__.py
"""Business logic services for camunda-deploy"""

from .config_service import (
    resolve_endpoint_config,
    resolve_auth,
    resolve_request_timeout,
    load_environment,
)
from .deploy_service import DeployService

__all__ = [
    "resolve_endpoint_config",
    "resolve_auth",
    "resolve_request_timeout",
    "load_environment",
    "DeployService",
]
