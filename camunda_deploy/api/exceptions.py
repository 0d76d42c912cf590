"""Exception definitions for camunda-deploy API"""

from typing import Optional, TYPE_CHECKING

from ..constants import ErrorCode

if TYPE_CHECKING:
    from ..models.deployment import DeploymentRequest


class CamundaDeployError(Exception):
    """Base exception for camunda-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigError(CamundaDeployError):
    """Endpoint configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class ValidationError(CamundaDeployError):
    """Invalid deployment request or option combination"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_ERROR)


class DeploymentError(CamundaDeployError):
    """The engine rejected the deployment

    Carries the HTTP details of the failed response together with the
    request that caused it.
    """

    def __init__(self,
                 message: str,
                 deployment: 'DeploymentRequest',
                 status: Optional[int] = None,
                 status_text: Optional[str] = None,
                 url: Optional[str] = None,
                 error_code: str = ErrorCode.DEPLOYMENT_FAILED):
        super().__init__(message, error_code)
        self.deployment = deployment
        self.status = status
        self.status_text = status_text
        self.url = url

    def to_dict(self):
        """Convert to dictionary"""
        return {
            "message": self.message,
            "code": self.error_code,
            "status": self.status,
            "statusText": self.status_text,
            "url": self.url,
            "deployment": self.deployment.to_dict() if self.deployment else None,
        }


class DeploymentTransportError(DeploymentError):
    """No HTTP response was received (connection refused, DNS, timeout)"""

    def __init__(self, message: str, deployment: 'DeploymentRequest', url: Optional[str] = None):
        super().__init__(
            message,
            deployment,
            url=url,
            error_code=ErrorCode.TRANSPORT_FAILED
        )


class ResourceError(DeploymentError):
    """A resource file could not be read"""

    def __init__(self, message: str, deployment: 'DeploymentRequest', path: str):
        super().__init__(
            message,
            deployment,
            error_code=ErrorCode.RESOURCE_UNREADABLE
        )
        self.path = path
