"""Endpoint configuration models"""

from dataclasses import dataclass, field
from typing import Dict, Any, Union

from ..api.exceptions import ConfigError


@dataclass(frozen=True)
class NoAuth:
    """Anonymous access"""

    type: str = field(default="none", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"type": self.type}


@dataclass(frozen=True)
class BasicAuth:
    """HTTP basic authentication"""

    username: str
    password: str = ""
    type: str = field(default="basic", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "type": self.type,
            "username": self.username,
            "password": self.password
        }


@dataclass(frozen=True)
class BearerAuth:
    """Bearer token authentication"""

    token: str
    type: str = field(default="bearer", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "type": self.type,
            "token": self.token
        }


AuthMode = Union[NoAuth, BasicAuth, BearerAuth]


@dataclass(frozen=True)
class EndpointConfig:
    """Engine REST endpoint and the credentials used to call it"""

    url: str
    auth: AuthMode = field(default_factory=NoAuth)

    def __post_init__(self):
        """Validate endpoint configuration"""
        if not self.url:
            raise ConfigError("Endpoint URL must not be empty")

    @property
    def base_url(self) -> str:
        """Endpoint URL without trailing slash"""
        return self.url.rstrip('/')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "url": self.url,
            "auth": self.auth.to_dict()
        }
