"""Endpoint configuration service"""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional, Union

from dotenv import dotenv_values

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DOTENV_FILE,
    ENV_URL,
    ENV_AUTH_USERNAME,
    ENV_AUTH_PASSWORD,
    ENV_AUTH_BEARER,
    ENV_REQUEST_TIMEOUT,
)
from ..models.config import EndpointConfig, AuthMode, NoAuth, BasicAuth, BearerAuth

logger = logging.getLogger(__name__)


def resolve_endpoint_config(env: Mapping[str, str]) -> EndpointConfig:
    """Build the endpoint configuration from environment variables

    A username selects basic auth even when a bearer token is present
    too. Without either, requests are anonymous.

    Args:
        env: Environment mapping

    Returns:
        Endpoint configuration

    Raises:
        ConfigError: If CAMUNDA_URL is missing or empty
    """
    url = env.get(ENV_URL)

    if not url:
        raise ConfigError(
            f"{ENV_URL} not configured, please specify it via environment variable"
        )

    return EndpointConfig(url=url, auth=resolve_auth(env))


def resolve_auth(env: Mapping[str, str]) -> AuthMode:
    """Select the auth mode from environment variables"""
    username = env.get(ENV_AUTH_USERNAME)
    if username:
        return BasicAuth(username=username, password=env.get(ENV_AUTH_PASSWORD) or "")

    token = env.get(ENV_AUTH_BEARER)
    if token:
        return BearerAuth(token=token)

    return NoAuth()


def resolve_request_timeout(env: Mapping[str, str]) -> float:
    """Read the request timeout in seconds from the environment"""
    value = env.get(ENV_REQUEST_TIMEOUT)
    if not value:
        return DEFAULT_REQUEST_TIMEOUT

    try:
        timeout = float(value)
    except ValueError:
        raise ConfigError(f"{ENV_REQUEST_TIMEOUT} must be a number of seconds, got {value!r}")

    if timeout <= 0:
        raise ConfigError(f"{ENV_REQUEST_TIMEOUT} must be positive, got {value!r}")

    return timeout


def load_environment(dotenv_path: Optional[Union[str, Path]] = None,
                     environ: Optional[MutableMapping[str, str]] = None) -> Dict[str, str]:
    """Merge a .env file into the environment

    Variables that are already set win over the file.

    Args:
        dotenv_path: Explicit .env file. When not given, ``.env`` in the
            working directory is read if it exists.
        environ: Environment to update, defaults to os.environ

    Returns:
        Snapshot of the resulting environment

    Raises:
        ConfigError: If an explicit ``dotenv_path`` is not a file
    """
    if environ is None:
        environ = os.environ

    if dotenv_path is not None:
        dotenv_path = Path(dotenv_path)
        if not dotenv_path.is_file():
            raise ConfigError(f"Env file not found: {dotenv_path}")
    else:
        dotenv_path = Path.cwd() / DOTENV_FILE

    if dotenv_path.is_file():
        logger.debug("Loading environment from %s", dotenv_path)
        for key, value in dotenv_values(dotenv_path).items():
            if value is not None and key not in environ:
                environ[key] = value

    return dict(environ)
