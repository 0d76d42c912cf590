"""Unit tests for endpoint configuration resolution."""

import pytest

from camunda_deploy.api.exceptions import ConfigError
from camunda_deploy.constants import DEFAULT_REQUEST_TIMEOUT
from camunda_deploy.models import BasicAuth, BearerAuth, NoAuth
from camunda_deploy.services.config_service import (
    load_environment,
    resolve_endpoint_config,
    resolve_request_timeout,
)

URL = "http://localhost:8080/engine-rest"


class TestResolveEndpointConfig:
    def test_url_only_means_anonymous(self):
        config = resolve_endpoint_config({"CAMUNDA_URL": URL})

        assert config.url == URL
        assert config.auth == NoAuth()

    @pytest.mark.parametrize("env", [
        {},
        {"CAMUNDA_URL": ""},
        {"CAMUNDA_AUTH_USERNAME": "demo", "CAMUNDA_AUTH_PASSWORD": "demo"},
        {"CAMUNDA_URL": "", "CAMUNDA_AUTH_BEARER": "abc"},
    ])
    def test_missing_url_fails(self, env):
        with pytest.raises(ConfigError, match="CAMUNDA_URL not configured"):
            resolve_endpoint_config(env)

    def test_username_selects_basic_auth(self):
        config = resolve_endpoint_config({
            "CAMUNDA_URL": URL,
            "CAMUNDA_AUTH_USERNAME": "demo",
            "CAMUNDA_AUTH_PASSWORD": "secret",
        })

        assert config.auth == BasicAuth(username="demo", password="secret")

    def test_basic_auth_without_password(self):
        config = resolve_endpoint_config({
            "CAMUNDA_URL": URL,
            "CAMUNDA_AUTH_USERNAME": "demo",
        })

        assert config.auth == BasicAuth(username="demo", password="")

    def test_username_wins_over_bearer_token(self):
        config = resolve_endpoint_config({
            "CAMUNDA_URL": URL,
            "CAMUNDA_AUTH_USERNAME": "demo",
            "CAMUNDA_AUTH_PASSWORD": "secret",
            "CAMUNDA_AUTH_BEARER": "abc",
        })

        assert isinstance(config.auth, BasicAuth)

    def test_bearer_token_without_username(self):
        config = resolve_endpoint_config({
            "CAMUNDA_URL": URL,
            "CAMUNDA_AUTH_USERNAME": "",
            "CAMUNDA_AUTH_BEARER": "abc",
        })

        assert config.auth == BearerAuth(token="abc")

    def test_empty_bearer_token_means_anonymous(self):
        config = resolve_endpoint_config({"CAMUNDA_URL": URL, "CAMUNDA_AUTH_BEARER": ""})

        assert config.auth == NoAuth()


class TestResolveRequestTimeout:
    def test_default(self):
        assert resolve_request_timeout({}) == DEFAULT_REQUEST_TIMEOUT

    def test_from_environment(self):
        assert resolve_request_timeout({"CAMUNDA_DEPLOY_TIMEOUT": "2.5"}) == 2.5

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_invalid_values(self, value):
        with pytest.raises(ConfigError, match="CAMUNDA_DEPLOY_TIMEOUT"):
            resolve_request_timeout({"CAMUNDA_DEPLOY_TIMEOUT": value})


class TestLoadEnvironment:
    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(f"CAMUNDA_URL={URL}\nCAMUNDA_AUTH_BEARER=abc\n")
        environ = {}

        env = load_environment(env_file, environ)

        assert env["CAMUNDA_URL"] == URL
        assert environ["CAMUNDA_AUTH_BEARER"] == "abc"

    def test_existing_variables_win(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CAMUNDA_URL=http://from-file\n")
        environ = {"CAMUNDA_URL": URL}

        env = load_environment(env_file, environ)

        assert env["CAMUNDA_URL"] == URL

    def test_missing_explicit_env_file(self, tmp_path):
        with pytest.raises(ConfigError, match="nope.env"):
            load_environment(tmp_path / "nope.env", {})

    def test_env_file_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text(f"CAMUNDA_URL={URL}\n")
        monkeypatch.chdir(tmp_path)

        assert load_environment(environ={})["CAMUNDA_URL"] == URL

    def test_parent_env_file_is_not_read(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("CAMUNDA_URL=http://parent\n")
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.chdir(project)

        assert load_environment(environ={}) == {}

    def test_without_env_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        environ = {"CAMUNDA_URL": URL}

        assert load_environment(environ=environ) == {"CAMUNDA_URL": URL}

    def test_returns_snapshot(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        environ = {"CAMUNDA_URL": URL}

        env = load_environment(environ=environ)
        env["CAMUNDA_URL"] = "changed"

        assert environ["CAMUNDA_URL"] == URL
