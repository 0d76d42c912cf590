"""Pytest configuration and fixtures."""

import pytest

from .helpers import EngineStub


@pytest.fixture
def engine() -> EngineStub:
    """Engine stub answering every deployment with HTTP 200."""
    return EngineStub()


@pytest.fixture
def resource_dir(tmp_path):
    """Directory with a small mixed deployment."""
    (tmp_path / "invoice.bpmn").write_text("<definitions id='invoice'/>")
    (tmp_path / "approval.dmn").write_text("<definitions id='approval'/>")
    (tmp_path / "claim.cmmn").write_text("<definitions id='claim'/>")
    (tmp_path / "forms").mkdir()
    (tmp_path / "forms" / "start.form").write_text('{"components": []}')
    return tmp_path


@pytest.fixture
def deployment_result() -> dict:
    """Engine answer for a deployment with new and updated definitions."""
    return {
        "id": "deployment-1",
        "name": "invoice",
        "deployedProcessDefinitions": {
            "invoice:1:abc": {
                "key": "invoice",
                "resource": "invoice.bpmn",
                "version": 1,
                "versionTag": None,
            },
            "review:3:def": {
                "key": "review",
                "resource": "invoice.bpmn",
                "version": 3,
                "versionTag": "v3",
            },
        },
        "deployedCaseDefinitions": None,
        "deployedDecisionDefinitions": {
            "approval:2:ghi": {
                "key": "approval",
                "resource": "approval.dmn",
                "version": 2,
            },
        },
        "deployedDecisionRequirementsDefinitions": {},
    }
