"""Unit tests for deployment result classification."""

import pytest

from camunda_deploy.core.result_classifier import classify_deployment, extract_artifacts
from camunda_deploy.models import DeployedArtifact


class TestClassifyDeployment:
    def test_created_and_updated_process_definitions(self):
        result = {
            "deployedProcessDefinitions": {
                "a": {"key": "k1", "resource": "r1", "version": 1},
                "b": {"key": "k2", "resource": "r2", "version": 2},
            }
        }

        summary = classify_deployment(result)

        assert summary.to_dict() == {
            "processDefinitions": [
                {"key": "k1", "resource": "r1", "version": 1, "versionTag": None},
                {"key": "k2", "resource": "r2", "version": 2, "versionTag": None},
            ]
        }
        assert summary.created == 1
        assert summary.updated == 1
        assert summary.total == 2

    def test_empty_result(self):
        summary = classify_deployment({})

        assert summary.created == 0
        assert summary.updated == 0
        assert summary.artifacts == {}
        assert summary.is_empty

    def test_all_artifact_types(self, deployment_result):
        deployment_result["deployedCaseDefinitions"] = {
            "claim:1:xyz": {"key": "claim", "resource": "claim.cmmn", "version": 1},
        }
        deployment_result["deployedDecisionRequirementsDefinitions"] = {
            "approval-drd:4:jkl": {"key": "approval-drd", "resource": "approval.dmn", "version": 4},
        }

        summary = classify_deployment(deployment_result)

        assert list(summary.artifacts) == [
            "processDefinitions",
            "caseDefinitions",
            "decisionDefinitions",
            "decisionRequirementsDefinitions",
        ]
        assert summary.created == 2
        assert summary.updated == 3

    def test_null_and_empty_types_are_omitted(self, deployment_result):
        summary = classify_deployment(deployment_result)

        assert "caseDefinitions" not in summary.artifacts
        assert "decisionRequirementsDefinitions" not in summary.artifacts
        assert summary.artifacts["decisionDefinitions"] == [
            DeployedArtifact(key="approval", resource="approval.dmn", version=2),
        ]

    def test_version_tag_is_kept(self, deployment_result):
        summary = classify_deployment(deployment_result)

        review = summary.artifacts["processDefinitions"][1]
        assert review.version_tag == "v3"
        assert review.to_dict()["versionTag"] == "v3"

    def test_unrelated_keys_are_ignored(self):
        summary = classify_deployment({
            "id": "deployment-1",
            "deployedForms": {"f": {"key": "form", "version": 1}},
        })

        assert summary.is_empty

    @pytest.mark.parametrize("result", ["OK", None, [], 42])
    def test_non_object_result_is_empty(self, result):
        summary = classify_deployment(result)

        assert summary.is_empty
        assert summary.to_dict() == {}

    # Boundary cases of the "exactly version 1 means created" rule. A
    # missing version is counted as an update; confirm against a real
    # engine before relying on it.
    @pytest.mark.parametrize("version, created", [
        (1, True),
        (1.0, True),
        (2, False),
        (0, False),
        (None, False),
        ("1", False),
        (True, False),
    ])
    def test_only_version_one_counts_as_created(self, version, created):
        descriptor = {"key": "k", "resource": "r.bpmn"}
        if version is not None:
            descriptor["version"] = version

        summary = classify_deployment({"deployedProcessDefinitions": {"a": descriptor}})

        assert summary.created == (1 if created else 0)
        assert summary.updated == (0 if created else 1)


class TestExtractArtifacts:
    def test_missing_key(self):
        assert extract_artifacts({}, "deployedProcessDefinitions") == []

    def test_non_mapping_value(self):
        assert extract_artifacts({"deployedProcessDefinitions": ["a"]}, "deployedProcessDefinitions") == []

    def test_skips_malformed_descriptors(self):
        artifacts = extract_artifacts(
            {"deployedProcessDefinitions": {"a": None, "b": {"key": "k", "version": 1}}},
            "deployedProcessDefinitions",
        )

        assert artifacts == [DeployedArtifact(key="k", version=1)]
