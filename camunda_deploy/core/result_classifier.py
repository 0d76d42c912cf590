"""Classification of engine deployment results"""

import logging
from typing import Any, List, Mapping

from ..constants import DEPLOYED_ARTIFACT_TYPES
from ..models.result import DeployedArtifact, DeploymentSummary

logger = logging.getLogger(__name__)


def extract_artifacts(result: Any, key: str) -> List[DeployedArtifact]:
    """Flatten one ``deployed*Definitions`` mapping of a result

    Args:
        result: Engine deployment result
        key: Response key, e.g. ``deployedProcessDefinitions``

    Returns:
        Deployed artifacts in response order, empty if the key is absent
    """
    if not isinstance(result, Mapping):
        return []

    deployed = result.get(key)
    if not isinstance(deployed, Mapping):
        return []

    return [
        DeployedArtifact.from_dict(descriptor)
        for descriptor in deployed.values()
        if isinstance(descriptor, Mapping)
    ]


def classify_deployment(result: Any) -> DeploymentSummary:
    """Split a deployment result into created and updated artifacts

    Version 1 counts as created, anything else as updated.

    Args:
        result: Engine deployment result

    Returns:
        Summary with non-empty artifact lists per type
    """
    summary = DeploymentSummary()

    if not isinstance(result, Mapping):
        logger.debug("Deployment result is not an object: %r", result)
        return summary

    for key, name in DEPLOYED_ARTIFACT_TYPES:
        artifacts = extract_artifacts(result, key)

        if artifacts:
            summary.artifacts[name] = artifacts

        for artifact in artifacts:
            if artifact.is_created:
                summary.created += 1
            else:
                summary.updated += 1

    return summary
