"""Deployment result models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from ..constants import INITIAL_ARTIFACT_VERSION


@dataclass
class DeployedArtifact:
    """A single definition reported back by the engine"""

    key: Optional[str] = None
    resource: Optional[str] = None
    version: Any = None
    version_tag: Optional[str] = None

    @property
    def is_created(self) -> bool:
        """Check if the engine registered this artifact for the first time

        Only a numeric version of exactly 1 counts. A missing version is
        not 1 and therefore reads as an update.
        """
        if isinstance(self.version, bool):
            return False
        return self.version == INITIAL_ARTIFACT_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "key": self.key,
            "resource": self.resource,
            "version": self.version,
            "versionTag": self.version_tag
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployedArtifact':
        """Create from an engine definition descriptor"""
        return cls(
            key=data.get("key"),
            resource=data.get("resource"),
            version=data.get("version"),
            version_tag=data.get("versionTag")
        )


@dataclass
class DeploymentSummary:
    """Created/updated breakdown of a deployment result"""

    artifacts: Dict[str, List[DeployedArtifact]] = field(default_factory=dict)
    created: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        """Total number of deployed artifacts"""
        return self.created + self.updated

    @property
    def is_empty(self) -> bool:
        """Check if nothing was added or updated"""
        return self.total == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary keyed by artifact type"""
        return {
            name: [a.to_dict() for a in deployed]
            for name, deployed in self.artifacts.items()
        }
