"""Deployment request models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..api.exceptions import ValidationError


@dataclass
class Resource:
    """A deployable file

    ``name`` is both the multipart field name and the file name the
    engine stores the artifact under.
    """

    name: str
    path: Path

    def __post_init__(self):
        if isinstance(self.path, str):
            self.path = Path(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "path": str(self.path)
        }


@dataclass
class DeploymentRequest:
    """A named set of resources deployed in one server-side transaction"""

    name: str
    resources: List[Resource] = field(default_factory=list)
    tenant_id: Optional[str] = None
    source: Optional[str] = None

    def __post_init__(self):
        """Validate request and collapse duplicate resource names"""
        if not self.name:
            raise ValidationError("missing deployment name")

        unique: Dict[str, Resource] = {}
        for resource in self.resources:
            unique[resource.name] = resource
        self.resources = list(unique.values())

    @property
    def resource_names(self) -> List[str]:
        """Names of all resources in request order"""
        return [r.name for r in self.resources]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "tenantId": self.tenant_id,
            "source": self.source,
            "resources": [r.to_dict() for r in self.resources]
        }
