"""Core functionality for camunda-deploy"""

from .resource_collector import collect_resources, expand_braces, expand_patterns, is_glob
from .result_classifier import classify_deployment, extract_artifacts

__all__ = [
    "collect_resources",
    "expand_braces",
    "expand_patterns",
    "is_glob",
    "classify_deployment",
    "extract_artifacts",
]
