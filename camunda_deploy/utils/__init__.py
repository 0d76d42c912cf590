"""Utility functions for camunda-deploy"""

from .async_utils import run_async

__all__ = [
    "run_async",
]
