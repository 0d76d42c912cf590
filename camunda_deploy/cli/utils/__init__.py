"""CLI utility functions"""

from .output import Reporter, print_error, sanitize, stringify

__all__ = [
    'Reporter',
    'print_error',
    'sanitize',
    'stringify',
]
