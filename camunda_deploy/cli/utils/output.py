# camunda_deploy/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any, Optional

from rich.console import Console
from rich.padding import Padding
from rich.syntax import Syntax

from ...constants import (
    REDACTED_KEYS,
    REDACTED_VALUE,
    SYMBOL_SUCCESS,
    SYMBOL_ERROR,
    SYMBOL_DONE,
    MSG_VERBOSE_HINT,
)
from ...models import DeploymentSummary

console = Console()
error_console = Console(stderr=True)


def sanitize(data: Any, key: Optional[str] = None) -> Any:
    """Drop empty values and mask credentials before display

    Args:
        data: JSON-able data
        key: Key the data is stored under in its parent

    Returns:
        Copy of the data safe to print
    """
    if key in REDACTED_KEYS and data is not None:
        return REDACTED_VALUE

    if isinstance(data, dict):
        return {
            k: sanitize(v, k)
            for k, v in data.items()
            if v is not None
        }

    if isinstance(data, (list, tuple)):
        return [sanitize(item) for item in data if item is not None]

    return data


def stringify(data: Any) -> str:
    """Serialize data as indented JSON with credentials masked"""
    return json.dumps(sanitize(data), indent=2, default=str, ensure_ascii=False)


class Reporter:
    """Progress reporter for a deployment run

    Each line starts with a status symbol. In verbose mode the payload
    passed along with a line is printed below it as JSON.
    """

    def __init__(self,
                 verbose: bool = False,
                 quiet: bool = False,
                 out: Console = None,
                 err: Console = None):
        self.verbose = verbose
        self.quiet = quiet
        self.out = out or console
        self.err = err or error_console

    def log(self, symbol: str, message: str, payload: Any = None) -> None:
        """Print a status line"""
        if self.quiet:
            return

        target = self.err if symbol == SYMBOL_ERROR else self.out
        target.print(f" {symbol} {message}", highlight=False, soft_wrap=True)

        if self.verbose and payload:
            syntax = Syntax(stringify(payload), "json", theme="monokai", background_color="default")
            target.print(Padding(syntax, (0, 0, 0, 3)))

    def summary(self, summary: DeploymentSummary) -> None:
        """Print the created/updated breakdown of a deployment"""
        if summary.is_empty:
            self.log(SYMBOL_DONE, "[bold]no artifacts updated/added[/bold]")
            return

        self.log(
            SYMBOL_SUCCESS,
            f"[bold]{summary.total} artifacts deployed "
            f"({summary.created} added, {summary.updated} updated)[/bold]",
            summary.to_dict()
        )


def print_error(message: str, verbose: bool = False, json_output: bool = False) -> None:
    """Print a failure the way the deploy command reports it"""
    error_console.print(f" {SYMBOL_ERROR} {message}", markup=False, highlight=False, soft_wrap=True)

    if verbose:
        error_console.print_exception()

    if not json_output and not verbose:
        console.print(f"\n{MSG_VERBOSE_HINT}", highlight=False)
