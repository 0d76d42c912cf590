"""Resource collection from command line patterns"""

import glob
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..constants import GLOB_MAGIC_PATTERN
from ..models.deployment import Resource

logger = logging.getLogger(__name__)


def is_glob(pattern: str) -> bool:
    """Check if a pattern contains glob magic or brace characters"""
    return GLOB_MAGIC_PATTERN.search(pattern) is not None


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternatives into separate patterns

    Groups may be nested. Braces without a comma and unbalanced braces
    are kept literally.

    Examples:
        >>> expand_braces("*.{bpmn,dmn}")
        ['*.bpmn', '*.dmn']
        >>> expand_braces("{a,b{1,2}}.form")
        ['a.form', 'b1.form', 'b2.form']
    """
    depth = 0
    start = None
    commas: List[int] = []

    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = i
                commas = []
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth == 0 and commas:
                prefix, suffix = pattern[:start], pattern[i + 1:]
                bounds = [start] + commas + [i]
                expanded = []
                for lo, hi in zip(bounds, bounds[1:]):
                    for alternative in expand_braces(pattern[lo + 1:hi]):
                        for rest in expand_braces(suffix):
                            expanded.append(prefix + alternative + rest)
                return expanded
        elif ch == "," and depth == 1:
            commas.append(i)

    return [pattern]


def expand_patterns(patterns: Iterable[str],
                    cwd: Optional[Union[str, Path]] = None) -> List[str]:
    """Expand glob patterns into unique resource names

    Plain names are kept verbatim even if no such file exists; the
    deployer reports unreadable files. Names keep first-seen order.

    Args:
        patterns: File names or glob patterns
        cwd: Directory patterns are relative to

    Returns:
        Unique resource names relative to ``cwd``
    """
    root = Path(cwd) if cwd is not None else Path.cwd()
    names = {}

    for pattern in patterns:
        if not is_glob(pattern):
            names[pattern] = True
            continue

        matches = sorted({
            match
            for alternative in expand_braces(pattern)
            for match in glob.glob(alternative, root_dir=str(root), recursive=True)
            if not (root / match).is_dir()
        })

        if not matches:
            logger.warning("Pattern %r matched no files in %s", pattern, root)

        for match in matches:
            names[Path(match).as_posix()] = True

    return list(names)


def collect_resources(patterns: Iterable[str],
                      cwd: Optional[Union[str, Path]] = None) -> List[Resource]:
    """Build deployable resources from file names and glob patterns

    Args:
        patterns: File names or glob patterns
        cwd: Directory patterns are relative to

    Returns:
        One resource per unique name
    """
    root = Path(cwd) if cwd is not None else Path.cwd()

    return [
        Resource(name=name, path=root / name)
        for name in expand_patterns(patterns, root)
    ]
