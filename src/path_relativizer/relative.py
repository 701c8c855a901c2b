"""Relative path computation between two slash-delimited paths."""

import logging
from dataclasses import dataclass
from typing import Sequence

from .normalizer import normalize
from .segments import PARENT, SEPARATOR, dirname, segment

logger = logging.getLogger(__name__)

UP_MOVE = PARENT + SEPARATOR


@dataclass(frozen=True)
class PathDiff:
    """Ascent count and remaining descent between two normalized paths."""
    up_count: int
    down_segments: tuple[str, ...]


def _common_prefix_length(left: Sequence[str], right: Sequence[str]) -> int:
    length = 0
    for a, b in zip(left, right):
        if a != b:
            break
        length += 1
    return length


def diff(source_dir_norm: Sequence[str], target_norm: Sequence[str]) -> PathDiff:
    """
    Compare a normalized source directory against a normalized target.

    Leftover '..' markers at the head of the target's remainder become
    extra up-moves instead of literal components.

    Args:
        source_dir_norm: Normalized components of the source's directory
        target_norm: Normalized components of the target

    Returns:
        PathDiff with a non-negative ``up_count``
    """
    common = _common_prefix_length(source_dir_norm, target_norm)
    up_count = len(source_dir_norm) - common
    remainder = list(target_norm[common:])

    while remainder and remainder[0] == PARENT:
        up_count += 1
        remainder.pop(0)

    return PathDiff(up_count=up_count, down_segments=tuple(remainder))


def format_relative(up_count: int, down_segments: Sequence[str]) -> str:
    """
    Render an up-count and descent as a relative path string.

    Raises:
        ValueError: If ``up_count`` is negative
    """
    if up_count < 0:
        raise ValueError(f"up_count must be non-negative, got {up_count}")
    if up_count == 0 and not down_segments:
        return ""
    return UP_MOVE * up_count + SEPARATOR.join(down_segments)


def relative(source: str, target: str) -> str:
    """
    Shortest path that leads from the directory containing ``source`` to
    ``target``.

    Defined for every string input, including empty strings and paths
    that escape above the implicit root.

    Args:
        source: Path of the referring file
        target: Path being referred to

    Returns:
        Relative path, empty when both resolve to the same place

    Examples:
        >>> relative("a/b", "c/d")
        '../c/d'
        >>> relative("a/b", "..")
        '../../'
    """
    result = diff(normalize(dirname(source)), normalize(segment(target)))
    rendered = format_relative(result.up_count, result.down_segments)
    logger.debug(f"relative({source!r}, {target!r}) = {rendered!r}")
    return rendered


def normal(path: str) -> str:
    """Normalized form of ``path`` joined back with slashes."""
    return SEPARATOR.join(normalize(segment(path)))


def resolve(source: str, relative_path: str) -> str:
    """
    Resolve ``relative_path`` against the directory containing ``source``.

    Inverse of ``relative()``: ``resolve(s, relative(s, t)) == normal(t)``
    provided the directory of ``s`` does not escape above the root further
    than ``t`` does. ``relative("../../x/f", "y")`` has no such inverse.

    Args:
        source: Path of the referring file
        relative_path: Path expression relative to the source's directory

    Returns:
        Normalized resolved path
    """
    return SEPARATOR.join(normalize(dirname(source) + segment(relative_path)))
