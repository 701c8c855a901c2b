"""Resolution of '.' and '..' components."""

from typing import Iterable, Sequence

from .segments import CURRENT, PARENT


def normalize(segments: Iterable[str]) -> list[str]:
    """
    Resolve ``.`` and ``..`` components against a virtual stack.

    A ``..`` cancels the preceding plain component. When there is nothing
    left to cancel it is kept as an above-root marker, so the result is a
    run of ``..`` markers followed by plain components and no input is
    ever rejected.

    Args:
        segments: Path components, e.g. from ``segment()``

    Returns:
        New normalized list of components

    Examples:
        >>> normalize(["a", ".", "..", "..", "b"])
        ['..', 'b']
    """
    stack: list[str] = []
    for part in segments:
        if part in ("", CURRENT):
            continue
        if part == PARENT:
            if stack and stack[-1] != PARENT:
                stack.pop()
            else:
                stack.append(PARENT)
        else:
            stack.append(part)
    return stack


def escape_depth(segments: Sequence[str]) -> int:
    """Number of leading '..' markers in a normalized path."""
    depth = 0
    for part in segments:
        if part != PARENT:
            break
        depth += 1
    return depth


def is_normalized(segments: Sequence[str]) -> bool:
    """
    Check that ``segments`` is a run of '..' markers followed only by
    plain components.
    """
    for part in segments[escape_depth(segments):]:
        if part in ("", CURRENT, PARENT):
            return False
    return True
