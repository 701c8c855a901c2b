"""Splitting slash-delimited path strings into segments."""

SEPARATOR = "/"
CURRENT = "."
PARENT = ".."


def segment(path: str) -> list[str]:
    """
    Split a path into its non-empty components.

    Leading, trailing and repeated slashes collapse, so ``segment("")``
    and ``segment("/")`` are both empty.

    Args:
        path: Slash-delimited path string

    Returns:
        New list of components in original order

    Examples:
        >>> segment("a//b/")
        ['a', 'b']
    """
    return [part for part in path.split(SEPARATOR) if part]


def dirname(path: str) -> list[str]:
    """
    Components of the directory containing ``path``.

    The path is taken to name a file, so its last component is dropped.
    A path with zero or one component has no parent components.

    Args:
        path: Slash-delimited path string

    Returns:
        New list of the parent directory's components
    """
    parts = segment(path)
    if len(parts) <= 1:
        return []
    return parts[:-1]
