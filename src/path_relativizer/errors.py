"""Error definitions for path_relativizer."""

from typing import Any, Dict


class PathRelativizerError(Exception):
    """Base exception for all path_relativizer errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class ConfigurationError(PathRelativizerError):
    """Configuration could not be loaded or failed validation."""
    pass


class InputFormatError(PathRelativizerError):
    """Batch input line does not hold exactly one source and one target."""
    pass
