"""Configuration utilities."""

import tempfile
import platformdirs
from pathlib import Path


def expand_path_variables(path: str, app_name: str = "path-relativizer") -> str:
    """Expand ${VAR} variables in paths.

    Supported variables:
        ${USER_HOME}: User's home directory
        ${USER_CONFIG}: User config directory for the application
        ${USER_CACHE}: User cache directory for the application
        ${USER_LOGS}: User log directory for the application
        ${TEMP}: Temporary directory

    Args:
        path: Path string with variables
        app_name: Application name used for per-app directories

    Returns:
        Expanded path string
    """
    if not isinstance(path, str):
        return path

    replacements = {
        "${USER_HOME}": str(Path.home()),
        "${USER_CONFIG}": platformdirs.user_config_dir(appname=app_name, appauthor=False),
        "${USER_CACHE}": platformdirs.user_cache_dir(appname=app_name, appauthor=False),
        "${USER_LOGS}": platformdirs.user_log_dir(appname=app_name, appauthor=False),
        "${TEMP}": tempfile.gettempdir(),
    }

    for var, value in replacements.items():
        path = path.replace(var, value)

    return path
