"""Relative path computation over abstract slash-delimited paths."""

from .segments import segment, dirname
from .normalizer import normalize, is_normalized, escape_depth
from .relative import PathDiff, diff, format_relative, relative, normal, resolve
from .errors import PathRelativizerError, ConfigurationError, InputFormatError
from .config import ConfigLoader
from .schema import RelativizerConfig, OutputConfig
from .logging_config import LoggingConfig
from .logging import setup_logging, LogContext

__version__ = "0.1.0"

__all__ = [
    'segment',
    'dirname',
    'normalize',
    'is_normalized',
    'escape_depth',
    'PathDiff',
    'diff',
    'format_relative',
    'relative',
    'normal',
    'resolve',
    'PathRelativizerError',
    'ConfigurationError',
    'InputFormatError',
    'ConfigLoader',
    'RelativizerConfig',
    'OutputConfig',
    'LoggingConfig',
    'setup_logging',
    'LogContext',
]
