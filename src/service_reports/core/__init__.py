"""Core module - Foundation components with no internal dependencies.

This module provides the basic building blocks used throughout the application:
- Version information
- Custom exceptions
- Configuration dataclasses
- Constants and defaults
- Console colors
"""

from service_reports.core.version import __version__

from service_reports.core.exceptions import (
    ServiceReportsError,
    ConfigurationError,
    InputFileError,
    OutputError,
    ReportError,
    RecordParseError,
)

from service_reports.core.config import (
    LogConfig,
    ReportConfig,
)

from service_reports.core.constants import (
    BANNER_WIDTH,
    ENV_LOG_LEVEL,
    ENV_OUTPUT_DIR,
    ENV_ZIPKIN_URL,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    EXIT_USAGE,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
)

from service_reports.core.colors import ConsoleColors

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'ServiceReportsError',
    'ConfigurationError',
    'InputFileError',
    'OutputError',
    'ReportError',
    'RecordParseError',
    # Config dataclasses
    'LogConfig',
    'ReportConfig',
    # Constants
    'BANNER_WIDTH',
    'ENV_LOG_LEVEL',
    'ENV_OUTPUT_DIR',
    'ENV_ZIPKIN_URL',
    'EXIT_FAILURE',
    'EXIT_SUCCESS',
    'EXIT_USAGE',
    'LOG_FILE_BACKUP_COUNT',
    'LOG_FILE_MAX_BYTES',
    # Colors
    'ConsoleColors',
]
