"""Custom exceptions for service-reports.

All exception classes carry enough context (paths, service names, offending
values) to produce an actionable message without a traceback.
"""


class ServiceReportsError(Exception):
    """Base exception for all service-reports errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(ServiceReportsError):
    """Exception raised for configuration-related errors.

    Examples:
        - Unknown report kind
        - Trace report requested without a zipkin URL
        - Negative name distance
    """

    def __init__(self, message: str, field: str | None = None, details: str | None = None):
        self.field = field
        super().__init__(message, details)


class InputFileError(ServiceReportsError):
    """Exception raised when an input file cannot be read.

    Raised before any output writer is opened.
    """

    def __init__(
        self,
        message: str,
        input_path: str | None = None,
        details: str | None = None,
        original_error: Exception | None = None,
    ):
        self.input_path = input_path
        self.original_error = original_error
        super().__init__(message, details)


class OutputError(ServiceReportsError):
    """Exception raised for report file writing failures.

    Examples:
        - Permission denied
        - Output path is a directory
        - Disk full
    """

    def __init__(
        self,
        message: str,
        output_path: str | None = None,
        details: str | None = None,
        original_error: Exception | None = None,
    ):
        self.output_path = output_path
        self.original_error = original_error
        super().__init__(message, details)


class ReportError(ServiceReportsError):
    """Exception raised when a single service record cannot be rendered."""

    def __init__(
        self, message: str, service: str | None = None, kind: str | None = None, details: str | None = None
    ):
        self.service = service
        self.kind = kind
        super().__init__(message, details)

    def __str__(self) -> str:
        parts = [self.message]
        if self.kind:
            parts.append(f"report {self.kind}")
        if self.service:
            parts.append(f"service {self.service}")
        if self.details:
            parts.append(self.details)
        return " - ".join(parts)


class RecordParseError(ReportError):
    """Raised when a record value cannot be parsed for its report kind.

    MemcacheRequest values must be integers; there is no default or skip.
    """

    def __init__(self, message: str, service: str | None = None, value: str | None = None, kind: str | None = None):
        self.value = value
        details = f"value {value!r}" if value is not None else None
        super().__init__(message, service=service, kind=kind, details=details)
