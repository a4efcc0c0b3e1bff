"""Output module - report file writer registry."""

from service_reports.output.registry import WriterRegistry

__all__ = ["WriterRegistry"]
