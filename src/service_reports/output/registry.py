"""Registry of open report writers, one append-mode handle per output path."""

from __future__ import annotations

import contextlib
import logging
import os
import threading
from typing import TextIO

from service_reports.core.constants import OUTPUT_ENCODING
from service_reports.core.exceptions import OutputError

logger = logging.getLogger(__name__)


class WriterRegistry:
    """Hands out a single open append-mode writer per output path.

    Every report written to the same path during a run goes through the same
    handle, so repeated sections for a service land in one file in input
    order. Files are opened with append semantics and never truncated.

    Handles stay open until :meth:`close_all`; use the registry as a context
    manager so they are released on error paths too::

        with WriterRegistry() as registry:
            writer = registry.get_writer("out/web.frontend")
            writer.write("...\\n")
    """

    def __init__(self, encoding: str = OUTPUT_ENCODING):
        self.encoding = encoding
        self._writers: dict[str, TextIO] = {}
        self._lock = threading.Lock()

    def get_writer(self, path: str | os.PathLike[str]) -> TextIO:
        """Return the open writer for ``path``, opening it in append mode if needed.

        Raises:
            OutputError: If the path cannot be opened for writing
        """
        key = os.fspath(path)
        with self._lock:
            writer = self._writers.get(key)
            if writer is not None:
                return writer
            try:
                writer = open(key, "a", encoding=self.encoding, newline="\n")
            except OSError as e:
                raise OutputError(
                    "Cannot open report file for writing",
                    output_path=key,
                    details=e.strerror or str(e),
                    original_error=e,
                ) from e
            self._writers[key] = writer
            logger.debug(f"Opened report writer: {key}")
            return writer

    def close_all(self) -> None:
        """Close every registered writer and forget it.

        Subsequent :meth:`get_writer` calls reopen the file.
        """
        with self._lock:
            writers, self._writers = self._writers, {}
        errors = []
        for path, writer in writers.items():
            try:
                writer.close()
            except OSError as e:
                logger.error(f"Failed to close report writer {path}: {e}")
                errors.append((path, e))
        if writers:
            logger.debug(f"Closed {len(writers)} report writer(s)")
        if errors:
            path, error = errors[0]
            raise OutputError(
                "Failed to close report file", output_path=path, details=str(error), original_error=error
            ) from error

    @property
    def open_paths(self) -> list[str]:
        """Paths with a currently registered writer, in open order."""
        with self._lock:
            return list(self._writers)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return os.fspath(path) in self._writers

    def __len__(self) -> int:
        return len(self._writers)

    def __enter__(self) -> WriterRegistry:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close_all()
            return
        # close_all logs each failed close; the in-flight exception keeps propagating.
        with contextlib.suppress(OutputError):
            self.close_all()
