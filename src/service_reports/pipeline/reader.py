"""Input reading: pre-scan service names, group lines per service, dispatch.

Input files hold one ``service value`` pair per line, as written by the
upstream analysis jobs. Consecutive lines for the same service form one
record; each record becomes one report section in ``{output_dir}/{service}``.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from tqdm import tqdm

from service_reports.core.config import ReportConfig
from service_reports.core.constants import TQDM_BAR_FORMAT
from service_reports.core.exceptions import ConfigurationError, InputFileError, OutputError, ReportError
from service_reports.core.logging import with_log_context
from service_reports.output.registry import WriterRegistry
from service_reports.pipeline.models import ProcessingResult
from service_reports.pipeline.names import ServiceNameList, normalize_service_name
from service_reports.reports.formatter import write_report
from service_reports.reports.kinds import ReportKind
from service_reports.reports.models import OutputRecord


def _open_input(path: str | os.PathLike[str]) -> TextIO:
    try:
        return open(path, encoding="utf-8")
    except FileNotFoundError as e:
        raise InputFileError("Input file not found", input_path=os.fspath(path), original_error=e) from e
    except OSError as e:
        raise InputFileError(
            "Cannot read input file", input_path=os.fspath(path), details=e.strerror or str(e), original_error=e
        ) from e


def _read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield an input file's lines; decode and read failures become InputFileError."""
    with _open_input(path) as handle:
        try:
            yield from handle
        except UnicodeDecodeError as e:
            raise InputFileError(
                "Input file is not valid UTF-8", input_path=os.fspath(path), details=str(e), original_error=e
            ) from e
        except OSError as e:
            raise InputFileError(
                "Cannot read input file", input_path=os.fspath(path), details=e.strerror or str(e), original_error=e
            ) from e


class InputReader:
    """Reads one report kind's input files and writes the per-service reports.

    Args:
        kind: Report kind (or its job name)
        registry: Registry that owns the output handles for the whole run
        config: Run configuration; ``combine_similar_names=None`` uses the kind's default
        logger: Optional logger; a module logger is used otherwise
    """

    def __init__(
        self,
        kind: ReportKind | str,
        registry: WriterRegistry,
        config: ReportConfig | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        self.kind = ReportKind.from_name(kind)
        self.registry = registry
        self.config = config or ReportConfig(kind=self.kind.job_name)
        if self.kind.requires_zipkin_url and not self.config.zipkin_url:
            raise ConfigurationError(
                f"{self.kind.job_name} reports need a zipkin URL",
                field="zipkin_url",
                details="set --zipkin-url or ZIPKIN_URL",
            )
        if self.config.combine_similar_names is None:
            self.combine_similar_names = self.kind.combines_similar_names
        else:
            self.combine_similar_names = self.config.combine_similar_names
        self.job_name = self.config.job_name or self.kind.job_name
        self.output_dir = self.config.output_dir
        self.service_names = ServiceNameList(max_distance=self.config.max_name_distance)
        self.logger = with_log_context(logger or logging.getLogger(__name__), job=self.job_name)
        self._output_dir_ready = False

    def service_key(self, token: str) -> str:
        """Map a raw service token to its grouping key and output filename."""
        name = normalize_service_name(token)
        if self.combine_similar_names:
            return self.service_names.get_name(name)
        return name

    def populate_service_list(self, input_path: str | os.PathLike[str]) -> set[str]:
        """Register every service name in the file with the name list.

        Only scans when combining similar names; returns the deduplicated
        set of normalized names found (empty when not combining).
        """
        if not self.combine_similar_names:
            return set()
        found: set[str] = set()
        for line in _read_lines(input_path):
            tokens = line.split(maxsplit=1)
            if not tokens:
                continue
            name = normalize_service_name(tokens[0])
            self.service_names.add(name)
            found.add(name)
        self.logger.debug(f"Pre-scan found {len(found)} distinct service name(s)")
        return found

    def iter_records(self, input_path: str | os.PathLike[str]) -> Iterator[OutputRecord]:
        """Yield one record per run of consecutive lines with the same service key."""
        current: OutputRecord | None = None
        for line in _read_lines(input_path):
            tokens = line.split()
            if not tokens:
                continue
            key = self.service_key(tokens[0])
            value = " ".join(tokens[1:])
            if current is not None and current.service != key:
                yield current
                current = None
            if current is None:
                current = OutputRecord(service=key)
            current.values.append(value)
        if current is not None:
            yield current

    def _ensure_output_dir(self) -> None:
        if self._output_dir_ready:
            return
        try:
            Path(self.output_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(
                "Cannot create output directory",
                output_path=os.fspath(self.output_dir),
                details=str(e),
                original_error=e,
            ) from e
        self._output_dir_ready = True

    def process_record(self, record: OutputRecord) -> int:
        """Write one record's report and return the number of lines written."""
        self._ensure_output_dir()
        return write_report(self.kind, record, self.registry, self.output_dir, self.config.zipkin_url)

    def start(
        self, input_path: str | os.PathLike[str], output_dir: str | os.PathLike[str] | None = None
    ) -> ProcessingResult:
        """Process one input file from start to finish.

        Args:
            input_path: Line-oriented input file
            output_dir: Directory for the reports; defaults to the configured one

        Returns:
            ProcessingResult for the file

        Raises:
            InputFileError: If the input is missing or unreadable (checked before any writer
                is opened) or is not valid UTF-8
            ReportError: On a bad record, unless continue_on_error is set
            OutputError: On an unwritable report path, unless continue_on_error is set
        """
        if output_dir is not None and os.fspath(output_dir) != os.fspath(self.output_dir):
            self.output_dir = output_dir
            self._output_dir_ready = False

        logger = with_log_context(self.logger, input=os.fspath(input_path))
        result = ProcessingResult(
            input_path=os.fspath(input_path), kind=self.kind.job_name, output_dir=os.fspath(self.output_dir)
        )
        started = time.perf_counter()

        # Fail on an unreadable input before the pre-scan or any writer.
        _open_input(input_path).close()
        self.populate_service_list(input_path)

        logger.info(f"Processing {self.kind.job_name} input: {input_path}")
        with tqdm(
            desc=f"{self.kind.job_name} reports",
            unit="record",
            bar_format=TQDM_BAR_FORMAT,
            leave=False,
            disable=self.config.quiet,
        ) as pbar:
            for record in self.iter_records(input_path):
                result.records_count += 1
                result.record_service(record.service)
                try:
                    result.lines_written += self.process_record(record)
                except (ReportError, OutputError) as e:
                    if not self.config.continue_on_error:
                        result.duration = time.perf_counter() - started
                        raise
                    logger.error(f"Skipping report for {record.service}: {e}")
                    result.failed_services[record.service] = str(e)
                    pbar.set_postfix_str(f"✗ {record.service[:20]}", refresh=False)
                pbar.update(1)

        result.duration = time.perf_counter() - started
        if result.failed_services:
            result.success = False
            result.error_message = f"{result.failed_count} service report(s) failed"
        logger.info(
            f"Finished {input_path}: {result.records_count} record(s), "
            f"{result.services_count} service(s), {result.lines_written} line(s) written"
        )
        return result
