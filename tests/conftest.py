"""Pytest configuration and fixtures for service-reports tests"""
import logging

import pytest

from service_reports.core.config import ReportConfig
from service_reports.output.registry import WriterRegistry


@pytest.fixture
def write_input(tmp_path):
    """Factory that writes job output lines to a temporary input file"""
    def _write(lines, name="part-00000"):
        input_file = tmp_path / name
        input_file.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return input_file
    return _write


@pytest.fixture
def output_dir(tmp_path):
    """Output directory path (not created; the reader creates it on first write)"""
    return tmp_path / "reports"


@pytest.fixture
def registry():
    """A fresh writer registry, closed after the test"""
    reg = WriterRegistry()
    yield reg
    reg.close_all()


@pytest.fixture
def make_config(output_dir):
    """Factory for ReportConfig with quiet progress and the temp output dir"""
    def _make(kind, **overrides):
        overrides.setdefault("output_dir", str(output_dir))
        overrides.setdefault("quiet", True)
        return ReportConfig(kind=kind, **overrides)
    return _make


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers replaced by setup_logging"""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    for handler in original_handlers:
        root.addHandler(handler)
    root.setLevel(original_level)
