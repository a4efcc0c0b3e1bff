"""Tests for command-line interface"""
import sys
from unittest.mock import patch

import pytest

from service_reports.cli.main import main
from service_reports.cli.parser import parse_arguments
from service_reports.core.constants import EXIT_FAILURE, EXIT_SUCCESS, EXIT_USAGE


class TestCLIArguments:
    """Test command-line argument parsing"""

    def test_parse_kind_and_inputs(self):
        args = parse_arguments(["Timeouts", "part-00000", "part-00001", "--output-dir", "./reports"])
        assert args.kind == "Timeouts"
        assert args.inputs == ["part-00000", "part-00001"]
        assert args.output_dir == "./reports"

    def test_parse_from_sys_argv(self):
        """parse_arguments falls back to sys.argv like the console script"""
        test_args = ["service-reports", "Retries", "in.txt", "-o", "out"]
        with patch.object(sys, "argv", test_args):
            args = parse_arguments()
        assert args.kind == "Retries"
        assert args.output_dir == "out"

    def test_defaults(self):
        args = parse_arguments(["Timeouts", "in.txt"])
        assert args.output_dir is None
        assert args.zipkin_url is None
        assert args.combine_similar_names is None
        assert args.max_name_distance == 1
        assert args.continue_on_error is False
        assert args.log_level is None
        assert args.log_format == "text"
        assert args.quiet is False

    def test_combine_similar_names_flags(self):
        assert parse_arguments(["Timeouts", "in", "--combine-similar-names"]).combine_similar_names is True
        assert parse_arguments(["MemcacheRequest", "in", "--no-combine-similar-names"]).combine_similar_names is False

    def test_log_level_is_case_insensitive(self):
        assert parse_arguments(["Timeouts", "in", "--log-level", "debug"]).log_level == "DEBUG"

    def test_negative_name_distance_rejected(self):
        with pytest.raises(SystemExit):
            parse_arguments(["Timeouts", "in", "--max-name-distance", "-1"])

    def test_dependency_link_without_kind(self):
        args = parse_arguments(["--dependency-link", "100", "200"])
        assert args.kind is None
        assert args.dependency_link == ["100", "200"]


@pytest.mark.usefixtures("restore_root_logging")
class TestMain:
    """Test the main entry point end to end"""

    def _run(self, tmp_path, *argv):
        return main([*argv, "--log-dir", str(tmp_path / "logs"), "--quiet", "--no-color"])

    def test_writes_reports(self, tmp_path, write_input):
        input_file = write_input(["bar x", "bar y"])
        out = tmp_path / "out"
        assert self._run(tmp_path, "Timeouts", str(input_file), "-o", str(out)) == EXIT_SUCCESS
        assert (out / "bar").read_text().splitlines() == [
            "bar timed out in calls to the following services:",
            "x",
            "y",
        ]

    def test_multiple_inputs_processed_in_order(self, tmp_path, write_input):
        first = write_input(["bar x"], name="part-00000")
        second = write_input(["bar y"], name="part-00001")
        out = tmp_path / "out"
        assert self._run(tmp_path, "WorstRuntimes", str(first), str(second), "-o", str(out)) == EXIT_SUCCESS
        header = "Service bar took the longest for these spans:"
        assert (out / "bar").read_text().splitlines() == [header, "x", header, "y"]

    def test_zipkin_url_from_environment(self, tmp_path, write_input, monkeypatch):
        monkeypatch.setenv("ZIPKIN_URL", "http://z")
        input_file = write_input(["svc t1"])
        out = tmp_path / "out"
        assert self._run(tmp_path, "WorstRuntimesPerTrace", str(input_file), "-o", str(out)) == EXIT_SUCCESS
        assert '<a href="http://z/traces/t1">t1</a>' in (out / "svc").read_text()

    def test_output_dir_from_environment(self, tmp_path, write_input, monkeypatch):
        out = tmp_path / "env-out"
        monkeypatch.setenv("SERVICE_REPORTS_OUTPUT_DIR", str(out))
        input_file = write_input(["foo 1", "foo 2"])
        assert self._run(tmp_path, "MemcacheRequest", str(input_file)) == EXIT_SUCCESS
        assert (out / "foo").read_text() == "foo made 3 redundant memcache requests\n"

    def test_trace_kind_without_zipkin_url_is_usage_error(self, tmp_path, write_input, monkeypatch, capsys):
        monkeypatch.delenv("ZIPKIN_URL", raising=False)
        input_file = write_input(["svc t1"])
        assert self._run(tmp_path, "WorstRuntimesPerTrace", str(input_file), "-o", str(tmp_path / "out")) == EXIT_USAGE
        assert "zipkin URL" in capsys.readouterr().err

    def test_missing_input_fails(self, tmp_path, capsys):
        assert self._run(tmp_path, "Timeouts", str(tmp_path / "missing"), "-o", str(tmp_path / "out")) == EXIT_FAILURE
        assert "Input file not found" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_non_utf8_input_fails(self, tmp_path, capsys):
        input_file = tmp_path / "part-00000"
        input_file.write_bytes(b"svc \xff\xfe\n")
        assert self._run(tmp_path, "Timeouts", str(input_file), "-o", str(tmp_path / "out")) == EXIT_FAILURE
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_bad_record_fails(self, tmp_path, write_input):
        input_file = write_input(["foo abc"])
        assert self._run(tmp_path, "MemcacheRequest", str(input_file), "-o", str(tmp_path / "out")) == EXIT_FAILURE

    def test_continue_on_error_returns_failure_but_writes_rest(self, tmp_path, write_input):
        input_file = write_input(["foo abc", "bar 4"])
        out = tmp_path / "out"
        code = self._run(tmp_path, "MemcacheRequest", str(input_file), "-o", str(out), "--continue-on-error")
        assert code == EXIT_FAILURE
        assert (out / "bar").read_text() == "bar made 4 redundant memcache requests\n"

    def test_missing_kind_is_usage_error(self, tmp_path, capsys):
        assert self._run(tmp_path) == EXIT_USAGE
        assert "report kind is required" in capsys.readouterr().err

    def test_missing_inputs_is_usage_error(self, tmp_path):
        assert self._run(tmp_path, "Timeouts") == EXIT_USAGE

    def test_unknown_kind_is_usage_error(self, tmp_path, capsys):
        assert self._run(tmp_path, "Latency", "in.txt") == EXIT_USAGE
        assert "Unknown report kind" in capsys.readouterr().err

    def test_dependency_link(self, capsys):
        assert main(["--dependency-link", "100", "200", "--zipkin-url", "http://z"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == "http://z/dependency?endTs=200&startTs=100"

    def test_list_kinds(self, capsys):
        assert main(["--list-kinds"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "MemcacheRequest (combines similar names)" in out
        assert "ExpensiveEndpoints" in out

    def test_summary_and_timings(self, tmp_path, write_input, capsys):
        input_file = write_input(["bar x"])
        code = main([
            "Retries", str(input_file), "-o", str(tmp_path / "out"),
            "--log-dir", str(tmp_path / "logs"), "--no-color", "--show-timings",
        ])
        assert code == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "REPORT SUMMARY" in out
        assert "1 record(s), 1 service(s), 2 line(s)" in out
        assert "PERFORMANCE SUMMARY" in out

    def test_log_file_written(self, tmp_path, write_input):
        input_file = write_input(["bar x"])
        self._run(tmp_path, "Retries", str(input_file), "-o", str(tmp_path / "out"), "--job-name", "nightly")
        log_files = list((tmp_path / "logs").glob("nightly_*.log"))
        assert len(log_files) == 1
