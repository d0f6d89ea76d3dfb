"""Tests for CLI module."""

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import patch

import pytest

from run_report.cli import EXIT_BAD_INPUT, EXIT_FAILURES, EXIT_OK, main, run


def write_results(path: Path, results: list[dict[str, object]]) -> Path:
    """Write a runner results file."""
    path.write_text(json.dumps({"results": results}))
    return path


def passing_result(suitename: str = "Suite") -> dict[str, object]:
    """Result with a single passing assertion."""
    return {
        "suitename": suitename,
        "request": {"method": "GET", "url": "https://api.test"},
        "assertionResults": [
            {"lhsExpr": "res.status", "rhsExpr": "eq 200", "status": "pass"}
        ],
        "testResults": [{"description": "body ok", "status": "pass"}],
        "runtime": 0.1,
    }


def test_run_success_prints_summary(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Prints the summary JSON and exits zero when everything passed."""
    path = write_results(tmp_path / "results.json", [passing_result()])

    with caplog.at_level(logging.INFO):
        exit_code = run(path)

    assert exit_code == EXIT_OK
    output = json.loads(capsys.readouterr().out)
    assert output["totalRequests"] == 1
    assert output["passedAssertions"] == 1
    assert output["passedTests"] == 1
    assert "Requests:   1 passed, 0 failed, 1 total" in caplog.text


def test_run_failed_assertion_exits_one(tmp_path: Path) -> None:
    """Exits one when an assertion failed."""
    result = passing_result()
    result["assertionResults"] = [{"lhsExpr": "a", "rhsExpr": "b", "status": "fail"}]
    path = write_results(tmp_path / "results.json", [result])

    assert run(path) == EXIT_FAILURES


def test_run_request_error_exits_one(tmp_path: Path) -> None:
    """Exits one when a request failed."""
    path = write_results(
        tmp_path / "results.json",
        [{"suitename": "Suite", "error": "ECONNREFUSED", "runtime": 0.0}],
    )

    assert run(path) == EXIT_FAILURES


def test_run_writes_junit(tmp_path: Path) -> None:
    """Writes a JUnit report when a path is given."""
    path = write_results(
        tmp_path / "results.json", [passing_result("A"), passing_result("B")]
    )
    junit_path = tmp_path / "junit.xml"

    run(path, junit_path)

    root = ET.fromstring(junit_path.read_bytes())
    assert [s.attrib["name"] for s in root.findall("testsuite")] == ["A", "B"]
    assert [s.attrib["tests"] for s in root.findall("testsuite")] == ["2", "2"]


def test_run_skips_junit_without_path(tmp_path: Path) -> None:
    """Does not build a report when no path is given."""
    path = write_results(tmp_path / "results.json", [passing_result()])

    with patch("run_report.cli.write_report") as write_mock:
        run(path)

    write_mock.assert_not_called()


def test_run_missing_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Exits two and logs when the results file is missing."""
    exit_code = run(tmp_path / "missing.json")

    assert exit_code == EXIT_BAD_INPUT
    assert "Cannot load results" in caplog.text


def test_run_invalid_results(tmp_path: Path) -> None:
    """Exits two when results fail validation."""
    path = write_results(tmp_path / "results.json", [{"testResults": [{}]}])

    assert run(path) == EXIT_BAD_INPUT


def test_main_parses_arguments(tmp_path: Path) -> None:
    """Passes parsed arguments to run and exits with its code."""
    results = tmp_path / "results.json"
    junit = tmp_path / "out.xml"

    with (
        patch("sys.argv", ["run-report", str(results), "--junit", str(junit)]),
        patch("run_report.cli.run", return_value=EXIT_FAILURES) as run_mock,
        pytest.raises(SystemExit) as exc_info,
    ):
        main()

    assert exc_info.value.code == EXIT_FAILURES
    run_mock.assert_called_once_with(results_path=results, junit_path=junit)


def test_run_invalid_utf8(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Exits two when the results file is not UTF-8."""
    path = tmp_path / "results.json"
    path.write_bytes(b'[{"suitename": "\xff\xfe"}]')

    assert run(path) == EXIT_BAD_INPUT
    assert "Cannot load results" in caplog.text


def test_run_directory(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Exits two when the results path is a directory."""
    assert run(tmp_path) == EXIT_BAD_INPUT
    assert "Cannot load results" in caplog.text
