"""Build JUnit report documents from request outcomes."""

import logging
import socket
from collections.abc import Sequence
from datetime import datetime, timezone

from pydantic import Field

from run_report.junit.document import XmlNode
from run_report.models.base import Model
from run_report.models.outcome import CheckResult, RequestOutcome, TestScriptResult

log = logging.getLogger(__name__)

REQUEST_ERROR_CASE_NAME = "Test suite has no errors"
UNNAMED_CASE_NAME = "Unnamed check"
UNNAMED_SUITE_NAME = "Unnamed suite"


def _current_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds, no zone."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")[:-6]


class ReportOptions(Model):
    """Values stamped on every testsuite of a report."""

    hostname: str = Field(default_factory=socket.gethostname)
    timestamp: str = Field(default_factory=_current_timestamp)


def build_report(
    results: Sequence[RequestOutcome], options: ReportOptions | None = None
) -> XmlNode:
    """Build a JUnit ``testsuites`` tree from request outcomes.

    Outcomes are grouped by suite name in first-seen order; outcomes sharing
    a suite append their cases to the same ``testsuite``.
    """
    options = options or ReportOptions()

    suites: dict[str, list[RequestOutcome]] = {}
    for result in results:
        suites.setdefault(suite_name(result), []).append(result)

    log.debug("Building JUnit report: %d suite(s)", len(suites))
    return XmlNode(
        tag="testsuites",
        children=[
            _build_suite(name, outcomes, options) for name, outcomes in suites.items()
        ],
    )


def suite_name(result: RequestOutcome) -> str:
    """Return the suite an outcome is reported under."""
    return result.suitename or result.description or UNNAMED_SUITE_NAME


def case_name(check: CheckResult) -> str:
    """Return the testcase name for an assertion or test result.

    Uses "<lhs> <rhs>" when both expressions are present, then the
    description, then whichever expression is present.
    """
    if check.lhs_expr and check.rhs_expr:
        return f"{check.lhs_expr} {check.rhs_expr}"
    if isinstance(check, TestScriptResult) and check.description:
        return check.description
    return check.lhs_expr or check.rhs_expr or UNNAMED_CASE_NAME


def _build_suite(
    name: str, outcomes: Sequence[RequestOutcome], options: ReportOptions
) -> XmlNode:
    cases: list[XmlNode] = []
    for outcome in outcomes:
        cases.extend(_build_cases(outcome, classname=name))

    errors = sum(len(case.find_all("error")) for case in cases)
    failures = sum(len(case.find_all("failure")) for case in cases)
    runtime = sum(outcome.runtime for outcome in outcomes)

    return XmlNode(
        tag="testsuite",
        attributes={
            "name": name,
            "errors": errors,
            "failures": failures,
            "skipped": 0,
            "tests": len(cases),
            "timestamp": options.timestamp,
            "hostname": options.hostname,
            "time": f"{runtime:.3f}",
        },
        children=cases,
    )


def _build_cases(outcome: RequestOutcome, classname: str) -> list[XmlNode]:
    """Build the testcases for one outcome.

    A request-level error replaces any entries with a single error case.
    """
    if outcome.request and outcome.request.url:
        classname = outcome.request.url

    if outcome.error is not None:
        return [
            XmlNode(
                tag="testcase",
                attributes={
                    "name": REQUEST_ERROR_CASE_NAME,
                    "status": "fail",
                    "classname": classname,
                    "time": f"{outcome.runtime:.3f}",
                },
                children=[
                    XmlNode(
                        tag="error",
                        attributes={"type": "error", "message": outcome.error},
                    )
                ],
            )
        ]

    checks = list(outcome.checks())
    if not checks:
        return []

    case_time = f"{outcome.runtime / len(checks):.3f}"
    cases: list[XmlNode] = []
    for check in checks:
        children: list[XmlNode] = []
        if check.status == "fail":
            message = check.error or ""
            children.append(
                XmlNode(
                    tag="failure",
                    attributes={"type": "failure", "message": message},
                    text=message or None,
                )
            )
        cases.append(
            XmlNode(
                tag="testcase",
                attributes={
                    "name": case_name(check),
                    "status": check.status,
                    "classname": classname,
                    "time": case_time,
                },
                children=children,
            )
        )
    return cases
