"""Reduce request outcomes to summary counters."""

import logging
from collections.abc import Iterable

from run_report.models.outcome import RequestOutcome
from run_report.models.summary import SummaryCounts


def summarize(results: Iterable[RequestOutcome]) -> SummaryCounts:
    """Count requests, assertions and tests across a run.

    A request counts as failed only when it carries a top-level error.
    Failing assertions or tests do not change the request classification.
    Results are consumed in a single pass.
    """
    total_requests = failed_requests = 0
    total_assertions = total_tests = 0
    passed_assertions = failed_assertions = 0
    passed_tests = failed_tests = 0

    for result in results:
        total_requests += 1
        if result.error is not None:
            failed_requests += 1
        total_assertions += len(result.assertion_results)
        total_tests += len(result.test_results)
        for assertion in result.assertion_results:
            if assertion.status == "pass":
                passed_assertions += 1
            elif assertion.status == "fail":
                failed_assertions += 1
        for test in result.test_results:
            if test.status == "pass":
                passed_tests += 1
            elif test.status == "fail":
                failed_tests += 1

    return SummaryCounts(
        total_requests=total_requests,
        passed_requests=total_requests - failed_requests,
        failed_requests=failed_requests,
        total_assertions=total_assertions,
        passed_assertions=passed_assertions,
        failed_assertions=failed_assertions,
        total_tests=total_tests,
        passed_tests=passed_tests,
        failed_tests=failed_tests,
    )


def log_run_summary(log: logging.Logger, summary: SummaryCounts) -> None:
    """Log a formatted summary of the run."""
    log.info("=" * 80)
    log.info("Run Summary:")
    log.info("=" * 80)

    log.info(
        "Requests:   %d passed, %d failed, %d total",
        summary.passed_requests,
        summary.failed_requests,
        summary.total_requests,
    )
    log.info(
        "Tests:      %d passed, %d failed, %d total",
        summary.passed_tests,
        summary.failed_tests,
        summary.total_tests,
    )
    log.info(
        "Assertions: %d passed, %d failed, %d total",
        summary.passed_assertions,
        summary.failed_assertions,
        summary.total_assertions,
    )
