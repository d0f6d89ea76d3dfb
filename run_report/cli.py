"""CLI entry point for summarizing collection runs and writing JUnit reports."""

import argparse
import json
import logging
import sys
from pathlib import Path

from run_report.junit import build_report, write_report
from run_report.loader import ResultsLoadError, load_results
from run_report.summary import log_run_summary, summarize

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_BAD_INPUT = 2


def run(results_path: Path, junit_path: Path | None = None) -> int:
    """Summarize a results file, optionally write a JUnit report, return exit code."""
    log = logging.getLogger("run_report")

    try:
        results = load_results(results_path)
    except (OSError, ResultsLoadError) as e:
        log.error("Cannot load results: %s", e)
        return EXIT_BAD_INPUT

    summary = summarize(results)
    log_run_summary(log, summary)
    print(json.dumps(summary.to_dict(), indent=2))

    if junit_path is not None:
        write_report(build_report(results), junit_path)

    return EXIT_FAILURES if summary.has_failures else EXIT_OK


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Summarize collection run results and write JUnit reports"
    )
    parser.add_argument(
        "results",
        type=Path,
        help="Path to the runner's JSON results file",
    )
    parser.add_argument(
        "--junit",
        type=Path,
        default=None,
        help="Write a JUnit XML report to this path",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(results_path=args.results, junit_path=args.junit))


if __name__ == "__main__":  # pragma: no cover
    main()
