"""Load request outcomes from a collection runner's JSON output."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from run_report.models.outcome import RequestOutcome

log = logging.getLogger(__name__)

_outcomes_adapter = TypeAdapter(list[RequestOutcome])


class ResultsLoadError(Exception):
    """Raised when a results file cannot be turned into request outcomes."""


def parse_results(data: Any) -> Sequence[RequestOutcome]:
    """Validate decoded JSON into request outcomes.

    Accepts a bare list of outcomes or an object with a ``results`` list,
    as written by the runner's JSON reporter alongside its ``summary``.
    """
    if isinstance(data, dict):
        if "results" not in data:
            raise ResultsLoadError("Results object has no 'results' key")
        data = data["results"]

    if not isinstance(data, list):
        raise ResultsLoadError(
            f"Expected a list of results, got {type(data).__name__}"
        )

    try:
        return _outcomes_adapter.validate_python(data)
    except ValidationError as e:
        raise ResultsLoadError(f"Invalid results: {e}") from e


def load_results(path: Path) -> Sequence[RequestOutcome]:
    """Read and validate a JSON results file.

    Raises:
        OSError: If the file cannot be read
        ResultsLoadError: If the content is not valid results JSON or
            not valid UTF-8

    """
    log.debug("Loading results from %s", path)
    content = path.read_bytes()

    try:
        data = json.loads(content)
    except ValueError as e:
        raise ResultsLoadError(f"{path} is not valid JSON: {e}") from e

    results = parse_results(data)
    log.info("Loaded %d result(s) from %s", len(results), path)
    return results
