"""Test factories for generating request outcomes."""

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from run_report.models.outcome import (
    AssertionResult,
    RequestInfo,
    RequestOutcome,
    TestScriptResult,
)


class RequestInfoFactory(ModelFactory[RequestInfo]):
    """Factory for RequestInfo."""


class AssertionResultFactory(ModelFactory[AssertionResult]):
    """Factory for AssertionResult."""

    error = None


class TestScriptResultFactory(ModelFactory[TestScriptResult]):
    """Factory for TestScriptResult."""

    __test__ = False

    error = None


class RequestOutcomeFactory(ModelFactory[RequestOutcome]):
    """Factory for RequestOutcome that completed without a request error."""

    assertion_results = Use(AssertionResultFactory.batch, size=2)
    test_results = Use(TestScriptResultFactory.batch, size=2)
    error = None
