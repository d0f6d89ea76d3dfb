"""Models for per-request outcomes produced by a collection run."""

from collections.abc import Iterator, Sequence
from typing import Any, Literal

from pydantic import Field, field_validator

from run_report.models.base import Model

CheckStatus = Literal["pass", "fail"]


class RequestInfo(Model):
    """Request metadata attached to an outcome."""

    method: str | None = Field(default=None, description="HTTP method")
    url: str | None = Field(default=None, description="Request URL")


class AssertionResult(Model):
    """Result of a declarative comparison between two expressions."""

    kind: Literal["assertion"] = "assertion"
    lhs_expr: str | None = Field(default=None, alias="lhsExpr")
    rhs_expr: str | None = Field(default=None, alias="rhsExpr")
    status: CheckStatus
    error: str | None = None


class TestScriptResult(Model):
    """Result of a check written in a user test script."""

    __test__ = False

    kind: Literal["test"] = "test"
    description: str | None = None
    lhs_expr: str | None = Field(default=None, alias="lhsExpr")
    rhs_expr: str | None = Field(default=None, alias="rhsExpr")
    status: CheckStatus
    error: str | None = None


CheckResult = AssertionResult | TestScriptResult


class RequestOutcome(Model):
    """Complete record of executing one request."""

    description: str | None = Field(default=None, description="Human label")
    suitename: str | None = Field(default=None, description="Suite to report under")
    request: RequestInfo | None = None
    assertion_results: Sequence[AssertionResult] = Field(
        default_factory=list, alias="assertionResults"
    )
    test_results: Sequence[TestScriptResult] = Field(
        default_factory=list, alias="testResults"
    )
    runtime: float = Field(default=0.0, description="Elapsed seconds")
    error: str | None = Field(
        default=None, description="Failure that prevented the request completing"
    )

    @field_validator("error", mode="before")
    @classmethod
    def _error_message(cls, value: Any) -> Any:
        """Runners serialize errors either as text or as {"message": ...}."""
        if isinstance(value, dict):
            return value["message"] if "message" in value else str(value)
        return value

    @field_validator("assertion_results", "test_results", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def checks(self) -> Iterator[CheckResult]:
        """Iterate over assertion results, then test results."""
        yield from self.assertion_results
        yield from self.test_results
