"""Aggregate counters for a collection run."""

from dataclasses import asdict, dataclass, fields
from typing import Self


@dataclass(frozen=True, kw_only=True)
class SummaryCounts:
    """Request, assertion and test counters.

    Counters add element-wise, so summaries of partial runs can be combined.
    """

    total_requests: int = 0
    passed_requests: int = 0
    failed_requests: int = 0
    total_assertions: int = 0
    passed_assertions: int = 0
    failed_assertions: int = 0
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, SummaryCounts):
            return NotImplemented
        return type(self)(
            **{
                f.name: getattr(self, f.name) + getattr(other, f.name)
                for f in fields(self)
            }
        )

    @property
    def has_failures(self) -> bool:
        """Whether any request, assertion or test failed."""
        return (
            self.failed_requests + self.failed_assertions + self.failed_tests
        ) > 0

    def to_dict(self) -> dict[str, int]:
        """Return counters keyed the way runner JSON output names them."""
        return {_camel_case(key): value for key, value in asdict(self).items()}


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
