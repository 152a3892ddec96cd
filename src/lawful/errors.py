"""Error types raised by lawful."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lawful.properties.prop import LawReport


class LawfulError(Exception):
    """Base class for every error raised by lawful."""


class LawViolation(LawfulError, AssertionError):
    """Raised when a law predicate does not hold.

    Preserves the law name and the arguments it was evaluated with,
    so the shrunk counterexample is visible in reports.
    """

    def __init__(self, law: str, arguments: tuple[Any, ...] = ()) -> None:
        self.law = law
        self.arguments = arguments
        if arguments:
            message = f"{law} does not hold for {arguments!r}"
        else:
            message = f"{law} does not hold"
        super().__init__(message)

    def __repr__(self) -> str:
        return f"LawViolation({self.law!r}, arguments={self.arguments!r})"


class PropertiesFailed(LawfulError, AssertionError):
    """Raised by check_all when at least one property did not pass."""

    def __init__(self, report: LawReport) -> None:
        self.report = report
        failed = ", ".join(r.name for r in report.failures)
        super().__init__(f"{report.name}: {len(report.failures)} law(s) failed: {failed}")


class ConfigurationError(LawfulError, ValueError):
    """Raised when LawSettings cannot be built from the given values."""


class EmptyStructureError(LawfulError, ValueError):
    """Raised when a non-empty structure is built from no elements."""
