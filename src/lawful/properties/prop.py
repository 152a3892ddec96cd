"""Checkable properties, named groups of them, and check reports.

A Prop is run through hypothesis: quantified properties draw their
arguments from strategies, and a predicate returning False raises
LawViolation so hypothesis can shrink the counterexample.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Literal, Self

from hypothesis import given
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy
from pydantic import BaseModel, Field

from lawful.config import LawSettings
from lawful.errors import LawViolation, PropertiesFailed

logger = logging.getLogger(__name__)

PropStatus = Literal["passed", "failed", "error"]


@dataclass(frozen=True)
class Prop:
    """A property that can be verified under some settings.

    Attributes:
        body: Runs the property; raises LawViolation when it does not hold
    """

    body: Callable[[str, LawSettings], None]

    def verify(self, name: str, settings: LawSettings | None = None) -> None:
        """Run the property, raising LawViolation on a counterexample."""
        self.body(name, settings or LawSettings())

    @staticmethod
    def holds(thunk: Callable[[], bool]) -> Prop:
        """A property with no arguments, evaluated once."""

        def body(name: str, settings: LawSettings) -> None:
            if not thunk():
                raise LawViolation(name)

        return Prop(body)


def for_all(*strategies: SearchStrategy[Any]) -> Callable[[Callable[..., bool]], Prop]:
    """Quantify a predicate over values drawn from strategies.

    Usage:
        prop = for_all(ints, ints)(lambda a, b: a + b == b + a)
    """

    def decorator(predicate: Callable[..., bool]) -> Prop:
        def body(name: str, settings: LawSettings) -> None:
            @settings.to_hypothesis()
            @given(st.tuples(*strategies))
            def run(arguments: tuple[Any, ...]) -> None:
                if not predicate(*arguments):
                    raise LawViolation(name, arguments)

            run()

        return Prop(body)

    return decorator


class PropResult(BaseModel):
    name: str
    status: PropStatus
    message: str = ""
    duration_ms: float = 0.0

    @classmethod
    def success(cls, name: str, duration_ms: float = 0.0) -> Self:
        return cls(name=name, status="passed", duration_ms=duration_ms)

    @classmethod
    def failure(cls, name: str, message: str, duration_ms: float = 0.0) -> Self:
        return cls(name=name, status="failed", message=message, duration_ms=duration_ms)

    @classmethod
    def crashed(cls, name: str, message: str, duration_ms: float = 0.0) -> Self:
        """The property raised something other than a law violation."""
        return cls(name=name, status="error", message=message, duration_ms=duration_ms)

    @property
    def ok(self) -> bool:
        return self.status == "passed"


class LawReport(BaseModel):
    """Outcome of checking a Properties group."""

    name: str
    results: list[PropResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failures(self) -> list[PropResult]:
        return [r for r in self.results if not r.ok]

    def result(self, name: str) -> PropResult:
        """Look up the result of one property by its full name."""
        for r in self.results:
            if r.name == name:
                return r
        raise KeyError(name)

    def summary(self) -> str:
        passed = sum(1 for r in self.results if r.ok)
        return f"{self.name}: {passed}/{len(self.results)} laws passed"

    def raise_for_failures(self) -> None:
        """Raises PropertiesFailed if any property failed or errored."""
        if not self.passed:
            raise PropertiesFailed(self)


class Properties:
    """A named group of properties.

    Property names are qualified with the group name ("functor.identity").
    Including another group merges its properties. When two included
    properties share a name the first one is kept.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._props: dict[str, Prop] = {}

    def property(self, name: str, prop: Prop) -> None:
        self._props[f"{self.name}.{name}"] = prop

    def include(self, *others: Properties) -> Properties:
        for other in others:
            for name, prop in other._props.items():
                existing = self._props.setdefault(name, prop)
                if existing is not prop:
                    logger.debug("%s already in %s, keeping the first", name, self.name)
        return self

    def items(self) -> list[tuple[str, Prop]]:
        return list(self._props.items())

    def names(self) -> list[str]:
        return list(self._props)

    def __iter__(self) -> Iterator[str]:
        return iter(self._props)

    def __len__(self) -> int:
        return len(self._props)

    def __contains__(self, name: object) -> bool:
        return name in self._props

    def __repr__(self) -> str:
        return f"Properties({self.name!r}, {len(self._props)} properties)"

    def check(self, settings: LawSettings | None = None) -> LawReport:
        """Verify every property and collect the results.

        Settings default to LawSettings.from_env().
        """
        settings = settings or LawSettings.from_env()
        results = []
        for name, prop in self._props.items():
            results.append(_check_one(name, prop, settings))
        report = LawReport(name=self.name, results=results)
        logger.info(report.summary())
        return report


def _violations(exc: BaseException) -> list[LawViolation] | None:
    """The law violations behind exc, or None if anything else was raised."""
    if isinstance(exc, LawViolation):
        return [exc]
    if isinstance(exc, BaseExceptionGroup):
        found: list[LawViolation] = []
        for inner in exc.exceptions:
            violations = _violations(inner)
            if violations is None:
                return None
            found.extend(violations)
        return found
    return None


def _check_one(name: str, prop: Prop, settings: LawSettings) -> PropResult:
    logger.debug("checking %s", name)
    start = time.perf_counter()
    try:
        prop.verify(name, settings)
    except Exception as exc:
        elapsed = (time.perf_counter() - start) * 1000
        violations = _violations(exc)
        if violations is not None:
            message = "; ".join(str(v) for v in violations)
            logger.warning("law %s failed: %s", name, message)
            return PropResult.failure(name, message, elapsed)
        logger.warning("law %s raised %s: %s", name, type(exc).__name__, exc)
        return PropResult.crashed(name, f"{type(exc).__name__}: {exc}", elapsed)
    return PropResult.success(name, (time.perf_counter() - start) * 1000)


def check_all(properties: Properties, settings: LawSettings | None = None) -> LawReport:
    """Check properties and raise PropertiesFailed unless all of them pass."""
    report = properties.check(settings)
    report.raise_for_failures()
    return report
