from __future__ import annotations

import logging

import pytest
from hypothesis import strategies as st

from lawful.errors import LawViolation, PropertiesFailed
from lawful.instances import int_sum, maybe_instance
from lawful.properties import functor, monad, monad_error, monoid, order, semigroup
from lawful.properties.arbitrary import ints, maybes, seqs, small_ints
from lawful.properties.prop import LawReport, Prop, Properties, PropResult, check_all, for_all

from fakes import (
    FAST,
    NATURAL,
    AbsoluteOrder,
    DroppingFunctor,
    ExplodingFunctor,
    FixedErrorEither,
    ForgetfulMaybe,
    OffByOneSum,
    Subtraction,
    small_eithers,
)


class TestProp:
    """Single properties"""

    def test_for_all_passes_when_predicate_holds(self):
        prop = for_all(ints, ints)(lambda a, b: a + b == b + a)
        prop.verify("addition commutes", FAST)

    def test_for_all_raises_law_violation_with_counterexample(self):
        prop = for_all(ints, ints)(lambda a, b: a - b == b - a)
        with pytest.raises(LawViolation) as info:
            prop.verify("subtraction commutes", FAST)
        assert info.value.law == "subtraction commutes"
        assert len(info.value.arguments) == 2
        a, b = info.value.arguments
        assert a != b

    def test_holds_evaluates_thunk(self):
        Prop.holds(lambda: True).verify("trivial", FAST)
        with pytest.raises(LawViolation, match="impossible does not hold"):
            Prop.holds(lambda: False).verify("impossible", FAST)

    def test_unexpected_errors_propagate_from_verify(self):
        def explode(a: int) -> bool:
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError):
            for_all(ints)(explode).verify("explodes", FAST)


class TestProperties:
    """Naming and grouping of properties"""

    def test_property_names_are_qualified_with_group(self):
        p = Properties("example")
        p.property("always", Prop.holds(lambda: True))
        assert p.names() == ["example.always"]
        assert "example.always" in p
        assert len(p) == 1

    def test_include_merges_and_deduplicates(self):
        p = Properties("monoid twice")
        p.include(monoid.laws(int_sum, ints, NATURAL), monoid.laws(int_sum, ints, NATURAL))
        assert len(p) == len(monoid.laws(int_sum, ints, NATURAL))
        assert "semigroup.associative" in p
        assert "monoid.left identity" in p

    def test_include_keeps_the_first_property_of_a_name(self, caplog):
        holding = Properties("law")
        holding.property("x", Prop.holds(lambda: True))
        broken = Properties("law")
        broken.property("x", Prop.holds(lambda: False))
        p = Properties("merged")
        with caplog.at_level(logging.DEBUG, logger="lawful.properties.prop"):
            p.include(holding, broken)
        assert p.names() == ["law.x"]
        assert p.check(FAST).passed
        assert "law.x already in merged" in caplog.text

    def test_laws_include_superclass_laws(self):
        names = set(monad.laws(maybe_instance, maybes, NATURAL))
        assert {"functor.identity", "apply.composition", "applicative.homomorphism", "bind.associativity"} <= names
        assert {"monad.left identity", "monad.right identity"} <= names

    def test_items_can_parametrize(self):
        items = semigroup.laws(int_sum, ints, NATURAL).items()
        assert [name for name, _ in items] == [
            "semigroup.associative",
            "semigroup.unfoldl sum consistency",
            "semigroup.unfoldr sum consistency",
        ]
        for name, prop in items:
            prop.verify(name, FAST)

    def test_repr(self):
        assert repr(Properties("empty")) == "Properties('empty', 0 properties)"


class TestUnlawfulInstances:
    """Deliberately broken instances must be reported"""

    def test_non_associative_semigroup_fails(self):
        report = semigroup.laws(Subtraction(), ints, NATURAL).check(FAST)
        assert not report.passed
        assert report.result("semigroup.associative").status == "failed"

    def test_bad_zero_fails_identity_laws_only(self):
        report = monoid.laws(OffByOneSum(), ints, NATURAL).check(FAST)
        failed = {r.name for r in report.failures}
        assert failed == {"monoid.left identity", "monoid.right identity"}

    def test_dropping_functor_fails_identity(self):
        report = functor.laws(DroppingFunctor(), lambda e: seqs(e).filter(bool), NATURAL).check(FAST)
        assert report.result("functor.identity").status == "failed"

    def test_forgetful_point_breaks_monad_identities(self):
        report = monad.laws(ForgetfulMaybe(), maybes, NATURAL).check(FAST)
        assert report.result("monad.left identity").status == "failed"
        assert report.result("monad.right identity").status == "failed"

    def test_order_disagreeing_with_python_fails(self):
        report = order.laws(AbsoluteOrder(), ints).check(FAST)
        assert report.result("order.python ordering").status == "failed"
        assert report.result("equal.naturality").status == "failed"

    def test_crashing_instance_is_recorded_as_error(self):
        report = functor.laws(ExplodingFunctor(), maybes, NATURAL).check(FAST)
        result = report.result("functor.identity")
        assert result.status == "error"
        assert "RuntimeError" in result.message

    def test_ignoring_the_raised_error_fails(self):
        report = monad_error.laws(FixedErrorEither(), small_eithers, small_ints, NATURAL).check(FAST)
        assert report.result("applicative error.raised errors handled").status == "failed"

    def test_grouped_law_violations_are_failures(self):
        def body(name, settings):
            raise ExceptionGroup("several", [LawViolation(name, (1,)), LawViolation(name, (2,))])

        p = Properties("grouped")
        p.property("law", Prop(body))
        result = p.check(FAST).result("grouped.law")
        assert result.status == "failed"
        assert "(1,)" in result.message and "(2,)" in result.message

    def test_grouped_crash_is_an_error(self):
        def body(name, settings):
            raise ExceptionGroup("several", [LawViolation(name), RuntimeError("boom")])

        p = Properties("grouped")
        p.property("law", Prop(body))
        assert p.check(FAST).result("grouped.law").status == "error"

    def test_check_all_raises_with_report(self):
        with pytest.raises(PropertiesFailed) as info:
            check_all(semigroup.laws(Subtraction(), ints, NATURAL), FAST)
        assert info.value.report.name == "semigroup"
        assert "semigroup.associative" in str(info.value)

    def test_failures_are_assertion_errors(self):
        with pytest.raises(AssertionError):
            check_all(semigroup.laws(Subtraction(), ints, NATURAL), FAST)


class TestReports:
    """Report models"""

    def test_result_constructors(self):
        assert PropResult.success("a").ok
        assert PropResult.failure("b", "nope").status == "failed"
        assert PropResult.crashed("c", "boom").status == "error"

    def test_summary_counts_passed(self):
        report = LawReport(
            name="group",
            results=[PropResult.success("group.a"), PropResult.failure("group.b", "x")],
        )
        assert report.summary() == "group: 1/2 laws passed"
        assert [r.name for r in report.failures] == ["group.b"]

    def test_unknown_result_raises_key_error(self):
        with pytest.raises(KeyError):
            LawReport(name="empty").result("missing")

    def test_report_serializes(self):
        report = semigroup.laws(int_sum, st.integers(0, 3), NATURAL).check(FAST)
        data = report.model_dump()
        assert data["name"] == "semigroup"
        assert all(r["status"] == "passed" for r in data["results"])

    def test_durations_are_recorded(self):
        report = semigroup.laws(int_sum, ints, NATURAL).check(FAST)
        assert all(r.duration_ms >= 0 for r in report.results)


class TestLogging:
    """Checker logging"""

    def test_summary_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="lawful.properties.prop"):
            semigroup.laws(int_sum, ints, NATURAL).check(FAST)
        assert "semigroup: 3/3 laws passed" in caplog.text

    def test_failures_logged_at_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lawful.properties.prop"):
            semigroup.laws(Subtraction(), ints, NATURAL).check(FAST)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any("semigroup.associative" in r.getMessage() for r in warnings)

    def test_each_property_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lawful.properties.prop"):
            semigroup.laws(int_sum, ints, NATURAL).check(FAST)
        assert "checking semigroup.associative" in caplog.text
