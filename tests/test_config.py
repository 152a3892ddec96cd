from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from lawful.config import DEFAULT_SETTINGS, LawSettings
from lawful.data.nel import NonEmptyList
from lawful.errors import ConfigurationError, EmptyStructureError, LawfulError, LawViolation
from lawful.instances import bounded_int_enum


class TestLawSettings:
    """Settings validation and hypothesis conversion"""

    def test_defaults(self):
        assert DEFAULT_SETTINGS == LawSettings()
        assert DEFAULT_SETTINGS.max_examples == 100
        assert DEFAULT_SETTINGS.deadline_ms is None
        assert not DEFAULT_SETTINGS.derandomize

    def test_settings_are_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.max_examples = 5

    def test_max_examples_must_be_positive(self):
        with pytest.raises(ValidationError):
            LawSettings(max_examples=0)

    def test_to_hypothesis(self):
        hyp = LawSettings(max_examples=7, deadline_ms=250, derandomize=True).to_hypothesis()
        assert hyp.max_examples == 7
        assert hyp.deadline == timedelta(milliseconds=250)
        assert hyp.derandomize
        assert hyp.database is None

    def test_no_deadline(self):
        assert LawSettings().to_hypothesis().deadline is None


class TestFromEnv:
    """LAWFUL_* environment variables"""

    def test_empty_environment_gives_defaults(self):
        assert LawSettings.from_env({}) == LawSettings()

    def test_reads_prefixed_variables(self):
        settings = LawSettings.from_env(
            {
                "LAWFUL_MAX_EXAMPLES": "12",
                "LAWFUL_DEADLINE_MS": "500",
                "LAWFUL_DERANDOMIZE": "true",
                "LAWFUL_PRINT_BLOB": "0",
                "UNRELATED": "x",
            }
        )
        assert settings.max_examples == 12
        assert settings.deadline_ms == 500
        assert settings.derandomize
        assert not settings.print_blob

    def test_none_deadline(self):
        assert LawSettings.from_env({"LAWFUL_DEADLINE_MS": "none"}).deadline_ms is None

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("LAWFUL_MAX_EXAMPLES", "3")
        assert LawSettings.from_env().max_examples == 3

    @pytest.mark.parametrize(
        "env",
        [
            {"LAWFUL_MAX_EXAMPLES": "lots"},
            {"LAWFUL_MAX_EXAMPLES": "-1"},
            {"LAWFUL_DEADLINE_MS": "0"},
            {"LAWFUL_DERANDOMIZE": "perhaps"},
        ],
    )
    def test_invalid_values_raise_configuration_error(self, env):
        with pytest.raises(ConfigurationError, match="Invalid law settings"):
            LawSettings.from_env(env)


class TestErrors:
    """Error hierarchy"""

    def test_hierarchy(self):
        assert issubclass(LawViolation, LawfulError)
        assert issubclass(LawViolation, AssertionError)
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(EmptyStructureError, ValueError)

    def test_law_violation_message(self):
        error = LawViolation("functor.identity", (1, 2))
        assert str(error) == "functor.identity does not hold for (1, 2)"
        assert error.arguments == (1, 2)
        assert "functor.identity" in repr(error)

    def test_empty_non_empty_list(self):
        with pytest.raises(EmptyStructureError):
            NonEmptyList.from_iterable([])

    def test_empty_enum_range(self):
        with pytest.raises(ConfigurationError):
            bounded_int_enum(3, 2)
