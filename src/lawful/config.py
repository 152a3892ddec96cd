"""Settings for law checking."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import timedelta

from hypothesis import HealthCheck, settings
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lawful.errors import ConfigurationError

ENV_PREFIX = "LAWFUL_"


class LawSettings(BaseModel):
    """How hard each law is exercised.

    Attributes:
        max_examples: Number of generated examples per property
        deadline_ms: Per-example deadline, None disables it
        derandomize: Use a fixed seed so runs are reproducible
        database: Persist failing examples in the hypothesis example database
        print_blob: Print a reproduction blob for failing examples
    """

    model_config = ConfigDict(frozen=True)

    max_examples: int = Field(default=100, gt=0)
    deadline_ms: float | None = Field(default=None, gt=0)
    derandomize: bool = False
    database: bool = False
    print_blob: bool = False

    def to_hypothesis(self) -> settings:
        """Build the hypothesis settings object used to run a property."""
        deadline = None if self.deadline_ms is None else timedelta(milliseconds=self.deadline_ms)
        kwargs = {
            "max_examples": self.max_examples,
            "deadline": deadline,
            "derandomize": self.derandomize,
            "print_blob": self.print_blob,
            "suppress_health_check": [HealthCheck.too_slow, HealthCheck.filter_too_much],
        }
        if not self.database:
            kwargs["database"] = None
        return settings(**kwargs)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LawSettings:
        """Build settings from LAWFUL_* environment variables.

        Unset variables keep their defaults. Values are parsed by pydantic,
        so booleans accept the usual spellings ("1", "true", "off", ...).

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: dict[str, str | None] = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key not in env:
                continue
            raw = env[key].strip()
            if name == "deadline_ms" and raw.lower() in ("", "none"):
                values[name] = None
            else:
                values[name] = raw
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid law settings: {exc}") from exc


DEFAULT_SETTINGS = LawSettings()
