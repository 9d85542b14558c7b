"""Env-backed limits for the analysis pipeline.

The engine itself never bounds its work; these knobs are read by callers
(the worker boundary and the HTTP backend) before a batch is started.
Defaults come from the ``engine`` section of config.yaml and can be
overridden with environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from FD2NF.config.loader import get_int


def _get_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or str(raw).strip() == "":
        value = default
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


@dataclass(frozen=True)
class EngineConfig:
    """Attribute-count guard.

    F+ grows roughly as 4^n in the number of attributes, so anything past a
    dozen attributes is impractical.
    """

    # Universes larger than this are rejected before analysis
    max_attributes: int = 8

    # Universes larger than this are analyzed but logged as expensive
    warn_attributes: int = 6

    @classmethod
    def from_env(cls) -> "EngineConfig":
        max_attributes = _get_int(
            "FD2NF_MAX_ATTRIBUTES", get_int("engine", "max_attributes", cls.max_attributes), min_value=1, max_value=16
        )
        warn_attributes = _get_int(
            "FD2NF_WARN_ATTRIBUTES",
            get_int("engine", "warn_attributes", cls.warn_attributes),
            min_value=1,
            max_value=max_attributes,
        )
        return cls(max_attributes=max_attributes, warn_attributes=warn_attributes)


@lru_cache(maxsize=1)
def get_engine_config() -> EngineConfig:
    """Process-wide EngineConfig read once from config.yaml and the environment."""
    return EngineConfig.from_env()
