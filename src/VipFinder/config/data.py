"""Data source configuration: where the catalog JSON lives."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from VipFinder.config.common import (
    check_non_empty,
    expect_float,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class DataConfig:
    """Dataset location.

    Attributes:
        source: File path or HTTP(S) URL of the JSON document.
        source_env: Environment variable that overrides ``source`` when set.
        timeout: HTTP timeout in seconds.
    """

    source: str
    source_env: str
    timeout: float


def load_data(raw: Mapping[str, Any]) -> DataConfig:
    """Load the ``data`` section, applying the environment override.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If ``data.source`` is missing.
    """
    section = get_section(raw, "data", required=True)
    source_env = expect_str(get_optional_value(section, "source_env", "VIPFINDER_DATA"), "data.source_env")
    source = expect_str(get_required_value(section, "source", "data.source"), "data.source")

    override = os.getenv(source_env.strip()) if source_env.strip() else None
    if override and override.strip():
        source = override.strip()

    return DataConfig(
        source=source,
        source_env=source_env,
        timeout=expect_float(get_optional_value(section, "timeout", 30), "data.timeout"),
    )


def check_data(config: DataConfig) -> None:
    check_non_empty(config.source, "data.source")
    if config.timeout <= 0:
        raise ValueError("data.timeout must be positive")
