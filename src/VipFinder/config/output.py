"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from VipFinder.config.common import (
    check_non_empty,
    expect_field_names,
    expect_str,
    get_optional_value,
    get_section,
)

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the ``output`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    formats = expect_field_names(get_optional_value(section, "formats", ["console"]), "output.formats")
    return OutputConfig(
        base_dir=expect_str(get_optional_value(section, "base_dir", "output"), "output.base_dir"),
        formats=tuple(dict.fromkeys(item.lower() for item in formats)),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    check_non_empty(config.base_dir, "output.base_dir")
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")
