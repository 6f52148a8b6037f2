"""Configuration loading and management for churnscope.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.churnscope.toml)
    3. Project config (./churnscope.toml)
    4. Explicit config file
    5. Environment variables (CHURNSCOPE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(default_days=90)
    >>> config.default_days
    90
    >>> config.efficiency.optimal_max
    150
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .constants import (
    DEFAULT_DAYS,
    DEFAULT_MODE,
    DEFAULT_PERIOD_UNIT,
    VALID_MODES,
    VALID_PERIOD_UNITS,
)
from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]


@dataclass(frozen=True)
class EfficiencyThresholds:
    """Commit-size thresholds, in lines changed (insertions + deletions).

    Bucketing of a single commit:
        <= micro          -> micro
        <  optimal_min    -> small
        <= optimal_max    -> optimal
        <= huge           -> high
        otherwise         -> huge

    The efficiency label for an author's mean uses the same numbers with
    different comparisons; see ``metrics.efficiency.get_efficiency_label``.
    """

    micro: int = 10
    optimal_min: int = 30
    optimal_max: int = 150
    huge: int = 500

    def __post_init__(self) -> None:
        if self.micro < 0:
            raise ValueError("micro must be non-negative")
        if not self.micro < self.optimal_min <= self.optimal_max < self.huge:
            raise ValueError(
                "thresholds must satisfy micro < optimal_min <= optimal_max < huge"
            )


@dataclass(frozen=True)
class ClassifierThresholds:
    """Contributor classification thresholds.

    Attributes:
        min_changes: Below this many changed lines an author is a Scout
        refactorer_deletion_ratio: deletions / changes at or above this -> Refactorer
        explorer_insertion_ratio: insertions / changes above this -> Explorer
        generalist_files_multiplier: files touched above avg * this -> Generalist
    """

    min_changes: int = 100
    refactorer_deletion_ratio: float = 0.4
    explorer_insertion_ratio: float = 0.7
    generalist_files_multiplier: float = 2.5

    def __post_init__(self) -> None:
        if self.min_changes < 1:
            raise ValueError("min_changes must be at least 1")
        for field_name in ("refactorer_deletion_ratio", "explorer_insertion_ratio"):
            value = getattr(self, field_name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{field_name} must be between 0.0 and 1.0")
        if self.generalist_files_multiplier <= 0:
            raise ValueError("generalist_files_multiplier must be positive")


DEFAULT_EFFICIENCY_THRESHOLDS = EfficiencyThresholds()
DEFAULT_CLASSIFIER_THRESHOLDS = ClassifierThresholds()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis execution.

    Attributes:
        default_days: Look-back window when neither --since nor --days is given
        default_mode: Mode used when the caller does not pick one
        default_period_unit: Bucket size for periodic mode
        exclude_patterns: Extra glob patterns excluded from ownership results,
            unioned with the built-in deny-list
        respect_gitignore: Drop ownership entries ignored by .gitignore rules
        git_timeout_seconds: Timeout applied to each git subprocess
        verbosity: Logging verbosity level; -v and -q override it
        log_file: Also append log records to this file
        efficiency: Commit-size thresholds
        classifier: Contributor classification thresholds
    """

    default_days: int = DEFAULT_DAYS
    default_mode: str = DEFAULT_MODE.value
    default_period_unit: str = DEFAULT_PERIOD_UNIT.value
    exclude_patterns: list[str] = field(default_factory=list)
    respect_gitignore: bool = True
    git_timeout_seconds: int = 60
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    efficiency: EfficiencyThresholds = field(default_factory=EfficiencyThresholds)
    classifier: ClassifierThresholds = field(default_factory=ClassifierThresholds)

    def __post_init__(self) -> None:
        if self.default_days < 1:
            raise ValueError("default_days must be at least 1")
        if self.default_mode not in VALID_MODES:
            raise ValueError(f"default_mode must be one of: {', '.join(VALID_MODES)}")
        if self.default_period_unit not in VALID_PERIOD_UNITS:
            raise ValueError(
                f"default_period_unit must be one of: {', '.join(VALID_PERIOD_UNITS)}"
            )
        if self.git_timeout_seconds < 1:
            raise ValueError("git_timeout_seconds must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be quiet, normal or verbose")


_NESTED_SECTIONS = {
    "efficiency": EfficiencyThresholds,
    "classifier": ClassifierThresholds,
}


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is unreadable or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".churnscope.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "churnscope.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    for section, section_cls in _NESTED_SECTIONS.items():
        value = merged.pop(section, None)
        if value is None:
            continue
        if isinstance(value, section_cls):
            merged[section] = value
        elif isinstance(value, dict):
            try:
                merged[section] = section_cls(**value)
            except (TypeError, ValueError) as e:
                raise InvalidConfigError(section, value, str(e))
        else:
            raise InvalidConfigError(section, value, "expected a table")

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise InvalidConfigError("config", merged, str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CHURNSCOPE_* environment variables.

    Supported environment variables:
        CHURNSCOPE_DEFAULT_DAYS: int
        CHURNSCOPE_DEFAULT_MODE: aggregate/periodic/ownership
        CHURNSCOPE_DEFAULT_PERIOD_UNIT: daily/weekly/monthly
        CHURNSCOPE_RESPECT_GITIGNORE: bool (true/false/1/0)
        CHURNSCOPE_GIT_TIMEOUT_SECONDS: int
        CHURNSCOPE_VERBOSITY: quiet/normal/verbose
        CHURNSCOPE_LOG_FILE: path

    Returns:
        Dict of field_name -> parsed_value for any CHURNSCOPE_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        if field_name in _NESTED_SECTIONS:
            continue
        env_key = f"CHURNSCOPE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed in an env var (lists).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or type_hint == Optional[str] or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be parsed
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
