"""Threshold configuration for object-oriented design metrics.

Default factor ranges follow the recommended intervals published for the
MOOD metric set (Abreu & Carapuça). Values outside a range are flagged by
the reporters, never treated as errors.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import ConfigError


@dataclass
class FactorRange:
    """Inclusive recommended range for a factor metric."""

    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


@dataclass
class FactorThresholds:
    """Recommended ranges for the five factor metrics."""

    mhf: FactorRange = field(default_factory=lambda: FactorRange(0.095, 0.369))
    ahf: FactorRange = field(default_factory=lambda: FactorRange(0.75, 1.0))
    mif: FactorRange = field(default_factory=lambda: FactorRange(0.60, 0.80))
    aif: FactorRange = field(default_factory=lambda: FactorRange(0.25, 0.48))
    pof: FactorRange = field(default_factory=lambda: FactorRange(0.02, 0.10))


@dataclass
class HierarchyThresholds:
    """Warning levels for hierarchy metrics."""

    dit_warning: int = 5  # Deeper trees are hard to reason about
    noc_warning: int = 10  # Wide base classes are risky to change


@dataclass
class ThresholdConfig:
    """Complete threshold configuration."""

    factors: FactorThresholds = field(default_factory=FactorThresholds)
    hierarchy: HierarchyThresholds = field(default_factory=HierarchyThresholds)

    @classmethod
    def load(cls, path: Path) -> ThresholdConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ThresholdConfig instance (defaults if the file does not exist)

        Raises:
            ConfigError: If the file is not valid YAML or has unknown keys
        """
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid threshold file {path}: {e}", context={"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Threshold file {path} must contain a mapping",
                context={"path": str(path)},
            )

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThresholdConfig:
        """Create config from dictionary.

        Factor ranges are given as ``[low, high]`` pairs or
        ``{"low": ..., "high": ...}`` mappings. Missing entries keep defaults.

        Args:
            data: Configuration dictionary

        Returns:
            ThresholdConfig instance

        Raises:
            ConfigError: On unknown keys or malformed ranges
        """
        factors = FactorThresholds()
        factor_names = {f.name for f in fields(FactorThresholds)}
        for name, raw in _section(data, "factors").items():
            if name not in factor_names:
                raise ConfigError(f"Unknown factor '{name}'", context={"key": name})
            setattr(factors, name, _parse_range(name, raw))

        hierarchy = HierarchyThresholds()
        hierarchy_names = {f.name for f in fields(HierarchyThresholds)}
        for name, raw in _section(data, "hierarchy").items():
            if name not in hierarchy_names:
                raise ConfigError(
                    f"Unknown hierarchy threshold '{name}'", context={"key": name}
                )
            try:
                setattr(hierarchy, name, int(raw))
            except (TypeError, ValueError) as e:
                raise ConfigError(
                    f"Invalid value for '{name}': {raw!r}", context={"key": name}
                ) from e

        unknown = set(data) - {"factors", "hierarchy"}
        if unknown:
            raise ConfigError(
                f"Unknown threshold sections: {sorted(unknown)}",
                context={"keys": sorted(unknown)},
            )

        return cls(factors=factors, hierarchy=hierarchy)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            "factors": {
                name: [r["low"], r["high"]]
                for name, r in asdict(self.factors).items()
            },
            "hierarchy": asdict(self.hierarchy),
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            path: Path to save configuration
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def factor_status(self, name: str, value: float) -> str:
        """Compare a factor value against its recommended range.

        Args:
            name: Factor name ("mif", "mhf", "ahf", "aif" or "pof")
            value: Computed factor value

        Returns:
            "low", "ok" or "high"
        """
        factor_range: FactorRange = getattr(self.factors, name)
        if factor_range.contains(value):
            return "ok"
        return "low" if value < factor_range.low else "high"


def _parse_range(name: str, raw: Any) -> FactorRange:
    if isinstance(raw, dict):
        low, high = raw.get("low"), raw.get("high")
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        low, high = raw
    else:
        raise ConfigError(f"Invalid range for '{name}': {raw!r}", context={"key": name})

    try:
        low, high = float(low), float(high)
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"Invalid range for '{name}': {raw!r}", context={"key": name}
        ) from e

    if low > high:
        raise ConfigError(
            f"Range for '{name}' has low > high: {low} > {high}",
            context={"key": name},
        )
    return FactorRange(low, high)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Threshold section '{key}' must be a mapping, got {section!r}",
            context={"key": key},
        )
    return section
