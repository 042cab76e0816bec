"""Configuration for oo-design-metrics."""

from .thresholds import (
    FactorRange,
    FactorThresholds,
    HierarchyThresholds,
    ThresholdConfig,
)

__all__ = [
    "FactorRange",
    "FactorThresholds",
    "HierarchyThresholds",
    "ThresholdConfig",
]
