"""Core utilities shared across oo-design-metrics."""

from .exceptions import (
    ClassNotFoundError,
    ConfigError,
    DuplicateClassError,
    HierarchyCycleError,
    ModelError,
    OOMetricsError,
)

__all__ = [
    "OOMetricsError",
    "ModelError",
    "DuplicateClassError",
    "ClassNotFoundError",
    "HierarchyCycleError",
    "ConfigError",
]
