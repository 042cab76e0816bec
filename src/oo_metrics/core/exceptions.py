"""Typed exception hierarchy for oo-design-metrics.

Hierarchy
---------
OOMetricsError (base)
├── ModelError             – class model construction / validation errors
│   ├── DuplicateClassError
│   ├── ClassNotFoundError
│   └── HierarchyCycleError
└── ConfigError            – configuration / validation errors

Metric computations never raise for empty input: a zero denominator yields
``0.0``. Errors are reserved for malformed class models and bad configuration.
"""

from typing import Any


class OOMetricsError(Exception):
    """Base exception for oo-design-metrics."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# ── Class model ─────────────────────────────────────────────────────────


class ModelError(OOMetricsError):
    """Class model is malformed."""

    pass


class DuplicateClassError(ModelError):
    """Two classes in one collection share a name."""

    pass


class ClassNotFoundError(ModelError, KeyError):
    """A class name is not present in the collection."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class HierarchyCycleError(ModelError):
    """A parent chain loops back on itself (not a forest)."""

    pass


# ── Configuration layer ─────────────────────────────────────────────────


class ConfigError(OOMetricsError):
    """Configuration / validation errors."""

    pass
