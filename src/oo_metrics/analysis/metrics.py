"""Metric dataclasses for object-oriented design analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config.thresholds import ThresholdConfig

FACTOR_NAMES = ("mif", "mhf", "ahf", "aif", "pof")


@dataclass
class ClassMetrics:
    """Hierarchy metrics for a single class.

    Attributes:
        name: Class name
        parent: Parent class name, or None for a root class
        dit: Depth of Inheritance Tree
        noc: Number of Children
        method_count: Methods declared directly on the class
        attribute_count: Attributes declared directly on the class
    """

    name: str
    parent: str | None = None
    dit: int = 0
    noc: int = 0
    method_count: int = 0
    attribute_count: int = 0

    def to_metadata(self) -> dict[str, Any]:
        """Flatten metrics into a JSON-compatible dictionary."""
        return {
            "name": self.name,
            "parent": self.parent,
            "dit": self.dit,
            "noc": self.noc,
            "method_count": self.method_count,
            "attribute_count": self.attribute_count,
        }


@dataclass
class ProjectOOMetrics:
    """Project-wide object-oriented design metrics.

    Holds per-class hierarchy metrics and the five factor ratios for one
    analysis run. Factor values are stored unrounded; ``to_summary`` rounds
    for presentation.

    Attributes:
        classes: Per-class metrics in collection order
        mif: Method Inheritance Factor
        mhf: Method Hiding Factor
        ahf: Attribute Hiding Factor
        aif: Attribute Inheritance Factor
        pof: Polymorphism Factor
        analyzed_at: Timestamp when analysis was performed
    """

    classes: list[ClassMetrics] = field(default_factory=list)
    mif: float = 0.0
    mhf: float = 0.0
    ahf: float = 0.0
    aif: float = 0.0
    pof: float = 0.0
    analyzed_at: datetime = field(default_factory=datetime.now)

    @property
    def total_classes(self) -> int:
        return len(self.classes)

    @property
    def total_methods(self) -> int:
        return sum(c.method_count for c in self.classes)

    @property
    def total_attributes(self) -> int:
        return sum(c.attribute_count for c in self.classes)

    @property
    def max_dit(self) -> int:
        return max((c.dit for c in self.classes), default=0)

    def factors(self) -> dict[str, float]:
        """Return factor metrics keyed by lowercase name."""
        return {name: getattr(self, name) for name in FACTOR_NAMES}

    def get_class(self, name: str) -> ClassMetrics | None:
        for class_metrics in self.classes:
            if class_metrics.name == name:
                return class_metrics
        return None

    def out_of_range(self, thresholds: ThresholdConfig) -> list[str]:
        """Return names of factors outside their recommended ranges.

        Args:
            thresholds: Threshold configuration with factor ranges

        Returns:
            Factor names in canonical order (mif, mhf, ahf, aif, pof)
        """
        return [
            name
            for name, value in self.factors().items()
            if thresholds.factor_status(name, value) != "ok"
        ]

    def deep_classes(self, thresholds: ThresholdConfig) -> list[ClassMetrics]:
        """Return classes whose DIT exceeds the warning level."""
        limit = thresholds.hierarchy.dit_warning
        return [c for c in self.classes if c.dit > limit]

    def wide_classes(self, thresholds: ThresholdConfig) -> list[ClassMetrics]:
        """Return classes whose NOC exceeds the warning level."""
        limit = thresholds.hierarchy.noc_warning
        return [c for c in self.classes if c.noc > limit]

    def to_summary(self) -> dict[str, Any]:
        """Generate summary dict for reporting.

        Returns:
            Dictionary containing per-class rows and rounded factors
        """
        return {
            "analyzed_at": self.analyzed_at.isoformat(),
            "total_classes": self.total_classes,
            "total_methods": self.total_methods,
            "total_attributes": self.total_attributes,
            "max_dit": self.max_dit,
            "classes": [c.to_metadata() for c in self.classes],
            "factors": {
                name: round(value, 4) for name, value in self.factors().items()
            },
        }
