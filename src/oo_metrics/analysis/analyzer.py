"""Object-oriented design analyzer.

``OOAnalyzer`` binds a ``ClassCollection`` and exposes every metric as a
method, plus ``analyze()`` which computes the full report in one pass. The
collection is validated once on construction and never mutated, so calls can
be repeated in any order with identical results.
"""

from __future__ import annotations

from loguru import logger

from .collectors import hierarchy, members
from .metrics import ClassMetrics, ProjectOOMetrics
from .model import ClassCollection, ClassDescriptor


class OOAnalyzer:
    """Compute DIT, NOC and the MOOD factor metrics for a class collection.

    Example:
        analyzer = OOAnalyzer(collection)
        for cls in analyzer.classes():
            print(cls.name, analyzer.dit(cls), analyzer.noc(cls))
        report = analyzer.analyze()
    """

    def __init__(self, collection: ClassCollection) -> None:
        """Initialize analyzer.

        Args:
            collection: Classes under analysis

        Raises:
            HierarchyCycleError: If the parent links do not form a forest
        """
        collection.validate()
        self.collection = collection
        logger.debug(f"OOAnalyzer initialized with {len(collection)} classes")

    def classes(self) -> list[ClassDescriptor]:
        return list(self.collection)

    def _resolve(self, cls: ClassDescriptor | str) -> ClassDescriptor:
        if isinstance(cls, str):
            return self.collection[cls]
        return cls

    def dit(self, cls: ClassDescriptor | str) -> int:
        """Depth of Inheritance Tree for a class or class name."""
        return hierarchy.dit(self._resolve(cls))

    def noc(self, cls: ClassDescriptor | str) -> int:
        """Number of Children for a class or class name."""
        return hierarchy.noc(self._resolve(cls), self.collection)

    def mif(self) -> float:
        return members.mif(self.collection)

    def mhf(self) -> float:
        return members.mhf(self.collection)

    def ahf(self) -> float:
        return members.ahf(self.collection)

    def aif(self) -> float:
        return members.aif(self.collection)

    def pof(self) -> float:
        return members.pof(self.collection)

    def analyze(self) -> ProjectOOMetrics:
        """Compute all metrics.

        Returns:
            ProjectOOMetrics with one ClassMetrics row per class
        """
        rows = [
            ClassMetrics(
                name=cls.name,
                parent=cls.parent.name if cls.parent is not None else None,
                dit=self.dit(cls),
                noc=self.noc(cls),
                method_count=len(cls.methods),
                attribute_count=len(cls.attributes),
            )
            for cls in self.collection
        ]

        report = ProjectOOMetrics(
            classes=rows,
            mif=self.mif(),
            mhf=self.mhf(),
            ahf=self.ahf(),
            aif=self.aif(),
            pof=self.pof(),
        )
        logger.info(
            f"Analyzed {report.total_classes} classes "
            f"({report.total_methods} methods, {report.total_attributes} attributes)"
        )
        return report
