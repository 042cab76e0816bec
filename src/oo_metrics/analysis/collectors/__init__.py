"""Metric collector implementations.

Hierarchy collectors measure a single class against the parent/child graph;
member collectors compute project-wide factor ratios.

Example:
    from oo_metrics.analysis.collectors import dit, noc, mhf

    depth = dit(dog)
    children = noc(animal, collection)
    hiding = mhf(collection)
"""

from .hierarchy import dit, noc
from .members import ahf, aif, mhf, mif, pof, ratio

__all__ = [
    "dit",
    "noc",
    "mif",
    "mhf",
    "ahf",
    "aif",
    "pof",
    "ratio",
]
