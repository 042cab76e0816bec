"""Object-oriented design analysis module.

This module provides the class model, visibility rule and metric collectors
for computing DIT, NOC and the MOOD factor metrics (MIF, MHF, AHF, AIF, POF)
over an explicitly declared class hierarchy.

Key Components:
    - ClassDescriptor: One class with its parent and directly declared members
    - ClassCollection: Immutable set of classes for one analysis run
    - classify: Underscore-prefix visibility rule
    - dit / noc: Hierarchy metrics for a single class
    - mif / mhf / ahf / aif / pof: Project-wide factor metrics
    - OOAnalyzer: Facade computing a full ProjectOOMetrics report

Example:
    collection = ClassCollection.from_dict({
        "Animal": {"methods": ["make_sound"]},
        "Mammal": {"parent": "Animal"},
        "Dog": {"parent": "Mammal", "methods": ["make_sound"]},
    })

    analyzer = OOAnalyzer(collection)
    assert analyzer.dit("Dog") == 2
    assert analyzer.noc("Animal") == 1

    report = analyzer.analyze()
    summary = report.to_summary()
"""

from .analyzer import OOAnalyzer
from .collectors import ahf, aif, dit, mhf, mif, noc, pof
from .metrics import ClassMetrics, ProjectOOMetrics
from .model import AttributeDecl, ClassCollection, ClassDescriptor, MethodDecl
from .visibility import Visibility, classify, is_private, is_public

__all__ = [
    "AttributeDecl",
    "ClassCollection",
    "ClassDescriptor",
    "MethodDecl",
    "Visibility",
    "classify",
    "is_private",
    "is_public",
    "dit",
    "noc",
    "mif",
    "mhf",
    "ahf",
    "aif",
    "pof",
    "OOAnalyzer",
    "ClassMetrics",
    "ProjectOOMetrics",
]
