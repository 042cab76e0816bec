"""OO Design Metrics - DIT, NOC and MOOD factor metrics over class hierarchies."""

__version__ = "0.1.0"

from .core.exceptions import OOMetricsError

__all__ = ["OOMetricsError", "__version__"]
