"""Console reporter for object-oriented design metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from ...config.thresholds import ThresholdConfig

if TYPE_CHECKING:
    from ..metrics import ProjectOOMetrics

FACTOR_LABELS = {
    "mif": "Method Inheritance Factor",
    "mhf": "Method Hiding Factor",
    "ahf": "Attribute Hiding Factor",
    "aif": "Attribute Inheritance Factor",
    "pof": "Polymorphism Factor",
}

STATUS_STYLES = {
    "ok": ("green", "in range"),
    "low": ("yellow", "below range"),
    "high": ("red", "above range"),
}


def _cell(value: int, flagged: bool) -> str:
    color = "red" if flagged else "white"
    return f"[{color}]{value}[/{color}]"


class ConsoleReporter:
    """Console reporter for displaying OO metrics in terminal.

    Thresholds given to a ``print_*`` call override the ones given to the
    constructor for that call only.
    """

    def __init__(
        self,
        console: Console | None = None,
        thresholds: ThresholdConfig | None = None,
    ) -> None:
        self.console = console or Console()
        self.thresholds = thresholds or ThresholdConfig()

    def print_classes(
        self, metrics: ProjectOOMetrics, thresholds: ThresholdConfig | None = None
    ) -> None:
        """Print per-class DIT and NOC.

        Args:
            metrics: Project metrics to display
            thresholds: Warning levels (defaults to the reporter's)
        """
        thresholds = thresholds or self.thresholds
        self.console.print("[bold]Class Hierarchy[/bold]")

        if not metrics.classes:
            self.console.print("  No classes analyzed")
            self.console.print()
            return

        deep = {c.name for c in metrics.deep_classes(thresholds)}
        wide = {c.name for c in metrics.wide_classes(thresholds)}

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Class", style="cyan", width=30)
        table.add_column("Parent", width=20)
        table.add_column("DIT", justify="right", width=6)
        table.add_column("NOC", justify="right", width=6)
        table.add_column("Methods", justify="right", width=8)
        table.add_column("Attributes", justify="right", width=10)

        for row in metrics.classes:
            table.add_row(
                row.name,
                row.parent or "-",
                _cell(row.dit, row.name in deep),
                _cell(row.noc, row.name in wide),
                str(row.method_count),
                str(row.attribute_count),
            )

        self.console.print(table)
        self.console.print()

    def print_factors(
        self, metrics: ProjectOOMetrics, thresholds: ThresholdConfig | None = None
    ) -> None:
        """Print the five factor metrics with their recommended ranges.

        Args:
            metrics: Project metrics to display
            thresholds: Factor ranges (defaults to the reporter's)
        """
        thresholds = thresholds or self.thresholds
        self.console.print("[bold]Design Factors[/bold]")

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Metric", style="bold", width=6)
        table.add_column("Description", width=30)
        table.add_column("Value", justify="right", width=8)
        table.add_column("Range", justify="center", width=14)
        table.add_column("Status", width=12)

        for name, value in metrics.factors().items():
            factor_range = getattr(thresholds.factors, name)
            color, label = STATUS_STYLES[thresholds.factor_status(name, value)]
            table.add_row(
                name.upper(),
                FACTOR_LABELS[name],
                f"{value:.2f}",
                f"{factor_range.low:.2f}-{factor_range.high:.2f}",
                f"[{color}]{label}[/{color}]",
            )

        self.console.print(table)
        self.console.print()

    def print_report(
        self, metrics: ProjectOOMetrics, thresholds: ThresholdConfig | None = None
    ) -> None:
        """Print the complete report.

        Args:
            metrics: Project metrics to display
            thresholds: Threshold configuration (defaults to the reporter's)
        """
        self.console.print("\n[bold blue]Object-Oriented Design Metrics[/bold blue]")
        self.console.print("━" * 60)
        self.console.print(
            f"  Classes: {metrics.total_classes}  "
            f"Methods: {metrics.total_methods}  "
            f"Attributes: {metrics.total_attributes}  "
            f"Max DIT: {metrics.max_dit}"
        )
        self.console.print()

        self.print_classes(metrics, thresholds)
        self.print_factors(metrics, thresholds)
