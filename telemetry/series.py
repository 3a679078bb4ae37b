"""
Chart-ready series built from ingested records.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from config import MAX_GRANULARITY
from telemetry.model import TELEMETRY_FIELDS, Record


@dataclass(frozen=True)
class DatasetStyle:
    label: str
    border_color: str
    background_color: str


# One fixed style per telemetry field, in TELEMETRY_FIELDS order
DATASET_STYLES = {
    "cpu_usage": DatasetStyle("Total CPU Usage (%)", "rgb(255, 99, 132)", "rgba(255, 99, 132, 0.5)"),
    "cpu_temp": DatasetStyle("CPU Package Temperature (°C)", "rgb(54, 162, 235)", "rgba(54, 162, 235, 0.5)"),
    "gpu_load": DatasetStyle("GPU Core Load (%)", "rgb(75, 192, 192)", "rgba(75, 192, 192, 0.5)"),
    "gpu_temp": DatasetStyle("GPU Temperature (°C)", "rgb(153, 102, 255)", "rgba(153, 102, 255, 0.5)"),
}


@dataclass
class Dataset:
    """One telemetry line: values plus its display name and colors."""
    label: str
    data: List[Optional[float]]
    border_color: str
    background_color: str
    fill: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "data": list(self.data),
            "borderColor": self.border_color,
            "backgroundColor": self.background_color,
            "fill": self.fill,
        }


@dataclass
class SeriesCollection:
    """
    Labels plus four parallel datasets.

    All datasets have as many points as there are labels.
    """
    labels: List[Optional[str]] = field(default_factory=list)
    datasets: List[Dataset] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def to_chart_data(self) -> Dict[str, Any]:
        """Return the ``{labels, datasets}`` dict a line-chart renderer consumes."""
        return {
            "labels": list(self.labels),
            "datasets": [d.to_dict() for d in self.datasets],
        }


def clamp_granularity(granularity: int) -> int:
    """Clamp to the slider range [0, MAX_GRANULARITY]."""
    return max(0, min(MAX_GRANULARITY, int(granularity)))


def sampling_interval(granularity: int) -> int:
    """Row stride for a granularity; 0 keeps every row, same as 1."""
    granularity = clamp_granularity(granularity)
    return 1 if granularity == 0 else granularity


def build(records: Sequence[Record], granularity: int) -> SeriesCollection:
    """
    Subsample records and reshape them into a SeriesCollection.

    Keeps rows 0, interval, 2*interval, ... by position, not by elapsed
    time. Values are passed through as-is, None included.

    Args:
        records: Ingested rows in file order
        granularity: Keep every Nth row (0 keeps all)

    Returns:
        New SeriesCollection; empty (but with all four datasets) for no records
    """
    kept = records[::sampling_interval(granularity)]

    datasets = []
    for name in TELEMETRY_FIELDS:
        style = DATASET_STYLES[name]
        datasets.append(Dataset(
            label=style.label,
            data=[getattr(r, name) for r in kept],
            border_color=style.border_color,
            background_color=style.background_color,
        ))

    return SeriesCollection(labels=[r.time for r in kept], datasets=datasets)
