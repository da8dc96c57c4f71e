"""Configuration for dataset generation and analysis defaults."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GraphKind(Enum):
    DAG = "dag"
    CYCLIC = "cyclic"
    MULTI_SCC = "multi_scc"


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Knobs shared by every generated dataset."""

    seed: int = 42

    # edge weights are drawn uniformly from [min_weight, max_weight]
    min_weight: int = 1
    max_weight: int = 10

    def __post_init__(self) -> None:
        if self.min_weight > self.max_weight:
            raise ValueError(
                f"min_weight ({self.min_weight}) exceeds max_weight ({self.max_weight})"
            )


@dataclass(frozen=True, slots=True)
class DatasetPreset:
    """One named dataset written by `schedgraph generate`.

    *density* is the edge probability for DAG, the extra-edge
    probability for CYCLIC and the inter-component edge probability for
    MULTI_SCC.  *groups* is the number of cycles (CYCLIC) or components
    (MULTI_SCC) and is ignored for DAG.
    """

    name: str
    kind: GraphKind
    n: int
    density: float
    source: int = 0
    groups: int = 0

    @property
    def filename(self) -> str:
        return f"{self.name}.json"


# Three sizes (6-10, 10-20, 20-50 vertices), each as a DAG, a graph with
# planted cycles and a graph with several planted components.
DATASET_PRESETS: tuple[DatasetPreset, ...] = (
    DatasetPreset("small1", GraphKind.DAG, n=8, density=0.3),
    DatasetPreset("small2", GraphKind.CYCLIC, n=8, density=0.2, source=2, groups=1),
    DatasetPreset("small3", GraphKind.MULTI_SCC, n=10, density=0.3, groups=2),
    DatasetPreset("medium1", GraphKind.DAG, n=15, density=0.25),
    DatasetPreset("medium2", GraphKind.CYCLIC, n=18, density=0.15, source=5, groups=3),
    DatasetPreset("medium3", GraphKind.MULTI_SCC, n=20, density=0.2, groups=4),
    DatasetPreset("large1", GraphKind.DAG, n=30, density=0.2),
    DatasetPreset("large2", GraphKind.CYCLIC, n=40, density=0.1, source=10, groups=5),
    DatasetPreset("large3", GraphKind.MULTI_SCC, n=50, density=0.15, groups=6),
)

DEFAULT_GENERATOR = GeneratorConfig()


def preset_by_name(name: str) -> DatasetPreset:
    for preset in DATASET_PRESETS:
        if preset.name == name:
            return preset
    known = ", ".join(p.name for p in DATASET_PRESETS)
    raise KeyError(f"Unknown dataset preset {name!r} (known: {known})")
