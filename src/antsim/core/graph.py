"""
ColonyGraph: the immutable directed graph of colonies.

Colonies are dense integer ids in [0, N). Edges are stored in compressed
row form:
- targets: flat array of edge targets, grouped by source colony
- offsets: per-colony start index into targets
- counts:  per-colony number of outgoing edges

The graph never changes during a run. Destruction is simulation state and
lives in SimulationState; callers filter destroyed colonies at query time.
"""

from __future__ import annotations
from typing import Iterable, Sequence

import numpy as np


DEFAULT_EDGE_LABEL = "north"


class ColonyGraph:
    """
    Directed adjacency structure in compressed row layout.

    Names and edge labels are carried for I/O only; the engine never reads them.
    """

    def __init__(
        self,
        n_sites: int,
        edges: Iterable[tuple[int, int]],
        names: Sequence[str] | None = None,
        labels: Sequence[str] | None = None,
    ):
        """
        Build the graph.

        Args:
            n_sites: Number of colonies N
            edges: (source_id, target_id) pairs; per-source order is preserved
            names: Optional colony names, indexed by id (defaults to "C<id>")
            labels: Optional direction label per edge, aligned with edges
        """
        if n_sites < 0:
            raise ValueError(f"n_sites must be non-negative, got {n_sites}")

        edge_array = np.asarray(list(edges), dtype=np.int64).reshape(-1, 2)
        if edge_array.size and (edge_array.min() < 0 or edge_array.max() >= n_sites):
            raise ValueError(f"edge endpoint out of range [0, {n_sites})")

        if labels is None:
            labels = [DEFAULT_EDGE_LABEL] * len(edge_array)
        elif len(labels) != len(edge_array):
            raise ValueError("labels must be aligned with edges")

        if names is None:
            names = [f"C{i}" for i in range(n_sites)]
        elif len(names) != n_sites:
            raise ValueError(f"expected {n_sites} names, got {len(names)}")

        # Stable sort keeps each colony's edges in input order
        order = np.argsort(edge_array[:, 0], kind="stable")
        sources = edge_array[order, 0]

        self._n_sites = n_sites
        self.targets = edge_array[order, 1].copy()
        self.counts = np.bincount(sources, minlength=n_sites).astype(np.int64)
        self.offsets = np.zeros(n_sites, dtype=np.int64)
        if n_sites > 1:
            np.cumsum(self.counts[:-1], out=self.offsets[1:])

        for arr in (self.targets, self.counts, self.offsets):
            arr.flags.writeable = False

        self._names = tuple(names)
        self._labels = tuple(labels[i] for i in order)
        self._name_to_id = {name: i for i, name in enumerate(self._names)}

    @classmethod
    def from_named_edges(
        cls,
        site_names: Iterable[str],
        named_edges: Iterable[tuple[str, str, str]],
    ) -> ColonyGraph:
        """
        Build from colony names and (source_name, label, target_name) triples.

        Ids follow first-appearance order of site_names; repeated names are
        merged. Edges naming an unknown colony are dropped silently.
        """
        name_to_id: dict[str, int] = {}
        for name in site_names:
            if name not in name_to_id:
                name_to_id[name] = len(name_to_id)

        edges = []
        labels = []
        for source, label, target in named_edges:
            if source in name_to_id and target in name_to_id:
                edges.append((name_to_id[source], name_to_id[target]))
                labels.append(label)

        return cls(len(name_to_id), edges, names=list(name_to_id), labels=labels)

    @property
    def n_sites(self) -> int:
        """Number of colonies."""
        return self._n_sites

    @property
    def n_edges(self) -> int:
        """Number of stored edges."""
        return len(self.targets)

    def neighbors(self, site: int) -> np.ndarray:
        """
        Raw outgoing edge targets of a colony, in input order.

        Destroyed colonies are NOT filtered here.
        """
        start = self.offsets[site]
        return self.targets[start:start + self.counts[site]]

    def edge_labels(self, site: int) -> tuple[str, ...]:
        """Direction labels aligned with neighbors(site)."""
        start = int(self.offsets[site])
        return self._labels[start:start + int(self.counts[site])]

    def out_degree(self, site: int) -> int:
        return int(self.counts[site])

    def name(self, site: int) -> str:
        return self._names[site]

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def site_id(self, name: str) -> int:
        """Look up a colony id by name (KeyError if unknown)."""
        return self._name_to_id[name]

    def __repr__(self) -> str:
        return f"ColonyGraph(n_sites={self.n_sites}, n_edges={self.n_edges})"
