"""Human-readable report of the surviving world."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from antsim.core.graph import ColonyGraph
    from antsim.core.state import SimulationState


def format_world(graph: "ColonyGraph", state: "SimulationState") -> str:
    """
    Render the remaining world.

    Each non-destroyed colony, in id order, is listed with its edges to
    non-destroyed colonies as `label=Name`, followed by the alive ant count.
    """
    lines = ["=== Remaining World ==="]
    for site in range(graph.n_sites):
        if state.destroyed[site]:
            continue

        entry = graph.name(site)
        labels = graph.edge_labels(site)
        for label, neighbor in zip(labels, graph.neighbors(site).tolist()):
            if not state.destroyed[neighbor]:
                entry += f" {label}={graph.name(neighbor)}"
        lines.append(entry)

    lines.append("")
    lines.append(f"Alive ants: {state.alive_count}/{state.total_agents}")
    return "\n".join(lines)
