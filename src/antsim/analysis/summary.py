"""Summary statistics of a simulation state."""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from antsim.core.state import SimulationState


def summarize(state: "SimulationState") -> dict:
    """
    Aggregate counts for reporting.

    Returns:
        Dict with ant and colony counts plus move statistics of live ants
    """
    alive_moves = state.move_count[state.alive]
    return {
        "alive_agents": int(state.alive_count),
        "dead_agents": int(state.total_agents - state.alive_count),
        "total_agents": int(state.total_agents),
        "under_budget_agents": int(state.active_under_budget_count),
        "active_sites": state.active_sites,
        "destroyed_sites": int(np.count_nonzero(state.destroyed)),
        "total_sites": int(state.n_sites),
        "mean_moves_alive": float(alive_moves.mean()) if alive_moves.size else 0.0,
        "max_occupancy": int(state.occupant_count.max()) if state.n_sites else 0,
    }
