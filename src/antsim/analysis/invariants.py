"""
Consistency checks over SimulationState.

One-way and read-only: the engine never calls these. Tests and demos use
them to confirm the bookkeeping after every tick.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from antsim.core.state import SimulationState


def check_invariants(state: "SimulationState") -> list[str]:
    """
    Verify occupancy, destruction and budget bookkeeping.

    Returns:
        Human-readable violations; empty when the state is consistent
    """
    violations = []

    for site in range(state.n_sites):
        members = state.members[site]
        if state.occupant_count[site] != len(members):
            violations.append(
                f"colony {site}: counter {state.occupant_count[site]} != {len(members)} members"
            )
        if state.destroyed[site] and members:
            violations.append(f"colony {site}: destroyed but holds ants {members}")
        for ant in members:
            if state.position[ant] != site:
                violations.append(f"ant {ant}: listed at colony {site}, positioned at {state.position[ant]}")

    placed = [ant for members in state.members for ant in members]
    if len(placed) != len(set(placed)):
        violations.append("an ant is listed in more than one colony")

    alive_ids = set(np.flatnonzero(state.alive).tolist())
    if set(placed) != alive_ids:
        violations.append(
            f"occupied ants {sorted(set(placed))} != alive ants {sorted(alive_ids)}"
        )

    if state.alive_count != len(alive_ids):
        violations.append(f"alive_count {state.alive_count} != {len(alive_ids)}")

    under_budget = int(np.count_nonzero(state.alive & (state.move_count < state.max_moves)))
    if state.active_under_budget_count != under_budget:
        violations.append(
            f"active_under_budget_count {state.active_under_budget_count} != {under_budget}"
        )

    return violations
