"""
CollisionResolver: destroys colonies that end a round with two ants.

Detection happens in two phases:

1. During the movement pass, every arrival that brings a colony to exactly
   two occupants is recorded. Only an immediately repeated colony is
   skipped, so the pending list may still hold duplicates.
2. After the pass, each recorded colony is re-checked. If it holds exactly
   two ants NOW, it is destroyed and both current occupants die.

A colony that reached two and then received a third ant in the same tick is
not destroyed: its count is three at re-check time. This rule is kept as is;
changing it changes simulation outcomes.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from antsim.core.state import SimulationState

logger = logging.getLogger(__name__)


class CollisionResolver:
    """Records collision candidates and resolves them once per tick."""

    def __init__(self, state: "SimulationState"):
        self.state = state
        self.pending: list[int] = []

    def observe_arrival(self, site: int) -> None:
        """Record a colony if this arrival brought it to exactly two ants."""
        if self.state.occupant_count[site] == 2:
            if not self.pending or self.pending[-1] != site:
                self.pending.append(site)

    def resolve(self) -> list[tuple[int, int, int]]:
        """
        Re-check every recorded colony and apply collisions.

        Returns:
            (colony, ant_a, ant_b) for every colony destroyed this tick
        """
        state = self.state
        collisions = []
        for site in self.pending:
            if state.occupant_count[site] != 2:
                continue

            ant_a, ant_b = state.members[site][0], state.members[site][1]
            state.destroy_site(site)
            state.kill(ant_a)
            state.kill(ant_b)
            collisions.append((site, ant_a, ant_b))
            logger.debug("Colony %d destroyed by ants %d and %d", site, ant_a, ant_b)

        self.pending.clear()
        return collisions
