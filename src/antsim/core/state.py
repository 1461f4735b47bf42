"""
SimulationState: all mutable per-tick data of a run.

Flat, index-addressed arrays only:
- per ant:    position, alive flag, move count, slot in its colony's list
- per colony: destroyed flag, occupant counter, occupant id list

Aggregate counters (alive_count, active_under_budget_count) are maintained
incrementally so termination checks are O(1).
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from antsim.core.random_source import RandomSource


class SimulationState:
    """
    Mutable state of ants and colonies.

    Invariants (checked in tests, see antsim.analysis.invariants):
    - occupant_count[s] == len(members[s]) for every colony s
    - union of members == set of alive ants
    - destroyed colonies hold no ants
    - active_under_budget_count == #alive ants with move_count < max_moves
    """

    def __init__(self, n_sites: int, n_agents: int, max_moves: int):
        self.n_sites = n_sites
        self.total_agents = n_agents
        self.max_moves = max_moves

        # ═══════════════════════════════════════════════════════════════
        # PER-ANT STATE
        # ═══════════════════════════════════════════════════════════════
        self.position = np.full(n_agents, -1, dtype=np.int64)
        self.alive = np.ones(n_agents, dtype=bool)
        self.move_count = np.zeros(n_agents, dtype=np.int64)
        # Index of the ant inside members[position]; makes removal O(1)
        self._slot = np.zeros(n_agents, dtype=np.int64)

        # ═══════════════════════════════════════════════════════════════
        # PER-COLONY STATE
        # ═══════════════════════════════════════════════════════════════
        self.destroyed = np.zeros(n_sites, dtype=bool)
        self.occupant_count = np.zeros(n_sites, dtype=np.int64)
        self.members: list[list[int]] = [[] for _ in range(n_sites)]

        # Aggregates
        self.alive_count = n_agents
        self.active_under_budget_count = n_agents

    def place_agents(self, random: "RandomSource") -> None:
        """
        Place every ant uniformly at random on a non-destroyed colony.

        Ants are placed in id order. Several ants may share a colony; this is
        not a collision, collisions are only detected after movement.
        """
        if self.total_agents and not np.any(~self.destroyed):
            raise ValueError("cannot place ants: no live colonies")

        for ant in range(self.total_agents):
            site = random.pick(self.n_sites)
            while self.destroyed[site]:
                site = random.pick(self.n_sites)
            self._add_member(site, ant)

    def _add_member(self, site: int, ant: int) -> None:
        self.position[ant] = site
        self._slot[ant] = len(self.members[site])
        self.members[site].append(ant)
        self.occupant_count[site] += 1

    def _remove_member(self, site: int, ant: int) -> None:
        """Swap-with-last removal from the colony's occupant list."""
        occupants = self.members[site]
        slot = self._slot[ant]
        last = occupants.pop()
        if last != ant:
            occupants[slot] = last
            self._slot[last] = slot
        self.occupant_count[site] -= 1

    def relocate(self, ant: int, from_site: int, to_site: int) -> None:
        """Move an ant between colonies and charge one move to its budget."""
        self._remove_member(from_site, ant)
        self._add_member(to_site, ant)

        self.move_count[ant] += 1
        if self.move_count[ant] == self.max_moves:
            self.active_under_budget_count -= 1

    def kill(self, ant: int) -> bool:
        """
        Mark an ant dead and drop it from a live colony's occupant list.

        Returns False (no-op) if it was already dead.
        """
        if not self.alive[ant]:
            return False

        site = self.position[ant]
        if site >= 0 and not self.destroyed[site]:
            self._remove_member(site, ant)

        self.alive[ant] = False
        self.alive_count -= 1
        if self.move_count[ant] < self.max_moves:
            self.active_under_budget_count -= 1
        return True

    def destroy_site(self, site: int) -> bool:
        """
        Mark a colony destroyed and empty it.

        Graph edges are untouched; visibility is filtered at query time.
        Returns False (no-op) if it was already destroyed.
        """
        if self.destroyed[site]:
            return False

        self.destroyed[site] = True
        self.occupant_count[site] = 0
        self.members[site].clear()
        return True

    def occupants(self, site: int) -> list[int]:
        """Copy of the ant ids currently at a colony."""
        return list(self.members[site])

    def is_under_budget(self, ant: int) -> bool:
        return bool(self.move_count[ant] < self.max_moves)

    @property
    def active_sites(self) -> int:
        """Number of non-destroyed colonies (full scan, reporting only)."""
        return int(self.n_sites - np.count_nonzero(self.destroyed))
