"""
MovementEngine: one random step for one ant.

Valid destinations are the colony's outgoing edge targets that are not
destroyed. An ant with no valid destination stays put and its move budget
is left untouched.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from antsim.core.graph import ColonyGraph
    from antsim.core.random_source import RandomSource
    from antsim.core.state import SimulationState


class MovementEngine:
    """Chooses and applies uniform random moves."""

    def __init__(
        self,
        graph: "ColonyGraph",
        state: "SimulationState",
        random: "RandomSource",
    ):
        self.graph = graph
        self.state = state
        self.random = random
        # Scratch buffer reused across calls (hot path)
        self._buffer: list[int] = []

    def valid_destinations(self, site: int) -> list[int]:
        """
        Non-destroyed targets of a colony's outgoing edges, in edge order.

        The returned list is an internal buffer, overwritten by the next call.
        """
        destroyed = self.state.destroyed
        buffer = self._buffer
        buffer.clear()
        for neighbor in self.graph.neighbors(site).tolist():
            if not destroyed[neighbor]:
                buffer.append(neighbor)
        return buffer

    def move(self, ant: int) -> int | None:
        """
        Move one ant to a uniformly chosen valid destination.

        Returns:
            The destination colony, or None if the ant is dead or stuck
            at a dead end.
        """
        state = self.state
        if not state.alive[ant]:
            return None

        current = int(state.position[ant])
        candidates = self.valid_destinations(current)
        if not candidates:
            return None

        destination = candidates[self.random.pick(len(candidates))]
        state.relocate(ant, current, destination)
        return destination
