"""
AntSimulation: the driver that ties the engine together.

One tick:
1. Every live ant, in ascending id order, attempts one move
2. Arrivals that bring a colony to exactly two ants are recorded
3. Recorded colonies still holding exactly two ants are destroyed

The loop runs while the termination policy holds and the tick ceiling
has not been reached.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from os import PathLike
from typing import TYPE_CHECKING

from antsim.core.collision import CollisionResolver
from antsim.core.graph import ColonyGraph
from antsim.core.movement import MovementEngine
from antsim.core.random_source import create_default_random_source
from antsim.core.state import SimulationState
from antsim.core.termination import TerminationPolicy

if TYPE_CHECKING:
    from antsim.core.config import SimulationConfig
    from antsim.core.random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    """What happened during one tick."""

    tick: int  # 1-based index of the tick just run
    moved: int  # Ants that changed colony
    collisions: list[tuple[int, int, int]] = field(default_factory=list)


@dataclass
class SimulationResult:
    """Summary of a finished run."""

    ticks: int
    elapsed_seconds: float
    alive_agents: int
    total_agents: int
    active_sites: int
    total_sites: int


class AntSimulation:
    """
    Runs ants over a colony graph until extinction, budget or tick ceiling.

    Usage:
        graph = ColonyGraph.from_named_edges(names, edges)
        sim = AntSimulation(graph, SimulationConfig(num_ants=100, seed=1))
        result = sim.run()
    """

    def __init__(
        self,
        graph: ColonyGraph,
        config: "SimulationConfig",
        random: "RandomSource | None" = None,
    ):
        self.graph = graph
        self.config = config
        self.random = random if random is not None else create_default_random_source(config.seed)

        self.state = SimulationState(graph.n_sites, config.num_ants, config.max_moves)
        self.state.place_agents(self.random)

        self.movement = MovementEngine(graph, self.state, self.random)
        self.collisions = CollisionResolver(self.state)
        self.termination = TerminationPolicy(self.state)

        self.current_tick = 0

    @classmethod
    def from_map_file(
        cls,
        path: str | PathLike,
        config: "SimulationConfig",
        random: "RandomSource | None" = None,
    ) -> AntSimulation:
        """Load a map file and build a simulation on it (OSError propagates)."""
        from antsim.io.map_parser import load_map

        colony_map = load_map(path)
        graph = ColonyGraph.from_named_edges(colony_map.site_names, colony_map.edges)
        logger.info("Loaded %s: %d colonies, %d edges", path, graph.n_sites, graph.n_edges)
        return cls(graph, config, random)

    def should_continue(self) -> bool:
        return self.termination.should_continue()

    def step(self) -> TickReport:
        """Run exactly one tick: a full movement pass, then collisions."""
        moved = 0
        for ant in range(self.state.total_agents):
            destination = self.movement.move(ant)
            if destination is not None:
                moved += 1
                self.collisions.observe_arrival(destination)

        collisions = self.collisions.resolve()
        self.current_tick += 1
        return TickReport(tick=self.current_tick, moved=moved, collisions=collisions)

    def run(self, max_ticks: int | None = None) -> SimulationResult:
        """
        Run ticks until the termination policy fails or the ceiling is hit.

        Args:
            max_ticks: Tick ceiling for this call; defaults to the configured one

        Returns:
            SimulationResult with ticks run during this call and wall time
        """
        ceiling = self.config.tick_ceiling if max_ticks is None else max_ticks
        alive, active, total = self.stats()
        logger.info("Starting run: %d ants, %d/%d active colonies", alive, active, total)

        ticks = 0
        start = time.perf_counter()
        while self.should_continue() and ticks < ceiling:
            self.step()
            ticks += 1
        elapsed = time.perf_counter() - start

        result = SimulationResult(
            ticks=ticks,
            elapsed_seconds=elapsed,
            alive_agents=self.state.alive_count,
            total_agents=self.state.total_agents,
            active_sites=self.state.active_sites,
            total_sites=self.graph.n_sites,
        )
        logger.info(
            "Run ended after %d ticks (%.3fs): %d/%d ants alive",
            ticks, elapsed, result.alive_agents, result.total_agents,
        )
        return result

    def stats(self) -> tuple[int, int, int]:
        """(alive ants, active colonies, total colonies)."""
        return self.state.alive_count, self.state.active_sites, self.graph.n_sites
