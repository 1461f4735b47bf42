"""
Core engine primitives.

This layer knows nothing about map files or printing. It only knows:
- ColonyGraph: immutable compressed adjacency of colonies
- SimulationState: ant positions, colony occupancy, liveness counters
- MovementEngine: uniform random step to a non-destroyed neighbor
- CollisionResolver: destroy colonies ending a tick with exactly two ants
- TerminationPolicy: alive ants remain and some are under budget
- AntSimulation: the tick loop driver
"""

from antsim.core.config import SimulationConfig, DEFAULT_MAX_MOVES
from antsim.core.graph import ColonyGraph, DEFAULT_EDGE_LABEL
from antsim.core.random_source import RandomSource, NumpyRandomSource, create_default_random_source
from antsim.core.state import SimulationState
from antsim.core.movement import MovementEngine
from antsim.core.collision import CollisionResolver
from antsim.core.termination import TerminationPolicy
from antsim.core.simulation import AntSimulation, SimulationResult, TickReport

__all__ = [
    "SimulationConfig",
    "DEFAULT_MAX_MOVES",
    "ColonyGraph",
    "DEFAULT_EDGE_LABEL",
    "RandomSource",
    "NumpyRandomSource",
    "create_default_random_source",
    "SimulationState",
    "MovementEngine",
    "CollisionResolver",
    "TerminationPolicy",
    "AntSimulation",
    "SimulationResult",
    "TickReport",
]
