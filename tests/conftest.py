"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


class ScriptedRandomSource:
    """
    RandomSource that replays a fixed list of picks.

    Once the script runs out every pick returns 0, which is the only valid
    choice for single-candidate moves.
    """

    def __init__(self, picks=()):
        self.picks = list(picks)
        self.calls = []

    def pick(self, n):
        self.calls.append(n)
        value = self.picks.pop(0) if self.picks else 0
        assert 0 <= value < n, f"scripted pick {value} out of range [0, {n})"
        return value


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandomSource


@pytest.fixture
def converging_graph():
    """A -> B <- C, with B a dead end."""
    from antsim.core import ColonyGraph
    return ColonyGraph.from_named_edges(
        ["A", "B", "C"],
        [("A", "north", "B"), ("C", "south", "B")],
    )


@pytest.fixture
def ring_graph():
    """Four colonies in a directed ring R0 -> R1 -> R2 -> R3 -> R0."""
    from antsim.core import ColonyGraph
    return ColonyGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0)], names=["R0", "R1", "R2", "R3"])


@pytest.fixture
def grid_graph():
    """A 6x6 periodic grid built through the map parser."""
    from antsim.core import ColonyGraph
    from antsim.io import generate_grid_map, parse_map_lines
    colony_map = parse_map_lines(generate_grid_map(6, 6))
    return ColonyGraph.from_named_edges(colony_map.site_names, colony_map.edges)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
