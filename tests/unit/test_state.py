"""Unit tests for SimulationState bookkeeping."""

import pytest

from antsim.analysis import check_invariants
from antsim.core.state import SimulationState


def make_state(n_sites, placements, max_moves=10):
    """State with ants placed at the given colonies, in id order."""
    state = SimulationState(n_sites, len(placements), max_moves)
    for ant, site in enumerate(placements):
        state._add_member(site, ant)
    return state


class TestPlacement:
    """Tests for initial placement."""

    def test_place_agents_uses_random_source(self, scripted_random):
        state = SimulationState(n_sites=3, n_agents=3, max_moves=10)
        state.place_agents(scripted_random([2, 0, 2]))

        assert state.position.tolist() == [2, 0, 2]
        assert state.occupant_count.tolist() == [1, 0, 2]
        assert state.members[2] == [0, 2]
        assert check_invariants(state) == []

    def test_place_agents_skips_destroyed(self, scripted_random):
        state = SimulationState(n_sites=3, n_agents=1, max_moves=10)
        state.destroy_site(0)
        source = scripted_random([0, 0, 1])
        state.place_agents(source)

        assert state.position[0] == 1
        assert source.calls == [3, 3, 3]

    def test_no_live_sites_raises(self, scripted_random):
        state = SimulationState(n_sites=0, n_agents=2, max_moves=10)
        with pytest.raises(ValueError):
            state.place_agents(scripted_random())

    def test_no_ants_no_sites_is_fine(self, scripted_random):
        state = SimulationState(n_sites=0, n_agents=0, max_moves=10)
        state.place_agents(scripted_random())
        assert state.alive_count == 0

    def test_initial_counters(self):
        state = SimulationState(n_sites=5, n_agents=4, max_moves=10)
        assert state.alive_count == 4
        assert state.active_under_budget_count == 4


class TestRelocate:
    """Tests for relocate."""

    def test_relocate_updates_occupancy(self):
        state = make_state(3, [0, 0])
        state.relocate(0, from_site=0, to_site=1)

        assert state.occupant_count.tolist() == [1, 1, 0]
        assert state.members[0] == [1]
        assert state.members[1] == [0]
        assert state.position[0] == 1
        assert state.move_count[0] == 1
        assert check_invariants(state) == []

    def test_swap_with_last_removal(self):
        state = make_state(2, [0, 0, 0, 0])
        state.relocate(1, from_site=0, to_site=1)

        # Last member (3) takes the vacated slot
        assert state.members[0] == [0, 3, 2]
        assert check_invariants(state) == []

        state.relocate(3, from_site=0, to_site=1)
        assert state.members[0] == [0, 2]
        assert state.members[1] == [1, 3]
        assert check_invariants(state) == []

    def test_relocate_to_same_site(self):
        state = make_state(1, [0, 0])
        state.relocate(0, from_site=0, to_site=0)

        assert state.occupant_count[0] == 2
        assert sorted(state.members[0]) == [0, 1]
        assert state.move_count[0] == 1
        assert check_invariants(state) == []

    def test_reaching_cap_decrements_active_count(self):
        state = make_state(2, [0], max_moves=2)

        state.relocate(0, 0, 1)
        assert state.active_under_budget_count == 1

        state.relocate(0, 1, 0)
        assert state.active_under_budget_count == 0
        assert not state.is_under_budget(0)

        # Moving past the cap does not decrement again
        state.relocate(0, 0, 1)
        assert state.active_under_budget_count == 0
        assert state.move_count[0] == 3


class TestKill:
    """Tests for kill."""

    def test_kill_under_budget(self):
        state = make_state(2, [0, 1])
        assert state.kill(0) is True

        assert not state.alive[0]
        assert state.alive_count == 1
        assert state.active_under_budget_count == 1
        assert state.members[0] == []
        assert check_invariants(state) == []

    def test_kill_twice_is_noop(self):
        state = make_state(2, [0, 1])
        state.kill(0)
        assert state.kill(0) is False
        assert state.alive_count == 1
        assert state.active_under_budget_count == 1

    def test_kill_over_budget_keeps_active_count(self):
        state = make_state(2, [0, 1], max_moves=1)
        state.relocate(0, 0, 1)
        assert state.active_under_budget_count == 1

        state.kill(0)
        assert state.alive_count == 1
        assert state.active_under_budget_count == 1
        assert check_invariants(state) == []


class TestDestroySite:
    """Tests for destroy_site."""

    def test_destroy_clears_site(self):
        state = make_state(2, [1, 1])
        assert state.destroy_site(1) is True

        assert state.destroyed[1]
        assert state.occupant_count[1] == 0
        assert state.members[1] == []
        assert state.active_sites == 1

    def test_destroy_twice_is_noop(self):
        state = make_state(2, [])
        state.destroy_site(0)
        assert state.destroy_site(0) is False
        assert state.destroyed[0]

    def test_occupants_returns_copy(self):
        state = make_state(1, [0, 0])
        occupants = state.occupants(0)
        occupants.append(99)
        assert state.members[0] == [0, 1]
