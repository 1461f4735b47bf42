"""Termination policy for the tick loop."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from antsim.core.state import SimulationState


class TerminationPolicy:
    """
    Decides whether another tick should run.

    Only the O(1) aggregate counters are read. The tick ceiling is enforced
    separately by the driver.
    """

    def __init__(self, state: "SimulationState"):
        self.state = state

    def should_continue(self) -> bool:
        """True iff some ant is alive and some alive ant is under budget."""
        return self.state.alive_count > 0 and self.state.active_under_budget_count > 0
