"""Configuration for a colony simulation run."""

from dataclasses import dataclass


DEFAULT_MAX_MOVES = 10000


@dataclass
class SimulationConfig:
    """Configuration for an ant simulation."""

    num_ants: int  # Number of ants placed at start
    max_moves: int = DEFAULT_MAX_MOVES  # Per-ant move budget (completed moves)

    # External tick ceiling. None reuses max_moves, which is the
    # reference configuration; the two are still independent parameters.
    max_ticks: int | None = None

    seed: int | None = None  # Seed for the default random source

    def __post_init__(self):
        if self.num_ants < 0:
            raise ValueError(f"num_ants must be non-negative, got {self.num_ants}")
        if self.max_moves < 1:
            raise ValueError(f"max_moves must be positive, got {self.max_moves}")
        if self.max_ticks is not None and self.max_ticks < 0:
            raise ValueError(f"max_ticks must be non-negative, got {self.max_ticks}")

    @property
    def tick_ceiling(self) -> int:
        """Resolved tick ceiling for the driver loop."""
        return self.max_moves if self.max_ticks is None else self.max_ticks
