"""
Grid map generator.

Produces map file lines for an nx x ny grid of colonies named `C<x>_<y>`,
each linked to its von Neumann neighbors (at most four edges per colony).
"""

from typing import Literal


# Direction vectors for neighbor lookup
DIRECTIONS = {
    "north": (0, -1),   # North: y decreases
    "south": (0, 1),    # South: y increases
    "east": (1, 0),     # East: x increases
    "west": (-1, 0),    # West: x decreases
}


def grid_colony_name(x: int, y: int) -> str:
    return f"C{x}_{y}"


def generate_grid_map(
    nx: int,
    ny: int,
    boundary: Literal["periodic", "absorbing"] = "periodic",
) -> list[str]:
    """
    Generate map lines for a rectangular grid.

    Args:
        nx, ny: Grid dimensions
        boundary: "periodic" wraps edges around; "absorbing" omits edges
                  that would leave the grid

    Returns:
        One map line per colony, row by row
    """
    if nx < 1 or ny < 1:
        raise ValueError(f"grid dimensions must be positive, got {nx}x{ny}")
    if boundary not in ("periodic", "absorbing"):
        raise ValueError(f"unknown boundary: {boundary}")

    lines = []
    for y in range(ny):
        for x in range(nx):
            tokens = [grid_colony_name(x, y)]
            for direction, (dx, dy) in DIRECTIONS.items():
                new_x, new_y = x + dx, y + dy
                if boundary == "periodic":
                    new_x, new_y = new_x % nx, new_y % ny
                elif not (0 <= new_x < nx and 0 <= new_y < ny):
                    continue
                tokens.append(f"{direction}={grid_colony_name(new_x, new_y)}")
            lines.append(" ".join(tokens))
    return lines
