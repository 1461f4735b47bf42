"""
I/O adapters around the engine.

- parse_map_lines / load_map: map file text -> ColonyMap
- format_world: final graph + state -> printable report
- generate_grid_map: synthetic grid maps for demos and tests
"""

from antsim.io.map_parser import ColonyMap, parse_map_lines, load_map
from antsim.io.world_printer import format_world
from antsim.io.map_generator import generate_grid_map, grid_colony_name

__all__ = [
    "ColonyMap",
    "parse_map_lines",
    "load_map",
    "format_world",
    "generate_grid_map",
    "grid_colony_name",
]
