"""
Map file parser.

Format, one colony per line:

    Foo north=Bar west=Baz south=Qu-ux

The first token names the colony; each later token `direction=Target` adds
one directed edge. Parsing is permissive:
- blank lines are ignored
- tokens that do not split into exactly two parts on '=' are dropped
- edges to names that never head a line are dropped at graph build time
- a colony named on several lines accumulates all of its edges
"""

from __future__ import annotations
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable


@dataclass
class ColonyMap:
    """Parsed map: colony names in first-appearance order plus raw edges."""

    site_names: list[str] = field(default_factory=list)
    edges: list[tuple[str, str, str]] = field(default_factory=list)  # (source, label, target)


def parse_map_lines(lines: Iterable[str]) -> ColonyMap:
    """Parse map text lines into a ColonyMap."""
    colony_map = ColonyMap()
    seen: set[str] = set()

    for line in lines:
        parts = line.split()
        if not parts:
            continue

        name = parts[0]
        if name not in seen:
            seen.add(name)
            colony_map.site_names.append(name)

        for token in parts[1:]:
            pieces = token.split("=")
            if len(pieces) == 2:
                colony_map.edges.append((name, pieces[0], pieces[1]))

    return colony_map


def load_map(path: str | PathLike) -> ColonyMap:
    """Read and parse a map file. OSError propagates to the caller."""
    with open(path, encoding="utf-8") as f:
        return parse_map_lines(f)
