"""
Analysis layer: derived quantities and consistency checks.

IMPORTANT: This is NOT seen by the engine. Read-only derivation only.

- summarize: ant and colony counts for reports
- check_invariants: occupancy, destruction and budget bookkeeping checks
"""

from antsim.analysis.summary import summarize
from antsim.analysis.invariants import check_invariants

__all__ = [
    "summarize",
    "check_invariants",
]
