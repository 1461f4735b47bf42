"""
antsim: Colliding-Ants Colony Simulator

A discrete-time simulator of ants wandering a directed graph of colonies.

Core concepts:
- Colonies are nodes of an immutable directed graph (compressed adjacency)
- Every tick, each live ant moves to a random non-destroyed neighbor
- A colony that ends a movement round holding exactly two ants is destroyed,
  together with both ants
- The run stops when no ants are alive, no ant is under its move budget,
  or the tick ceiling is reached
"""

__version__ = "0.1.0"
