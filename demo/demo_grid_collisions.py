#!/usr/bin/env python3
"""
Demo: Ants on a Periodic Grid

Shows how a colony world collapses as ants collide:
1. Generate a periodic grid map
2. Place ants uniformly at random
3. Step the simulation, tracking survivors and destroyed colonies
4. Print the remaining world

Use a fixed seed so the run is reproducible.
"""

from antsim.analysis import check_invariants, summarize
from antsim.core import AntSimulation, ColonyGraph, SimulationConfig
from antsim.io import format_world, generate_grid_map, parse_map_lines


def main():
    print("=" * 60)
    print("  COLLIDING ANTS ON A GRID")
    print("=" * 60)

    # Grid setup
    nx, ny = 12, 12
    num_ants = 60
    max_moves = 500

    colony_map = parse_map_lines(generate_grid_map(nx, ny, boundary="periodic"))
    graph = ColonyGraph.from_named_edges(colony_map.site_names, colony_map.edges)

    print(f"\n1. Setup:")
    print(f"   Grid: {nx}x{ny} ({graph.n_sites} colonies, {graph.n_edges} edges)")
    print(f"   Ants: {num_ants}, move budget: {max_moves}")

    config = SimulationConfig(num_ants=num_ants, max_moves=max_moves, seed=42)
    sim = AntSimulation(graph, config)

    print(f"\n2. Running...")
    print(f"   {'tick':>6} {'alive':>6} {'colonies':>9} {'collisions':>11}")
    total_collisions = 0
    while sim.should_continue() and sim.current_tick < config.tick_ceiling:
        report = sim.step()
        total_collisions += len(report.collisions)
        if report.collisions or report.tick % 50 == 0:
            alive, active, _ = sim.stats()
            print(f"   {report.tick:>6} {alive:>6} {active:>9} {total_collisions:>11}")

    violations = check_invariants(sim.state)
    print(f"\n3. Bookkeeping: {'consistent' if not violations else violations}")

    summary = summarize(sim.state)
    print(f"   Ticks run: {sim.current_tick}")
    print(f"   Survivors: {summary['alive_agents']}/{summary['total_agents']}")
    print(f"   Destroyed colonies: {summary['destroyed_sites']}/{summary['total_sites']}")
    print(f"   Mean moves of survivors: {summary['mean_moves_alive']:.1f}")

    print("\n4. Remaining world:\n")
    print(format_world(sim.graph, sim.state))


if __name__ == "__main__":
    main()
