#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import PatternLibrary, Simulation
from lifegrid.frontends import format_grid


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Place the glider near the top-left corner of a 12x12 grid
    sim = Simulation(glider.to_grid(12, 12, 1, 1))

    print("Initial state:")
    print(format_grid(sim.grid))
    print(f"Population: {sim.population}")
    print()

    # Run simulation for 8 generations
    for grid in sim:
        print(f"Generation {sim.generation}:")
        print(format_grid(grid))
        print(f"Population: {sim.population}")
        print()

        if sim.generation == 8:
            break

    # After two full periods the glider has moved two cells diagonally
    print(f"Live cells: {sim.grid.live_cells()}")


if __name__ == "__main__":
    main()
