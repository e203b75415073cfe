#!/usr/bin/env python3
"""
Example usage of the toruslife package.
"""

from toruslife import Grid, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the toruslife package."""
    # Cells 0, 4, 7, 8, 12, ... start alive
    grid = Grid(12, 8, 4, 7)
    game = GameOfLife(grid)

    print("Divisor fill:")
    print(grid.render())
    print(f"Population: {game.population}")
    print()

    # Replace the fill with a glider; it wraps around the edges as it moves
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        glider.apply_to_grid(grid, 5, 9)
        game.reset(clear_grid=False)

        for _ in range(8):
            game.step()
            print(f"Generation {game.generation}:")
            print(grid.render())

    final_generation, reason = game.run_until_stable(1000)
    print(f"Stopped at generation {final_generation}: {reason}")

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        if key != "population_history":
            print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
