#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Grid, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Start a glider near the top-left corner
    game = GameOfLife(Grid(glider.place(offset_x=2, offset_y=2)))

    print("Initial state:")
    print(game.grid)
    print(f"Population: {game.population}")
    print()

    for generation, grid in game.run(8):
        print(f"Generation {generation}:")
        print(grid)
        print(f"Population: {game.population}")
        print()

    print(f"Bounding box: {game.grid.get_bounding_box()}")
    if game.period is not None:
        print(f"Repeats every {game.period} generations")


if __name__ == "__main__":
    main()
