"""Conway's Game of Life transition engine and run state."""

from typing import Dict, Iterator, Optional, Tuple
import numpy as np

from .grid import HEIGHT, WIDTH, Grid, neighbor_capacity
from .rules import count_alive, neighbors, next_state


def next_generation(grid: Grid) -> Grid:
    """Compute the next generation of a grid.

    Every cell is evaluated against the neighbors it has on ``grid``, and
    results go into a fresh array, so no cell ever sees a partially
    updated board.

    Args:
        grid: Current generation

    Returns:
        New Grid holding the next generation
    """
    new_cells = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
    alive_counts = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
    totals = np.zeros((HEIGHT, WIDTH), dtype=np.int8)

    for y in range(HEIGHT):
        for x in range(WIDTH):
            states = neighbors((x, y), grid)
            totals[y, x] = len(states)
            alive = count_alive(states)
            alive_counts[y, x] = alive
            new_cells[y, x] = next_state(grid.get((x, y)), alive).value

    _check_neighbor_counts(grid, alive_counts, totals)

    return Grid.from_array(new_cells)


def _check_neighbor_counts(grid: Grid, alive_counts: np.ndarray, totals: np.ndarray) -> None:
    """Cross-check per-cell enumeration against the convolution counts."""
    assert np.array_equal(totals, neighbor_capacity()), "neighbor enumeration returned wrong number of cells"
    assert np.array_equal(alive_counts, grid.count_all_neighbors()), "alive neighbor counts disagree"


class GameOfLife:
    """Conway's Game of Life simulation.

    Holds the current generation and replaces it with a new Grid on
    every step. Boards are remembered by value, so the first repeat gives
    the period the run has settled into.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a starting grid.

        Args:
            grid: The first generation
        """
        self._grid = grid
        self._generation = 0
        self._first_seen: Dict[Grid, int] = {grid: 0}
        self._period: Optional[int] = None

    @property
    def grid(self) -> Grid:
        """Current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> int:
        return self._grid.population

    @property
    def period(self) -> Optional[int]:
        """Generations between the first repeated board and its earlier copy.

        None until a board repeats. Still lifes have period 1.
        """
        return self._period

    @property
    def extinct(self) -> bool:
        return self._grid.population == 0

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        self._grid = next_generation(self._grid)
        self._generation += 1

        if self._period is None:
            first = self._first_seen.setdefault(self._grid, self._generation)
            if first != self._generation:
                self._period = self._generation - first

        return self._grid

    def run(self, cycles: int) -> Iterator[Tuple[int, Grid]]:
        """Step the simulation a fixed number of times.

        Yields:
            Tuples of (generation, grid) after each step
        """
        for _ in range(cycles):
            grid = self.step()
            yield self._generation, grid
