"""Neighbor enumeration and the per-cell B3/S23 transition rule."""

from typing import List, Sequence, Tuple

from .grid import HEIGHT, WIDTH, CellState, Coordinate, Grid


def neighbor_coordinates(coord: Tuple[int, int]) -> List[Coordinate]:
    """Get the on-board positions surrounding a cell.

    The board does not wrap, so edge cells have 5 neighbors and corner
    cells have 3.

    Args:
        coord: (x, y) position of the cell

    Returns:
        List of neighboring coordinates (up to 8)
    """
    x, y = coord
    positions = []
    for dx in [-1, 0, 1]:
        for dy in [-1, 0, 1]:
            if dx == 0 and dy == 0:
                continue

            nx, ny = x + dx, y + dy
            if 0 <= nx < WIDTH and 0 <= ny < HEIGHT:
                positions.append(Coordinate(nx, ny))

    return positions


def neighbors(coord: Tuple[int, int], grid: Grid) -> List[CellState]:
    """Get the states of a cell's neighbors on the given grid."""
    return [grid.get(position) for position in neighbor_coordinates(coord)]


def count_alive(neighbor_states: Sequence[CellState]) -> int:
    """Count living cells among neighbor states.

    Raises:
        AssertionError: If alive and dead counts don't add up to the total
    """
    alive = sum(1 for s in neighbor_states if s is CellState.ALIVE)
    dead = sum(1 for s in neighbor_states if s is CellState.DEAD)
    assert alive + dead == len(neighbor_states), (
        f"neighbor count mismatch: {alive} alive + {dead} dead != {len(neighbor_states)}"
    )
    return alive


def next_state(state: CellState, alive: int) -> CellState:
    """Apply Conway's rules to a single cell.

    - Live cell with 2-3 live neighbors survives
    - Dead cell with exactly 3 live neighbors becomes alive
    - All other cells die or stay dead

    Args:
        state: Current state of the cell
        alive: Number of living neighbors, as given by count_alive()

    Returns:
        State of the cell in the next generation
    """
    if state is CellState.ALIVE:
        if alive < 2 or alive > 3:
            return CellState.DEAD
        return CellState.ALIVE

    if alive == 3:
        return CellState.ALIVE
    return CellState.DEAD
