"""Fixed-size grid of cell states for Conway's Game of Life."""

from enum import Enum
from functools import lru_cache
from typing import Iterable, NamedTuple, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

WIDTH = 50
HEIGHT = 25


class CellState(Enum):
    """State of a single cell."""

    ALIVE = 1
    DEAD = 0


class Coordinate(NamedTuple):
    """Column/row position on the board."""

    x: int
    y: int


def in_bounds(coord: Tuple[int, int]) -> bool:
    """Check whether a coordinate lies on the board."""
    x, y = coord
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


# Moore neighborhood kernel, the cell itself does not count
_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def _convolve_neighbors(cells: np.ndarray) -> np.ndarray:
    """Sum the eight neighbors of every cell.

    Zero padding keeps the board bounded: positions past an edge
    contribute nothing, so edges never wrap around.
    """
    torch_input = torch.from_numpy((cells > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbors = F.conv2d(torch_input, _KERNEL, padding=1)
    return neighbors[0, 0].numpy().astype(np.int8)


class Grid:
    """Immutable HEIGHT x WIDTH board of cell states.

    Cells are stored in a read-only numpy array indexed ``[row, column]``.
    A grid is never changed after construction; the next generation is
    always a new Grid.
    """

    def __init__(self, live_cells: Iterable[Tuple[int, int]] = ()) -> None:
        """Create a board with the given cells alive and all others dead.

        Args:
            live_cells: (x, y) coordinates of the initially living cells

        Raises:
            IndexError: If any coordinate is outside the board
        """
        cells = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        for coord in live_cells:
            x, y = coord
            if not in_bounds((x, y)):
                raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
            cells[y, x] = 1
        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def from_array(cls, cells) -> "Grid":
        """Build a grid from a HEIGHT x WIDTH array of truthy/falsy values.

        Args:
            cells: Array-like indexed [row][column]

        Raises:
            ValueError: If the array shape doesn't match the board
        """
        arr = np.array(cells, dtype=np.int8)
        if arr.shape != (HEIGHT, WIDTH):
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {(HEIGHT, WIDTH)}")

        grid = cls.__new__(cls)
        arr = (arr != 0).astype(np.int8)
        arr.flags.writeable = False
        grid._cells = arr
        return grid

    @property
    def width(self) -> int:
        return WIDTH

    @property
    def height(self) -> int:
        return HEIGHT

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (WIDTH, HEIGHT)

    @property
    def cells(self) -> np.ndarray:
        """Read-only cell array, 1 for alive and 0 for dead."""
        return self._cells

    def get(self, coord: Tuple[int, int]) -> CellState:
        """Get the state of a cell.

        Args:
            coord: (x, y) position

        Returns:
            CellState.ALIVE or CellState.DEAD

        Raises:
            IndexError: If the coordinate is outside the board
        """
        x, y = coord
        if not in_bounds((x, y)):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

        return CellState.ALIVE if self._cells[y, x] else CellState.DEAD

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def count_all_neighbors(self) -> np.ndarray:
        """Count living neighbors for all cells using a torch convolution.

        Returns:
            HEIGHT x WIDTH array of alive-neighbor counts
        """
        return _convolve_neighbors(self._cells)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(rows) == 0:
            return None

        return (int(cols.min()), int(rows.min()), int(cols.max()), int(rows.max()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Grid(population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as 'o' and dead as '.'."""
        return "\n".join("".join("o" if cell else "." for cell in row) for row in self._cells)


@lru_cache(maxsize=None)
def neighbor_capacity() -> np.ndarray:
    """Number of on-board neighbors of every cell (8 interior, 5 edge, 3 corner)."""
    capacity = _convolve_neighbors(np.ones((HEIGHT, WIDTH), dtype=np.int8))
    capacity.flags.writeable = False
    return capacity
