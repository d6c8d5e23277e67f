"""Tests for the Grid class."""

import numpy as np
import pytest
from lifegrid.core.grid import HEIGHT, WIDTH, CellState, Coordinate, Grid, in_bounds, neighbor_capacity


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test empty grid initialization."""
        grid = Grid()
        assert grid.width == WIDTH == 50
        assert grid.height == HEIGHT == 25
        assert grid.shape == (50, 25)
        assert grid.cells.shape == (25, 50)
        assert grid.population == 0

    def test_live_cells_are_alive(self):
        """Test that listed cells are alive and the rest dead."""
        grid = Grid([(1, 1), (2, 3), Coordinate(49, 24)])

        assert grid.get((1, 1)) is CellState.ALIVE
        assert grid.get((2, 3)) is CellState.ALIVE
        assert grid.get(Coordinate(49, 24)) is CellState.ALIVE
        assert grid.get((0, 0)) is CellState.DEAD
        assert grid.get((3, 2)) is CellState.DEAD
        assert grid.population == 3

    def test_row_column_indexing(self):
        """Test that cells are stored as [row][column]."""
        grid = Grid([(7, 2)])
        assert grid.cells[2, 7] == 1
        assert grid.cells[7, 2] == 0

    def test_duplicate_cells(self):
        """Test duplicate coordinates only count once."""
        grid = Grid([(4, 4), (4, 4)])
        assert grid.population == 1

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (50, 0), (0, 25), (50, 25)])
    def test_construction_out_of_bounds(self, coord):
        """Test out-of-bounds live cells fail fast."""
        with pytest.raises(IndexError):
            Grid([coord])

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (50, 0), (0, 25)])
    def test_get_out_of_bounds(self, coord):
        """Test out-of-bounds queries fail fast."""
        grid = Grid()
        with pytest.raises(IndexError):
            grid.get(coord)

    def test_in_bounds(self):
        """Test the bounds helper."""
        assert in_bounds((0, 0))
        assert in_bounds((49, 24))
        assert not in_bounds((50, 24))
        assert not in_bounds((49, 25))
        assert not in_bounds((-1, 3))

    def test_cells_are_read_only(self):
        """Test the grid can't be modified after construction."""
        grid = Grid([(1, 1)])
        with pytest.raises(ValueError):
            grid.cells[0, 0] = 1
        assert grid.population == 1

    def test_from_array(self):
        """Test building a grid from an array."""
        data = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
        data[3, 4] = 1
        data[0, 0] = 5

        grid = Grid.from_array(data)
        assert grid == Grid([(4, 3), (0, 0)])
        assert grid.cells[0, 0] == 1
        assert not grid.cells.flags.writeable

        # The source array stays independent
        data[10, 10] = 1
        assert grid.get((10, 10)) is CellState.DEAD

    def test_from_array_shape_mismatch(self):
        """Test that wrongly shaped data is rejected."""
        with pytest.raises(ValueError):
            Grid.from_array(np.zeros((WIDTH, HEIGHT)))

        with pytest.raises(ValueError):
            Grid.from_array([[0, 1], [1, 0]])

    def test_count_all_neighbors(self):
        """Test vectorized neighbor counting."""
        grid = Grid([(2, 1), (2, 2), (2, 3)])  # Vertical line

        neighbor_counts = grid.count_all_neighbors()

        assert neighbor_counts.shape == (HEIGHT, WIDTH)
        assert neighbor_counts[2, 2] == 2  # Middle of line has 2 neighbors
        assert neighbor_counts[2, 1] == 3  # Next to middle has 3 neighbors
        assert neighbor_counts[2, 3] == 3  # Other side has 3 neighbors
        assert neighbor_counts[0, 0] == 0  # Far corner has no neighbors

    def test_count_all_neighbors_no_wrap(self):
        """Test the convolution doesn't wrap around the edges."""
        grid = Grid([(WIDTH - 1, 0), (0, HEIGHT - 1), (WIDTH - 1, HEIGHT - 1)])
        neighbor_counts = grid.count_all_neighbors()

        assert neighbor_counts[0, 0] == 0
        assert neighbor_counts[HEIGHT - 1, 1] == 1
        assert neighbor_counts[1, WIDTH - 2] == 1

    def test_neighbor_capacity(self):
        """Test expected neighbor counts for corners, edges and interior."""
        capacity = neighbor_capacity()

        assert capacity.shape == (HEIGHT, WIDTH)
        for row, col in [(0, 0), (0, WIDTH - 1), (HEIGHT - 1, 0), (HEIGHT - 1, WIDTH - 1)]:
            assert capacity[row, col] == 3
        assert capacity[0, 10] == 5
        assert capacity[HEIGHT - 1, 10] == 5
        assert capacity[10, 0] == 5
        assert capacity[10, WIDTH - 1] == 5
        assert capacity[10, 10] == 8
        assert int(capacity.sum()) == 8 * 48 * 23 + 5 * (2 * 48 + 2 * 23) + 3 * 4

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        assert Grid().get_bounding_box() is None
        assert Grid([(5, 3)]).get_bounding_box() == (5, 3, 5, 3)
        assert Grid([(5, 3), (2, 1), (7, 8)]).get_bounding_box() == (2, 1, 7, 8)

    def test_equality(self):
        """Test grid equality comparison."""
        assert Grid() == Grid()
        assert Grid([(1, 1)]) == Grid([(1, 1)])
        assert Grid([(1, 1)]) != Grid([(1, 1), (2, 2)])
        assert Grid() != "not a grid"

    def test_hash(self):
        """Test equal grids hash alike."""
        assert hash(Grid([(3, 3)])) == hash(Grid([(3, 3)]))
        assert len({Grid([(3, 3)]), Grid([(3, 3)]), Grid()}) == 2

    def test_string_representation(self):
        """Test string representation."""
        lines = str(Grid([(0, 0), (1, 1)])).split("\n")

        assert len(lines) == HEIGHT
        assert lines[0] == "o" + "." * (WIDTH - 1)
        assert lines[1] == ".o" + "." * (WIDTH - 2)
        assert lines[2] == "." * WIDTH
