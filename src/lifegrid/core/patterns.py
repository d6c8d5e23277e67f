"""Starting patterns and the default seed."""

from typing import Dict, List, Optional, Tuple

from .grid import Coordinate, in_bounds

ALIVE_GLYPHS = "oO*#"
DEAD_GLYPHS = "."


class Pattern:
    """A named set of live cells, positioned relative to (0, 0)."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        self.name = name
        self.cells = cells
        self.description = description

    @classmethod
    def from_text(cls, name: str, text: str, description: str = "") -> "Pattern":
        """Parse a plain-text pattern.

        Each line is a row; 'o', 'O', '*' or '#' mark living cells and '.'
        marks dead ones. Lines starting with '!' are comments and blank
        lines are skipped.

        Raises:
            ValueError: If a row contains an unknown character
        """
        rows = [line.strip() for line in text.splitlines()]
        rows = [row for row in rows if row and not row.startswith("!")]

        cells = []
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char in ALIVE_GLYPHS:
                    cells.append((x, y))
                elif char not in DEAD_GLYPHS:
                    raise ValueError(f"Invalid character '{char}' in pattern '{name}' row {y}")

        return cls(name, cells, description)

    def get_size(self) -> Tuple[int, int]:
        """Width and height of the area spanned by the live cells."""
        if not self.cells:
            return (0, 0)

        xs, ys = zip(*self.cells)
        return (max(xs) - min(xs) + 1, max(ys) - min(ys) + 1)

    def place(self, offset_x: int = 0, offset_y: int = 0) -> List[Coordinate]:
        """Get the board coordinates of this pattern at an offset.

        Raises:
            IndexError: If any cell lands outside the board
        """
        placed = [Coordinate(x + offset_x, y + offset_y) for x, y in self.cells]
        for coord in placed:
            if not in_bounds(coord):
                raise IndexError(
                    f"Pattern '{self.name}' at ({offset_x}, {offset_y}) puts cell "
                    f"({coord.x}, {coord.y}) out of bounds"
                )
        return placed


# name -> (description, rows)
BUILTIN_PATTERNS = {
    "Block": ("Still life", "oo\noo"),
    "Blinker": ("Period-2 oscillator", "...\nooo\n..."),
    "Toad": ("Period-2 oscillator", ".ooo\nooo."),
    "Pulsar": (
        "Period-3 oscillator",
        """
        ..ooo...ooo..
        .............
        o....o.o....o
        o....o.o....o
        o....o.o....o
        ..ooo...ooo..
        .............
        ..ooo...ooo..
        o....o.o....o
        o....o.o....o
        o....o.o....o
        .............
        ..ooo...ooo..
        """,
    ),
    "Glider": ("Spaceship heading down and right, period 4", "..o\no.o\n.oo"),
    "R-pentomino": ("Methuselah, settles after 1103 generations", ".oo\noo.\n.o."),
}


class PatternLibrary:
    """Patterns available by name, starting with the built-in ones."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {
            name: Pattern.from_text(name, rows, description)
            for name, (description, rows) in BUILTIN_PATTERNS.items()
        }

    def get_pattern(self, name: str) -> Optional[Pattern]:
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns)


# (pattern name, x offset, y offset) of the classic start frame
DEFAULT_SEED = [
    ("Blinker", 0, 0),
    ("Glider", 4, 0),
    ("Pulsar", 5, 11),
]


def default_seed(library: Optional[PatternLibrary] = None) -> List[Coordinate]:
    """Live cells of the classic start frame: a blinker, a glider and a pulsar."""
    library = library or PatternLibrary()
    cells: List[Coordinate] = []
    for name, offset_x, offset_y in DEFAULT_SEED:
        cells.extend(library.get_pattern(name).place(offset_x, offset_y))
    return cells
