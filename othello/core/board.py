"""
Board implementation for Othello.
"""
import logging

import numpy as np

from .cell import Cell
from .location import Location
from .movement import Movement

logger = logging.getLogger(__name__)

# (dx, dy) scan order; Movement entries follow it
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


class Board:
    """
    Represents a rectangular Othello board.

    Board state representation (indexed state[y, x]):
    - 0: empty cell
    - 1: black disc
    - -1: white disc

    Disc counts and the terminal flag are cached and refreshed after every
    write made through apply().
    """

    def __init__(self, width=8, height=8):
        """
        Initialize a board with the four starting discs around the center.

        Args:
            width (int): Number of columns (at least 2)
            height (int): Number of rows (at least 2)
        """
        if width < 2 or height < 2:
            raise ValueError(f"Board must be at least 2x2, got {width}x{height}")

        self._width = width
        self._height = height
        self.state = np.zeros((height, width), dtype=np.int8)

        cx, cy = width // 2, height // 2
        self.state[cy, cx] = Cell.BLACK
        self.state[cy - 1, cx - 1] = Cell.BLACK
        self.state[cy - 1, cx] = Cell.WHITE
        self.state[cy, cx - 1] = Cell.WHITE

        self._counts = {}
        self._terminal = False
        self._refresh()

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def center(self):
        """The pivot location used for the starting layout."""
        return Location(self._width // 2, self._height // 2)

    def contains(self, location):
        """True if the location lies on this board."""
        x, y = location
        return 0 <= x < self._width and 0 <= y < self._height

    def cell_at(self, location):
        """
        Read the cell at a location.

        Args:
            location (Location): Position to read

        Returns:
            Cell: The cell value stored there

        Raises:
            IndexError: If the location is off the board
        """
        if not self.contains(location):
            raise IndexError(f"{location} is outside a {self._width}x{self._height} board")
        return Cell(int(self.state[location[1], location[0]]))

    def locations(self):
        """Yield every location, left-to-right then top-to-bottom."""
        for y in range(self._height):
            for x in range(self._width):
                yield Location(x, y)

    def offset_within(self, location, dx, dy):
        """Shift a location by (dx, dy); None if the result is off the board."""
        return Location(*location).offset(dx, dy, self._width, self._height)

    def count(self, cell):
        """Number of positions holding the given cell value."""
        return self._counts.get(cell, 0)

    def is_terminal(self):
        """True when neither player has a legal move."""
        return self._terminal

    def apply(self, change):
        """
        Write a cell value into the board.

        This does not check that the write is a legal Othello move; Movement
        is responsible for that. It lets a Movement replay its queued writes
        one at a time.

        Args:
            change (CellChange): Location and value to write

        Returns:
            bool: True if the stored value changed, False if it already held that value
        """
        location, cell = change
        if self.cell_at(location) == cell:
            return False

        self.state[location[1], location[0]] = cell
        self._refresh()
        return True

    def find_flippable_around(self, start, cell):
        """
        Find every disc that placing `cell` at `start` would capture.

        Args:
            start (Location): Candidate placement
            cell (Cell): Player making the placement

        Returns:
            list: Captured locations in direction order, nearest first within
            a direction. Empty if the placement is occupied, off the board, or
            captures nothing.
        """
        cell = Cell(cell)
        if not cell.is_player or not self.contains(start):
            return []

        if self.cell_at(start) != Cell.EMPTY:
            return []

        captured = []
        for dx, dy in DIRECTIONS:
            captured.extend(self._find_flippable(start, cell, dx, dy))
        return captured

    def _find_flippable(self, start, cell, dx, dy):
        """
        Collect the opponent run along one ray from `start` (exclusive).

        The run counts only if it ends on a disc of `cell`; that bracketing
        disc is not included. Running off the board or into an empty cell
        discards the run.
        """
        opponent = cell.opposite()
        run = []
        here = self.offset_within(start, dx, dy)

        while here is not None:
            value = self.cell_at(here)
            if value == cell:
                return run
            if value != opponent:
                break
            run.append(here)
            here = self.offset_within(here, dx, dy)

        return []

    def is_legal_move(self, location, cell):
        """True if placing `cell` at `location` captures at least one disc."""
        return len(self.find_flippable_around(location, cell)) > 0

    def legal_moves_for(self, cell):
        """
        Get every legal move for a player, best first.

        Args:
            cell (Cell): Player to move

        Returns:
            list: Valid Movements sorted by descending score; ties keep board
            scan order. Empty when the game is over.
        """
        if self._terminal:
            return []
        return self._scan_moves(cell)

    def _scan_moves(self, cell):
        cell = Cell(cell)
        if not cell.is_player:
            return []

        moves = []
        for location in self.locations():
            movement = Movement.build(self, location, cell)
            if movement.is_valid():
                moves.append(movement)

        # sorted() is stable, including with reverse=True
        return sorted(moves, key=lambda m: m.score(self), reverse=True)

    def _has_legal_move(self, cell):
        return any(self.is_legal_move(location, cell) for location in self.locations())

    def copy(self):
        """Independent snapshot of this board, caches included."""
        clone = Board.__new__(Board)
        clone._width = self._width
        clone._height = self._height
        clone.state = self.state.copy()
        clone._counts = dict(self._counts)
        clone._terminal = self._terminal
        return clone

    def _refresh(self):
        """Recompute the cached counts and terminal flag from the grid."""
        self._counts = {
            cell: int(np.count_nonzero(self.state == cell))
            for cell in Cell
        }

        was_terminal = self._terminal
        self._terminal = (not self._has_legal_move(Cell.BLACK)
                          and not self._has_legal_move(Cell.WHITE))
        if self._terminal and not was_terminal:
            logger.debug("No legal moves remain (black=%d, white=%d)",
                         self._counts[Cell.BLACK], self._counts[Cell.WHITE])

    def __str__(self):
        rows = []
        for y in range(self._height):
            rows.append(' '.join(Cell(int(v)).symbol for v in self.state[y]))
        return '\n'.join(rows)


def new_board(width=8, height=8):
    """Create a board with the standard starting layout."""
    return Board(width, height)
