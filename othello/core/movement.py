"""
Movement implementation for Othello.

A Movement is the full set of writes one move makes: the placed disc first,
then every captured disc. It can be played all at once or one write at a time.
"""
from typing import NamedTuple

from .cell import Cell
from .location import Location

# Score offsets applied to the placement square
BASE_SCORE = 100
CORNER_BONUS = 100
EDGE_PENALTY = 100


class CellChange(NamedTuple):
    """A single write of a cell value into a board location."""

    location: Location
    cell: Cell


class Movement:
    """
    An ordered, replayable list of cell writes making up one move.

    A Movement with no entries is invalid and playing it does nothing.
    Entries are consumed as they are played, so a fully played Movement is
    invalid again.
    """

    def __init__(self, entries=None):
        """
        Initialize a movement.

        Args:
            entries (iterable, optional): CellChange items; omitted for the invalid movement
        """
        self._entries = list(entries) if entries else []
        self._captures = max(len(self._entries) - 1, 0)

    @classmethod
    def build(cls, board, location, cell):
        """
        Construct the movement for placing `cell` at `location`.

        Never raises: an off-board or occupied location, an EMPTY cell, or a
        placement that captures nothing all yield the invalid movement.

        Args:
            board (Board): Board to read; it is not modified
            location (Location): Placement target
            cell (Cell): Player placing the disc

        Returns:
            Movement: Placement followed by captures in scan order
        """
        location = Location(*location)
        captured = board.find_flippable_around(location, cell)
        if not captured:
            return cls()

        cell = Cell(cell)
        entries = [CellChange(location, cell)]
        entries.extend(CellChange(loc, cell) for loc in captured)
        return cls(entries)

    def is_valid(self):
        """True while there are writes left to play."""
        return len(self._entries) > 0

    @property
    def entries(self):
        return tuple(self._entries)

    @property
    def location(self):
        """Placement target, or None for an invalid movement."""
        if not self._entries:
            return None
        return self._entries[0].location

    @property
    def captures(self):
        """Number of discs this movement was built to capture."""
        return self._captures

    def play_one(self, board):
        """
        Apply and remove the next queued write.

        Args:
            board (Board): Board to write into

        Returns:
            bool: True if a write was played, False if nothing was queued
        """
        if not self._entries:
            return False

        board.apply(self._entries.pop(0))
        return True

    def play_all(self, board):
        """
        Play every queued write.

        Returns:
            int: Number of writes played
        """
        played = 0
        while self.play_one(board):
            played += 1
        return played

    def score(self, board):
        """
        Static heuristic value of this move; higher is better.

        Captures plus a base of 100, then +100 on a corner and -100 on any
        other edge square.

        Args:
            board (Board): Board whose dimensions define corners and edges

        Returns:
            float: Move score, or -inf for an invalid movement
        """
        if not self.is_valid():
            return float('-inf')

        x, y = self.location
        x_edge = x == 0 or x == board.width - 1
        y_edge = y == 0 or y == board.height - 1

        score = len(self._entries) - 1 + BASE_SCORE
        if x_edge and y_edge:
            score += CORNER_BONUS
        elif x_edge or y_edge:
            score -= EDGE_PENALTY
        return score

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"Movement(location={self.location}, entries={len(self._entries)})"
