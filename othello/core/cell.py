"""
Cell values for the Othello board.
"""
from enum import IntEnum


class Cell(IntEnum):
    """
    Contents of a single board position.
    
    The integer values match the numpy board encoding:
    - 0: empty
    - 1: black (moves first)
    - -1: white
    """
    
    EMPTY = 0
    BLACK = 1
    WHITE = -1
    
    def opposite(self):
        """
        Get the opposing player's cell.
        
        Returns:
            Cell: WHITE for BLACK, BLACK for WHITE, EMPTY for EMPTY
        """
        return Cell(-self.value)
    
    @property
    def symbol(self):
        """Single character used when printing a board."""
        return _SYMBOLS[self]
    
    @property
    def is_player(self):
        return self is not Cell.EMPTY


_SYMBOLS = {
    Cell.EMPTY: '.',
    Cell.BLACK: 'X',
    Cell.WHITE: 'O',
}
