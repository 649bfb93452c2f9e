"""
Board cursor used by input handling to pick a placement.
"""
from .location import Location


class Cursor:
    """
    A selected location that always stays on the board.
    
    Moves that would leave the board are ignored.
    """
    
    def __init__(self, board, location=None):
        """
        Initialize the cursor.
        
        Args:
            board: Board the cursor moves over
            location (Location, optional): Starting position (default: board center)
        """
        self.board = board
        if location is None:
            location = board.center
        elif not board.contains(location):
            raise ValueError(f"Cursor start {location} is off the board")
        self.location = Location(*location)
        
    def move(self, dx, dy):
        """
        Shift the cursor.
        
        Args:
            dx (int): Column delta
            dy (int): Row delta
            
        Returns:
            bool: True if the cursor moved, False if it would have left the board
        """
        target = self.board.offset_within(self.location, dx, dy)
        if target is None:
            return False
        self.location = target
        return True
