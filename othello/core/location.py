"""
Board coordinates.
"""
from typing import NamedTuple, Optional


class Location(NamedTuple):
    """
    A 0-based (x, y) position on a board; x is the column, y is the row.
    """
    
    x: int
    y: int
    
    def offset(self, dx: int, dy: int, width: int, height: int) -> Optional['Location']:
        """
        Add a delta to this location, staying inside a width x height board.
        
        Results are never clamped or wrapped: ray scans stop when this
        returns None.
        
        Args:
            dx (int): Column delta (may be negative)
            dy (int): Row delta (may be negative)
            width (int): Exclusive upper bound for x
            height (int): Exclusive upper bound for y
            
        Returns:
            Location or None: The shifted location, or None if it would be off the board
        """
        x = self.x + dx
        y = self.y + dy
        if 0 <= x < width and 0 <= y < height:
            return Location(x, y)
        return None
