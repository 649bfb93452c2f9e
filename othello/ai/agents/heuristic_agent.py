"""
Heuristic agent for Othello.
"""


class HeuristicAgent:
    """
    An agent that plays the best move by the static board heuristic.
    
    Moves are ranked by Movement.score: captures count, corners are
    preferred and other edge squares avoided. Ties go to the first move in
    board scan order, so the agent is deterministic.
    """
    
    def select_action(self, game):
        """
        Select the best move for the player whose turn it is.
        
        Args:
            game: Game instance with current board state
            
        Returns:
            Movement or None: Best-scoring valid movement, or None if nobody may move
        """
        movement = game.get_ai_movement()
        if not movement.is_valid():
            return None
        return movement
