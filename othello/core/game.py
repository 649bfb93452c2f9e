"""
Game implementation for Othello.
"""
import logging
import time
from typing import Callable, Dict, Optional

from .board import Board
from .cell import Cell
from .movement import Movement

logger = logging.getLogger(__name__)


class GameConfig:
    """Configuration for an Othello game."""

    def __init__(self,
                 width: int = 8,
                 height: int = 8,
                 # Animated playback: one write per tick
                 tick_ms: int = 100,
                 first_player: Cell = Cell.BLACK):

        if width < 2 or height < 2:
            raise ValueError(f"Board must be at least 2x2, got {width}x{height}")
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")

        first_player = Cell(first_player)
        if first_player == Cell.EMPTY:
            raise ValueError("first_player must be BLACK or WHITE")

        self.width = width
        self.height = height
        self.tick_ms = tick_ms
        self.first_player = first_player

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GameConfig':
        """Create config from dictionary."""
        return cls(**config_dict)


class Game:
    """
    Manages an Othello game session.

    Tracks whose turn it is and plays movements onto the board, either all at
    once or paced one write per tick. While a paced movement is in flight it
    is nobody's turn.
    """

    def __init__(self,
                 board: Optional[Board] = None,
                 config: Optional[GameConfig] = None,
                 clock: Optional[Callable[[], float]] = None):
        """
        Initialize a new Othello game.

        Args:
            board: Starting board; a fresh one sized from config if omitted
            config: Game configuration; sized from board if omitted
            clock: Zero-argument callable returning seconds (default time.monotonic)
        """
        if config is None:
            if board is None:
                config = GameConfig()
            else:
                config = GameConfig(width=board.width, height=board.height)
        elif board is not None and (board.width, board.height) != (config.width, config.height):
            raise ValueError(
                f"Board is {board.width}x{board.height} but config is {config.width}x{config.height}")

        self.config = config
        if board is None:
            board = Board(config.width, config.height)

        self.board = board
        self.current_player = self.config.first_player
        self.move_count = 0

        self._clock = clock or time.monotonic
        self._movement = Movement()
        # Step n of the in-flight movement is due at _first_step_at + n ticks
        self._first_step_at = self._clock()
        self._steps_played = 0

    @property
    def is_animating(self):
        """True while a paced movement still has writes to play."""
        return self._movement.is_valid()

    @property
    def turn(self):
        """
        Player allowed to act right now, without advancing playback.

        Returns:
            Cell: EMPTY while a movement is in flight or the game is over
        """
        if self._movement.is_valid() or self.board.is_terminal():
            return Cell.EMPTY
        return self.current_player

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self._movement.is_valid() or not self.board.is_terminal():
            return 'ongoing'
        if self.board.count(Cell.BLACK) == self.board.count(Cell.WHITE):
            return 'draw'
        return 'win'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            Cell or None: Player with more discs once the game is over, None otherwise
        """
        if self.game_state != 'win':
            return None
        if self.board.count(Cell.BLACK) > self.board.count(Cell.WHITE):
            return Cell.BLACK
        return Cell.WHITE

    def scores(self):
        """Disc count per player."""
        return {
            Cell.BLACK: self.board.count(Cell.BLACK),
            Cell.WHITE: self.board.count(Cell.WHITE),
        }

    def check_move(self):
        """
        Advance any paced movement and report whose turn it is.

        Plays one write per tick elapsed since the last write; if several
        ticks have passed, all of them are played in this call. The turn
        changes only once the movement is fully played.

        Returns:
            Cell: Player to move, or EMPTY if a movement is still in flight
            or the game is over
        """
        if self._movement.is_valid():
            due = self._steps_due(self._clock())
            while self._steps_played < due:
                if not self._movement.play_one(self.board):
                    break
                self._steps_played += 1

                if not self._movement.is_valid():
                    self._finish_movement()
                    break

        return self.turn

    def _steps_due(self, now):
        """
        Number of steps due by `now` since the movement began.

        Elapsed time is counted in whole milliseconds so tick boundaries do
        not drift with float addition.
        """
        elapsed_ms = int(round((now - self._first_step_at) * 1000))
        if elapsed_ms < 0:
            return 0
        return elapsed_ms // self.config.tick_ms + 1

    def begin_movement(self, mv):
        """
        Start playing a movement paced by the game clock.

        The first write is played one tick after this call.

        Args:
            mv (Movement): Movement to play

        Returns:
            bool: False if the movement is invalid or another one is in flight
        """
        if self._movement.is_valid():
            logger.debug("Rejected %r: a movement is already in flight", mv)
            return False
        if not mv.is_valid():
            return False

        self._movement = mv
        self._first_step_at = self._clock() + self.config.tick_ms / 1000.0
        self._steps_played = 0
        logger.debug("%s begins %r", self.current_player.name, mv)
        return True

    def begin_immediate_movement(self, mv):
        """
        Start a paced movement whose first write is due at once.

        The next check_move() call plays at least one write.

        Returns:
            bool: False if the movement is invalid or another one is in flight
        """
        if not self.begin_movement(mv):
            return False

        self._first_step_at = self._clock()
        return True

    def play_movement(self, mv):
        """
        Play a whole movement at once and pass the turn.

        Returns:
            bool: False if the movement is invalid or another one is in flight
        """
        if self._movement.is_valid() or not mv.is_valid():
            return False

        mv.play_all(self.board)
        self._finish_movement()
        return True

    def get_player_movement(self, location):
        """
        Construct the current player's movement at a location.

        Returns:
            Movement: Invalid if nobody may move, or the location is not a legal move
        """
        player = self.turn
        if player == Cell.EMPTY or not self.board.contains(location):
            return Movement()
        return Movement.build(self.board, location, player)

    def get_ai_movement(self):
        """
        Construct the best-scoring movement for the current player.

        Returns:
            Movement: Invalid if nobody may move
        """
        player = self.turn
        if player == Cell.EMPTY:
            return Movement()

        moves = self.board.legal_moves_for(player)
        if not moves:
            return Movement()
        return moves[0]

    def _finish_movement(self):
        """Pass the turn once a movement has been fully played."""
        self.move_count += 1

        if self.board.is_terminal():
            black, white = self.board.count(Cell.BLACK), self.board.count(Cell.WHITE)
            logger.info("Game over after %d moves: black=%d white=%d",
                        self.move_count, black, white)
            return

        following = self.current_player.opposite()
        if self.board.legal_moves_for(following):
            self.current_player = following
        else:
            logger.debug("%s has no legal move; %s plays again",
                         following.name, self.current_player.name)
