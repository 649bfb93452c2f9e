#!/usr/bin/env python3
"""
CLI interface for playing Othello against a human or the heuristic AI.
"""
import argparse
import logging
import sys
import os
import time

# Add the parent directory to Python path so we can import othello
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from othello.core.cell import Cell
from othello.core.cursor import Cursor
from othello.core.game import Game, GameConfig
from othello.core.location import Location
from othello.ai.agents.heuristic_agent import HeuristicAgent

# Cursor keys, vi style
CURSOR_KEYS = {
    'h': (-1, 0),
    'j': (0, 1),
    'k': (0, -1),
    'l': (1, 0),
}


def display_board(game, cursor=None):
    """Display the current board state in ASCII format."""
    board = game.board
    print("\n   " + " ".join(f"{x:2d}" for x in range(board.width)))
    print("   " + "---" * board.width)

    for y in range(board.height):
        row = []
        for x in range(board.width):
            location = Location(x, y)
            symbol = board.cell_at(location).symbol
            if cursor is not None and location == cursor.location:
                row.append(f"[{symbol}")
            else:
                row.append(f" {symbol}")
        print(f"{y:2d}|" + " ".join(row) + f" |{y:2d}")

    print("   " + "---" * board.width)
    scores = game.scores()
    print(f"X: {scores[Cell.BLACK]}   O: {scores[Cell.WHITE]}")


def get_player_name(player):
    """Get display name for player."""
    return "Black (X)" if player == Cell.BLACK else "White (O)"


def parse_move(move_input, board):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "3 5" or "3,5" (x then y)
        board: Board used to range-check the input

    Returns:
        Location or None if invalid
    """
    if ',' in move_input:
        parts = move_input.split(',')
    else:
        parts = move_input.split()

    if len(parts) != 2:
        return None

    try:
        location = Location(int(parts[0].strip()), int(parts[1].strip()))
    except ValueError:
        return None

    if board.contains(location):
        return location
    return None


def get_human_movement(game, cursor):
    """
    Read commands until the human picks a legal move.

    Returns:
        Movement or None if quit
    """
    player = game.turn
    while True:
        try:
            command = input(f"{get_player_name(player)}, move (x y, h/j/k/l, p) or 'quit': ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            return None

        if command in ['quit', 'exit', 'q']:
            return None

        if command in CURSOR_KEYS:
            if not cursor.move(*CURSOR_KEYS[command]):
                print("The cursor is already at the edge of the board.")
            display_board(game, cursor)
            continue

        if command == 'p':
            location = cursor.location
        else:
            location = parse_move(command, game.board)
            if location is None:
                print("Invalid input! Please enter: x y (e.g., '3 5')")
                continue

        movement = game.get_player_movement(location)
        if movement.is_valid():
            cursor.location = location
            return movement
        print(f"({location.x}, {location.y}) is not a legal move!")


def play_out(game, movement, animate):
    """Play a movement, printing each paced step when animating."""
    if not animate:
        game.play_movement(movement)
        return

    game.begin_immediate_movement(movement)
    while game.check_move() == Cell.EMPTY and game.is_animating:
        display_board(game)
        time.sleep(game.config.tick_ms / 1000.0)


def parse_args():
    parser = argparse.ArgumentParser(description="Play Othello in the terminal")
    parser.add_argument('--width', type=int, default=8, help='Board width')
    parser.add_argument('--height', type=int, default=8, help='Board height')
    parser.add_argument('--pvp', action='store_true', help='Two human players instead of human vs AI')
    parser.add_argument('--animate', action='store_true', help='Flip captured discs one tick at a time')
    parser.add_argument('--log-level', default='WARNING', help='Logging level')
    return parser.parse_args()


def main():
    """Main game loop."""
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    print("=" * 60)
    print("                       OTHELLO")
    print("=" * 60)
    print("Capture discs by bracketing them between your own.")
    print("Black (X) goes first. Enter moves as: x y")
    print("=" * 60)

    try:
        game = Game(config=GameConfig(width=args.width, height=args.height))
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(2)

    cursor = Cursor(game.board)
    ai = None if args.pvp else HeuristicAgent()

    while game.check_move() != Cell.EMPTY:
        display_board(game, cursor)
        player = game.turn

        if player == Cell.WHITE and ai is not None:
            print(f"{get_player_name(player)} (AI) is thinking...")
            movement = ai.select_action(game)
            location = movement.location
            print(f"{get_player_name(player)} (AI) plays: {location.x} {location.y}")
        else:
            movement = get_human_movement(game, cursor)
            if movement is None:
                print("\nThanks for playing!")
                return

        play_out(game, movement, args.animate)

    display_board(game)
    print("\n" + "=" * 60)
    if game.game_state == 'win':
        print(f"GAME OVER - {get_player_name(game.winner)} wins!")
    else:
        print("GAME OVER - It's a draw!")
    print(f"Game completed in {game.move_count} moves.")
    print("=" * 60)


if __name__ == "__main__":
    main()
