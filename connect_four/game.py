"""
Connect Four Game Rules

The game core: a fixed 7x6 board, strict turn alternation, gravity drops and
win/tie detection. Players take turns dropping pieces into columns, with the
goal of connecting 4 pieces in a row (horizontally, vertically, or diagonally).

This module knows nothing about rendering; see ``controller.py`` for the
layer that turns column clicks into moves and notifies a renderer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

import numpy as np


logger = logging.getLogger(__name__)

WIDTH = 7
HEIGHT = 6
CONNECT_LENGTH = 4

EMPTY = 0

# (row step, column step): horizontal, vertical, down-right, down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

Coord = Tuple[int, int]


class Player(Enum):
    """Enumeration for players in the game."""
    ONE = 1
    TWO = 2

    def other(self) -> "Player":
        """Return the opponent of this player."""
        return Player.TWO if self is Player.ONE else Player.ONE


class Status(Enum):
    """Enumeration for game status."""
    IN_PROGRESS = "in_progress"
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    TIED = "tied"

    @classmethod
    def won_by(cls, player: Player) -> "Status":
        return cls.PLAYER_ONE_WINS if player is Player.ONE else cls.PLAYER_TWO_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self is Status.PLAYER_ONE_WINS:
            return Player.ONE
        if self is Status.PLAYER_TWO_WINS:
            return Player.TWO
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not Status.IN_PROGRESS


class IllegalMoveReason(Enum):
    COLUMN_FULL = "column_full"
    COLUMN_OUT_OF_RANGE = "column_out_of_range"
    GAME_ALREADY_OVER = "game_already_over"


class IllegalMoveError(ValueError):
    """Raised when a move cannot be applied. The game is left untouched."""

    def __init__(self, reason: IllegalMoveReason, column):
        self.reason = reason
        self.column = column
        super().__init__(f"Illegal move in column {column!r}: {reason.value}")


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a successful move."""
    row: int
    column: int
    player: Player
    status: Status


def _is_column_index(column) -> bool:
    # bool is an int subclass but never a column
    return isinstance(column, (int, np.integer)) and not isinstance(column, bool)


class GameState:
    """
    State of a single Connect Four game.

    The board is a numpy array of shape (HEIGHT, WIDTH) where:
    - 0 represents an empty cell
    - 1 represents player one's piece
    - 2 represents player two's piece

    Row 0 is the top of the board, row HEIGHT - 1 the bottom.

    Attributes:
        board (np.ndarray): The game board
        current_player (Player): The player to move
        status (Status): Current status of the game
        move_count (int): Number of pieces placed so far
    """

    def __init__(self):
        """Initialize a new game: empty board, player one to move."""
        self.board = np.zeros((HEIGHT, WIDTH), dtype=int)
        self.current_player = Player.ONE
        self.status = Status.IN_PROGRESS
        self.move_count = 0

    def find_drop_row(self, column) -> Optional[int]:
        """
        Find where a piece dropped into a column would land.

        Args:
            column (int): Column index (0-based)

        Returns:
            Optional[int]: Lowest empty row in the column, or None if the
            column is full or out of range
        """
        if not _is_column_index(column) or not 0 <= column < WIDTH:
            return None
        for row in range(HEIGHT - 1, -1, -1):
            if self.board[row, column] == EMPTY:
                return row
        return None

    def is_valid_move(self, column) -> bool:
        """
        Check if a move to the specified column is valid.

        Args:
            column (int): Column index (0-based)

        Returns:
            bool: True if the move is valid, False otherwise
        """
        if self.status.is_terminal:
            return False
        return self.find_drop_row(column) is not None

    def valid_moves(self) -> List[int]:
        """
        Get all column indices where a piece can be dropped.

        Returns:
            List[int]: Valid column indices, empty once the game is over
        """
        if self.status.is_terminal:
            return []
        return [col for col in range(WIDTH) if self.board[0, col] == EMPTY]

    def apply_move(self, column) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Args:
            column (int): Column index (0-based)

        Returns:
            MoveResult: Where the piece landed, who placed it and the
            resulting status

        Raises:
            IllegalMoveError: If the game is over, the column is out of range
                or the column is full. No state is changed in that case.
        """
        if self.status.is_terminal:
            raise IllegalMoveError(IllegalMoveReason.GAME_ALREADY_OVER, column)
        if not _is_column_index(column) or not 0 <= column < WIDTH:
            raise IllegalMoveError(IllegalMoveReason.COLUMN_OUT_OF_RANGE, column)
        row = self.find_drop_row(column)
        if row is None:
            raise IllegalMoveError(IllegalMoveReason.COLUMN_FULL, column)

        player = self.current_player
        column = int(column)
        self.board[row, column] = player.value
        self.move_count += 1
        logger.debug("Player %d dropped into (%d, %d)", player.value, row, column)

        # A board can be full and won on the same move; the win takes precedence.
        if self.check_win(player):
            self.status = Status.won_by(player)
        elif self.check_tie():
            self.status = Status.TIED

        if self.status.is_terminal:
            logger.info("Game over after %d moves: %s", self.move_count, self.status.value)
        else:
            self.current_player = player.other()

        return MoveResult(row=row, column=column, player=player, status=self.status)

    def _line_from(self, row: int, col: int, d_row: int, d_col: int,
                   player: Player) -> Optional[List[Coord]]:
        cells = [(row + i * d_row, col + i * d_col) for i in range(CONNECT_LENGTH)]
        for r, c in cells:
            if not (0 <= r < HEIGHT and 0 <= c < WIDTH):
                return None
            if self.board[r, c] != player.value:
                return None
        return cells

    def winning_line(self, player: Player) -> Optional[List[Coord]]:
        """
        Find a four-in-a-row for a player.

        Every cell is tried as the start of a line in each of the four
        directions; each cell of a candidate line is bounds checked on both
        axes before its owner is compared.

        Args:
            player (Player): Player whose pieces are scanned

        Returns:
            Optional[List[Tuple[int, int]]]: The (row, column) cells of the
            first line found, or None
        """
        for row in range(HEIGHT):
            for col in range(WIDTH):
                for d_row, d_col in DIRECTIONS:
                    line = self._line_from(row, col, d_row, d_col, player)
                    if line is not None:
                        return line
        return None

    def check_win(self, player: Player) -> bool:
        """Return True if ``player`` has four in a row anywhere on the board."""
        return self.winning_line(player) is not None

    def check_tie(self) -> bool:
        """Return True if the board is full and nobody has four in a row."""
        if np.any(self.board == EMPTY):
            return False
        return not (self.check_win(Player.ONE) or self.check_win(Player.TWO))

    def reset(self) -> "GameState":
        """Return a freshly initialized game."""
        return GameState()

    def cell(self, row: int, col: int) -> Optional[Player]:
        """Owner of a cell, or None when it is empty."""
        value = int(self.board[row, col])
        return None if value == EMPTY else Player(value)

    def get_board(self) -> List[List[int]]:
        """
        Get a copy of the current board.

        Returns:
            List[List[int]]: A copy of the board
        """
        return self.board.tolist()

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner

    def is_game_over(self) -> bool:
        return self.status.is_terminal

    def result_message(self) -> Optional[str]:
        """Text of the end-of-game banner, or None while the game is on."""
        if self.status is Status.TIED:
            return "It's a tie!"
        if self.winner is not None:
            return f"Player {self.winner.value} won!"
        return None

    def __str__(self) -> str:
        """
        String representation of the board.

        Returns:
            str: Visual representation of the board
        """
        result = []

        col_numbers = " ".join(str(i) for i in range(WIDTH))
        result.append(f" {col_numbers}")
        result.append("+" + "-" * (2 * WIDTH - 1) + "+")

        for row in self.board:
            row_str = "|"
            for cell in row:
                if cell == EMPTY:
                    row_str += " "
                elif cell == Player.ONE.value:
                    row_str += "X"
                else:
                    row_str += "O"
                row_str += "|"
            result.append(row_str)

        result.append("+" + "-" * (2 * WIDTH - 1) + "+")

        if self.status is Status.IN_PROGRESS:
            result.append(f"Current player: {self.current_player.name}")
        else:
            result.append(self.result_message())

        return "\n".join(result)
