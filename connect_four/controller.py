"""
Game controller and renderer hooks.

The controller turns pointer input (a selected column, hover start/end, a
reset request) into GameState operations and tells a renderer what changed.
Renderers own all presentation; they never touch the game state directly.
"""

from typing import Any, Dict, List, Optional
import logging
import threading

from .game import GameState, IllegalMoveError, MoveResult, Player, Status


logger = logging.getLogger(__name__)


class Renderer:
    """Receiver of game notifications. Every hook is a no-op by default."""

    def on_piece_dropped(self, row: int, column: int, player: Player) -> None:
        pass

    def on_hover_column(self, column: int, row: int) -> None:
        pass

    def on_hover_end(self, column: int) -> None:
        pass

    def on_game_over(self, status: Status, state: GameState) -> None:
        pass

    def on_reset(self) -> None:
        pass


class RecordingRenderer(Renderer):
    """
    Renderer that stores each notification as a plain dict.

    The web app drains the recorded events into its JSON responses so the
    browser page can animate them.
    """

    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    def on_piece_dropped(self, row, column, player):
        self.events.append({'event': 'piece_dropped', 'row': row,
                            'column': column, 'player': player.value})

    def on_hover_column(self, column, row):
        self.events.append({'event': 'hover_column', 'column': column, 'row': row})

    def on_hover_end(self, column):
        self.events.append({'event': 'hover_end', 'column': column})

    def on_game_over(self, status, state):
        winner = status.winner
        self.events.append({
            'event': 'game_over',
            'status': status.value,
            'winner': winner.value if winner else None,
            'message': state.result_message(),
            'line': state.winning_line(winner) if winner else None,
        })

    def on_reset(self):
        self.events.append({'event': 'reset'})

    def drain(self) -> List[Dict[str, Any]]:
        """Return the recorded events and forget them."""
        events, self.events = self.events, []
        return events


class GameController:
    """
    Routes input events to a GameState and notifies the renderer.

    Attributes:
        renderer (Renderer): Receiver of the notifications
    """

    def __init__(self, renderer: Optional[Renderer] = None,
                 state: Optional[GameState] = None):
        self.renderer = renderer or Renderer()
        self._state = state or GameState()
        self._lock = threading.Lock()

    @property
    def state(self) -> GameState:
        return self._state

    def column_selected(self, column) -> Optional[MoveResult]:
        """
        Play the current player's piece in a column.

        Illegal moves (full column, bad index, finished game) and input that
        arrives while a move is still being applied are ignored.

        Args:
            column (int): Column index (0-based)

        Returns:
            Optional[MoveResult]: The move, or None if the input was ignored
        """
        if not self._lock.acquire(blocking=False):
            logger.debug("Ignoring column %r: a move is in progress", column)
            return None

        try:
            try:
                result = self._state.apply_move(column)
            except IllegalMoveError as e:
                logger.debug("Ignoring input: %s", e)
                return None

            self.renderer.on_piece_dropped(result.row, result.column, result.player)
            # apply_move refuses further moves once terminal, so this fires once per game
            if result.status.is_terminal:
                self.renderer.on_game_over(result.status, self._state)
            return result
        finally:
            self._lock.release()

    def hover_column(self, column) -> Optional[int]:
        """
        Preview where a piece would land.

        Returns:
            Optional[int]: Target row, or None when nothing can be dropped
        """
        if self._state.is_game_over():
            return None
        row = self._state.find_drop_row(column)
        if row is not None:
            self.renderer.on_hover_column(int(column), row)
        return row

    def hover_end(self, column) -> None:
        self.renderer.on_hover_end(column)

    def reset(self) -> GameState:
        """Start a new game, replacing the whole state."""
        self._state = self._state.reset()
        logger.info("New game started")
        self.renderer.on_reset()
        return self._state
