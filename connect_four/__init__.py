"""
Connect Four Game Package

Two-player Connect Four on a fixed 7x6 board, played in the browser.
"""

from .game import (
    WIDTH, HEIGHT, CONNECT_LENGTH,
    GameState, Player, Status, MoveResult, IllegalMoveError, IllegalMoveReason,
)
from .controller import GameController, Renderer, RecordingRenderer

__all__ = [
    'WIDTH', 'HEIGHT', 'CONNECT_LENGTH',
    'GameState', 'Player', 'Status', 'MoveResult',
    'IllegalMoveError', 'IllegalMoveReason',
    'GameController', 'Renderer', 'RecordingRenderer',
]
__version__ = '1.0.0'
