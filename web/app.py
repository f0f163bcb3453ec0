"""
Connect Four Web Interface

A Flask web application for playing two-player Connect Four in the browser.
The page renders the board; this app owns one GameController per session and
sends the controller's notifications back to the page as events.
"""

import logging
import random
from typing import Any, Dict

from flask import Flask, render_template, request, jsonify, session

from connect_four import GameController, GameState, RecordingRenderer, WIDTH, HEIGHT
from connect_four.config import AppConfig, configure_logging

logger = logging.getLogger(__name__)

config = AppConfig.from_env()

app = Flask(__name__)
app.secret_key = config.secret_key

# One controller per browser session, oldest evicted past MAX_GAMES
MAX_GAMES = 1000
games: Dict[str, GameController] = {}


def new_controller() -> str:
    """Create a game for the current session and return its id."""
    game_id = str(random.randint(100000, 999999))
    while game_id in games:
        game_id = str(random.randint(100000, 999999))
    while len(games) >= MAX_GAMES:
        evicted = next(iter(games))
        del games[evicted]
        logger.info("Evicted game %s", evicted)
    games[game_id] = GameController(renderer=RecordingRenderer())
    session['game_id'] = game_id
    logger.info("Created game %s", game_id)
    return game_id


def get_controller() -> GameController:
    """Get or create the controller for the current session."""
    if 'game_id' not in session or session['game_id'] not in games:
        new_controller()
    return games[session['game_id']]


def serialize_game_state(state: GameState) -> Dict[str, Any]:
    """Convert game state to JSON-serializable format."""
    winner = state.winner
    return {
        'board': state.get_board(),
        'rows': HEIGHT,
        'cols': WIDTH,
        'current_player': state.current_player.value,
        'status': state.status.value,
        'winner': winner.value if winner else None,
        'winning_line': state.winning_line(winner) if winner else None,
        'valid_moves': state.valid_moves(),
        'move_count': state.move_count,
        'is_game_over': state.is_game_over(),
        'message': state.result_message(),
    }


def read_json() -> Dict[str, Any]:
    """The JSON body as a dict; anything else (missing, malformed, not an object) is empty."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


def read_column(data: Dict[str, Any]):
    """Pull an integer 'col' out of a request body, or None if absent or malformed."""
    col = data.get('col')
    if isinstance(col, bool) or not isinstance(col, int):
        return None
    return col


@app.route('/')
def index():
    """Main game page."""
    return render_template('index.html', rows=HEIGHT, cols=WIDTH)


@app.route('/api/game/state')
def get_game_state():
    """Get current game state."""
    controller = get_controller()
    return jsonify(serialize_game_state(controller.state))


@app.route('/api/game/move', methods=['POST'])
def make_move():
    """Drop a piece for the current player."""
    col = read_column(read_json())
    if col is None:
        return jsonify({'error': 'Column not specified'}), 400

    controller = get_controller()
    result = controller.column_selected(col)

    response = serialize_game_state(controller.state)
    response['ignored'] = result is None
    response['events'] = controller.renderer.drain()
    return jsonify(response)


@app.route('/api/game/hover', methods=['POST'])
def hover():
    """Preview (or stop previewing) where a piece would land."""
    data = read_json()
    col = read_column(data)
    if col is None:
        return jsonify({'error': 'Column not specified'}), 400

    controller = get_controller()
    if data.get('end'):
        controller.hover_end(col)
        row = None
    else:
        row = controller.hover_column(col)

    # Hover events go out with this response, not queued for the next move
    return jsonify({'col': col, 'row': row, 'events': controller.renderer.drain()})


@app.route('/api/game/reset', methods=['POST'])
def reset_game():
    """Start a new game in this session."""
    controller = get_controller()
    controller.reset()
    response = serialize_game_state(controller.state)
    response['events'] = controller.renderer.drain()
    return jsonify(response)


if __name__ == '__main__':
    configure_logging(config)
    app.run(debug=config.debug, host=config.host, port=config.port)
