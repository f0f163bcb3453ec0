#!/usr/bin/env python3
"""
Example usage of the Connect Four game.

Plays scripted games through a GameController with a text renderer, and
offers an interactive console game.
"""

from connect_four import GameController, Renderer, WIDTH


class TextRenderer(Renderer):
    """Prints the board after each notification."""

    def __init__(self):
        self.controller = None

    def on_piece_dropped(self, row, column, player):
        print(f"Player {player.value} drops into column {column} (row {row})")
        print(self.controller.state)
        print()

    def on_game_over(self, status, state):
        print(f"Game over: {state.result_message()}")
        line = state.winning_line(status.winner) if status.winner else None
        if line:
            print(f"Winning cells: {line}")

    def on_reset(self):
        print("New game")
        print(self.controller.state)
        print()


def make_controller() -> GameController:
    renderer = TextRenderer()
    controller = GameController(renderer=renderer)
    renderer.controller = controller
    return controller


def example_horizontal_win():
    """Player 1 wins along the bottom row."""
    print("=== Horizontal Win ===")
    controller = make_controller()
    for col in [0, 6, 1, 6, 2, 6, 3]:
        controller.column_selected(col)
    print("\n" + "=" * 50 + "\n")


def example_ignored_input():
    """Clicks on a full column have no effect."""
    print("=== Ignored Input ===")
    controller = make_controller()
    for col in [2] * 6:
        controller.column_selected(col)
    if controller.column_selected(2) is None:
        print("Column 2 is full; click ignored")
    print(f"Hover over column 2 -> {controller.hover_column(2)}")
    print(f"Hover over column 3 -> row {controller.hover_column(3)}")
    controller.reset()
    print("\n" + "=" * 50 + "\n")


def example_interactive_game():
    """Play in the terminal."""
    print("=== Interactive Connect Four ===")
    print(f"Enter column numbers (0-{WIDTH - 1}) to play")
    print("Enter 'q' to quit")

    controller = make_controller()
    print(controller.state)

    while not controller.state.is_game_over():
        player = controller.state.current_player.value
        try:
            user_input = input(f"\nPlayer {player}, enter column: ").strip()
            if user_input.lower() == 'q':
                print("Game quit by user")
                return
            if controller.column_selected(int(user_input)) is None:
                print(f"Can't play column {user_input}")
        except (ValueError, KeyboardInterrupt, EOFError):
            print("Invalid input or interrupted. Exiting...")
            return


def main():
    """Run the scripted examples."""
    print("Connect Four Examples")
    print("=" * 50)
    print()

    try:
        example_horizontal_win()
        example_ignored_input()

        # Uncomment the line below for interactive play
        # example_interactive_game()

    except KeyboardInterrupt:
        print("\nExamples interrupted by user.")


if __name__ == "__main__":
    main()
