"""A keypad-and-LCD word spelling game: word list, simulated display and game state machine."""

__version__ = "0.1.0"
__all__ = ["dictionary", "game", "lcd"]