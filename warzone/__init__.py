"""Orders, players, a phase-driven game engine and console menus for a Warzone-style game."""

__version__ = "0.1.0"
__all__ = ["orders", "player", "engine", "drivers"]