"""The game's phase state machine, driven by text commands."""

from __future__ import annotations

from enum import Enum


class Phase(Enum):
    """A phase of the game; the value is its display label."""

    START = "Start"
    MAP_LOADED = "Map Loaded"
    MAP_VALIDATED = "Map Validated"
    PLAYERS_ADDED = "Players Added"
    ASSIGN_REINFORCEMENT = "Assign Reinforcement"
    ISSUE_ORDERS = "Issue Orders"
    EXECUTE_ORDERS = "Execute Orders"
    WIN = "Win"
    END = "End"


_TRANSITIONS: dict[Phase, dict[str, Phase]] = {
    Phase.START: {"loadmap": Phase.MAP_LOADED},
    Phase.MAP_LOADED: {
        "loadmap": Phase.MAP_LOADED,
        "validatemap": Phase.MAP_VALIDATED,
    },
    Phase.MAP_VALIDATED: {"addplayer": Phase.PLAYERS_ADDED},
    Phase.PLAYERS_ADDED: {
        "addplayer": Phase.PLAYERS_ADDED,
        "assigncountries": Phase.ASSIGN_REINFORCEMENT,
    },
    Phase.ASSIGN_REINFORCEMENT: {"issueorder": Phase.ISSUE_ORDERS},
    Phase.ISSUE_ORDERS: {
        "issueorder": Phase.ISSUE_ORDERS,
        "endissueorders": Phase.EXECUTE_ORDERS,
    },
    Phase.EXECUTE_ORDERS: {
        "execorder": Phase.EXECUTE_ORDERS,
        "endexecorders": Phase.ASSIGN_REINFORCEMENT,
        "win": Phase.WIN,
    },
    Phase.WIN: {"play": Phase.START, "end": Phase.END},
    Phase.END: {},
}

CHANGE_MESSAGES: dict[Phase, str] = {
    Phase.START: "Change state to Start",
    Phase.MAP_LOADED: "Change State to Map Loaded",
    Phase.MAP_VALIDATED: "Change State to Map Validated",
    Phase.PLAYERS_ADDED: "Change State to Players Added",
    Phase.ASSIGN_REINFORCEMENT: "Change State to Assign Reinforcement",
    Phase.ISSUE_ORDERS: "Change State to Issue Orders",
    Phase.EXECUTE_ORDERS: "Change State to Execute Orders",
    Phase.WIN: "Change State to Win",
    Phase.END: "Goodbye!",
}


class InvalidCommandError(ValueError):
    """Raised when a command is not accepted in the current phase."""

    def __init__(self, command: str, phase: Phase) -> None:
        super().__init__("Invalid command, please try again.")
        self.command = command
        self.phase = phase


class GameEngine:
    """Tracks the current phase and moves between phases on commands."""

    def __init__(self) -> None:
        self.phase = Phase.START

    def transition(self, command: str) -> Phase:
        """Apply ``command`` and return the new phase; raise if it is not valid here."""
        try:
            next_phase = _TRANSITIONS[self.phase][command]
        except KeyError:
            raise InvalidCommandError(command, self.phase) from None
        self.phase = next_phase
        return next_phase

    def valid_commands(self) -> tuple[str, ...]:
        """Return the commands accepted in the current phase."""
        return tuple(_TRANSITIONS[self.phase])

    def __str__(self) -> str:
        return f"State: {self.phase.value}\n"

    def __repr__(self) -> str:
        return f"GameEngine(phase={self.phase.name})"