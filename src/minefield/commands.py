"""
Command processing for the minefield rule engine.

The processor is the only component that mutates a GameState. Every
illegal command is a no-op rather than an error.
"""
import logging
from enum import Enum
from typing import List

from .adjacency import to_coords, to_index
from .reveal import reveal
from .state import GameState, GameStatus

logger = logging.getLogger(__name__)


# ============================================================================
# Commands
# ============================================================================

class Command(Enum):
    """Abstract player commands, independent of any input device."""

    MOVE_UP = 0
    MOVE_DOWN = 1
    MOVE_LEFT = 2
    MOVE_RIGHT = 3
    TOGGLE_FLAG = 4
    REVEAL = 5
    QUIT = 6


MOVES = {
    Command.MOVE_UP: (-1, 0),
    Command.MOVE_DOWN: (1, 0),
    Command.MOVE_LEFT: (0, -1),
    Command.MOVE_RIGHT: (0, 1),
}


# ============================================================================
# Command Processor
# ============================================================================

class CommandProcessor:
    """
    State machine driving a game.

    ``PLAYING`` is the initial state; ``WON``, ``LOST`` and ``QUIT``
    are terminal and ignore further commands.
    """

    def apply(self, state: GameState, command: Command) -> bool:
        """
        Apply one command to ``state``.

        Args:
            state: Game to mutate.
            command: Command to interpret.

        Returns:
            True if the state changed, False for a no-op.
        """
        if not state.is_playing:
            return False

        if command == Command.QUIT:
            return self._set_status(state, GameStatus.QUIT)
        if command in MOVES:
            return self._move(state, command)
        if command == Command.TOGGLE_FLAG:
            return self._toggle_flag(state)
        if command == Command.REVEAL:
            return self._reveal(state)
        raise ValueError(f"Unknown command: {command!r}")

    def available_commands(self, state: GameState) -> List[Command]:
        """Commands that would change ``state`` if applied now."""
        if not state.is_playing:
            return []
        cell = state.current_cell
        commands = [
            command for command in MOVES
            if self._target(state, command) != state.cursor
        ]
        if cell.is_flagged or (cell.is_hidden and state.flags_remaining > 0):
            commands.append(Command.TOGGLE_FLAG)
        if not cell.is_revealed:
            commands.append(Command.REVEAL)
        commands.append(Command.QUIT)
        return commands

    # ========================================================================
    # Handlers
    # ========================================================================

    @staticmethod
    def _target(state: GameState, command: Command) -> int:
        """Index one step away in the direction of ``command``, or the cursor."""
        delta_row, delta_col = MOVES[command]
        row, col = to_coords(state.cursor, state.width)
        new_row = row + delta_row
        new_col = col + delta_col
        if 0 <= new_row < state.height and 0 <= new_col < state.width:
            return to_index(new_row, new_col, state.width)
        return state.cursor

    def _move(self, state: GameState, command: Command) -> bool:
        target = self._target(state, command)
        if target == state.cursor:
            return False
        state.cursor = target
        return True

    def _toggle_flag(self, state: GameState) -> bool:
        cell = state.current_cell
        if cell.is_flagged:
            cell.toggle_flag()
            state.flags_remaining += 1
            return True
        if cell.is_hidden and state.flags_remaining > 0:
            cell.toggle_flag()
            state.flags_remaining -= 1
            return True
        # Revealed, or budget exhausted
        return False

    def _reveal(self, state: GameState) -> bool:
        cell = state.current_cell
        changed = False

        if cell.is_flagged:
            cell.toggle_flag()
            state.flags_remaining += 1
            changed = True
        elif cell.is_hidden:
            flagged = {
                i for i, other in enumerate(state.board) if other.is_flagged
            }
            revealed = reveal(state.board, state.cursor)
            state.hidden_remaining -= len(revealed)
            # Flags swallowed by the cascade go back to the budget
            state.flags_remaining += len(revealed & flagged)
            changed = bool(revealed)
            logger.debug(
                "Revealed %d cells from %d, %d hidden remaining",
                len(revealed), state.cursor, state.hidden_remaining,
            )

        if state.hidden_remaining == state.mine_count:
            changed = self._set_status(state, GameStatus.WON) or changed
        # Losing overrides a simultaneous win
        if cell.is_mine:
            changed = self._set_status(state, GameStatus.LOST) or changed
        return changed

    @staticmethod
    def _set_status(state: GameState, status: GameStatus) -> bool:
        if state.status == status:
            return False
        logger.debug("Game status %s -> %s", state.status.name, status.name)
        state.status = status
        return True
