"""
Line-oriented console front end.

Maps typed keys to commands and renders game snapshots as plain text.
The core never does I/O; this module is the only place that does.
"""
from typing import Callable, Optional

from .cell import CellState
from .commands import Command, CommandProcessor
from .state import GameSnapshot, GameState, GameStatus


INSTRUCTIONS = (
    "Press:\n"
    "'q' to quit\n"
    "'f' to flag/unflag\n"
    "'b' to click current square\n"
    "w/a/s/d (or up/left/down/right) to move\n"
)

KEY_BINDINGS = {
    "q": Command.QUIT,
    "quit": Command.QUIT,
    "f": Command.TOGGLE_FLAG,
    "b": Command.REVEAL,
    "w": Command.MOVE_UP,
    "up": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "down": Command.MOVE_DOWN,
    "a": Command.MOVE_LEFT,
    "left": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    "right": Command.MOVE_RIGHT,
}

END_MESSAGES = {
    GameStatus.QUIT: "Thanks for playing!",
    GameStatus.WON: "You won!",
    GameStatus.LOST: "You lost :(",
}

BLUE = "\x1b[34m"
RESET = "\x1b[0m"


def parse_key(text: str) -> Optional[Command]:
    """Map one line of input to a command, or None if unbound."""
    return KEY_BINDINGS.get(text.strip().lower())


def _glyph(snapshot: GameSnapshot, index: int) -> str:
    view = snapshot.cells[index]
    if view.state == CellState.HIDDEN:
        return "#"
    if view.state == CellState.FLAGGED:
        return "F"
    if view.is_mine:
        return "*"
    if view.adjacent_mines == 0:
        return "."
    return str(view.adjacent_mines)


def render(snapshot: GameSnapshot) -> str:
    """
    Render a snapshot as text.

    The cursor cell is wrapped in brackets; other cells are padded so
    columns line up.
    """
    lines = [
        "  ---------- Minesweeper ----------",
        "",
        INSTRUCTIONS,
        f"number flags left to place: {snapshot.flags_remaining}",
        "",
    ]
    for row in range(snapshot.height):
        row_str = ""
        for col in range(snapshot.width):
            index = row * snapshot.width + col
            glyph = _glyph(snapshot, index)
            if index == snapshot.cursor:
                row_str += f"[{glyph}]"
            else:
                row_str += f" {glyph} "
        lines.append(row_str)
    return "\n".join(lines)


def end_message(status: GameStatus, color: bool = True) -> str:
    """Closing line for a finished game."""
    message = END_MESSAGES.get(status, "")
    if color and message:
        return f"{BLUE}{message}{RESET}"
    return message


def play(
    state: GameState,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    processor: Optional[CommandProcessor] = None,
) -> GameStatus:
    """
    Alternate drawing the board and reading a command until the game ends.

    End of input or an interrupt quits the game.

    Args:
        state: Game to play.
        read_line: Blocking call returning one line of input.
        write: Sink for rendered text.
        processor: Command processor to use.

    Returns:
        The terminal status.
    """
    processor = processor or CommandProcessor()
    while state.is_playing:
        write(render(state.snapshot()))
        try:
            line = read_line("> ")
        except (EOFError, KeyboardInterrupt):
            command = Command.QUIT
        else:
            command = parse_key(line)
            if command is None:
                continue
        processor.apply(state, command)

    write(render(state.snapshot()))
    write(end_message(state.status))
    return state.status
