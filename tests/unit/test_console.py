"""
Unit tests for the console front end.
"""
import pytest
from minefield import Command, GameState, GameStatus
from minefield.console import end_message, parse_key, play, render


class TestParseKey:
    """Test key to command mapping."""

    @pytest.mark.parametrize(
        "text,command",
        [
            ("q", Command.QUIT),
            ("f", Command.TOGGLE_FLAG),
            ("b", Command.REVEAL),
            ("w", Command.MOVE_UP),
            ("a", Command.MOVE_LEFT),
            ("s", Command.MOVE_DOWN),
            ("d", Command.MOVE_RIGHT),
            (" Left \n", Command.MOVE_LEFT),
        ],
    )
    def test_bound_keys(self, text: str, command: Command) -> None:
        assert parse_key(text) == command

    @pytest.mark.parametrize("text", ["", "x", "reveal"])
    def test_unbound_keys(self, text: str) -> None:
        assert parse_key(text) is None


class TestRender:
    """Test text rendering of snapshots."""

    def test_board_rows_and_cursor(self, make_state) -> None:
        state = make_state(3, 2)
        lines = render(state.snapshot()).splitlines()
        assert lines[-2:] == ["[#] #  # ", " #  #  # "]

    def test_flag_counter_and_glyphs(self, make_state) -> None:
        state = make_state(3, 1, mines=[2])
        state.board[2].toggle_flag()
        state.board[0].reveal()
        state.board[1].reveal()
        state.cursor = 2
        text = render(state.snapshot())
        assert "number flags left to place: 1" in text
        assert text.splitlines()[-1] == " .  1 [F]"

    def test_revealed_mine(self, make_state) -> None:
        state = make_state(2, 1, mines=[0])
        state.board[0].reveal()
        assert render(state.snapshot()).splitlines()[-1] == "[*] # "

    def test_end_messages(self) -> None:
        assert end_message(GameStatus.WON, color=False) == "You won!"
        assert end_message(GameStatus.LOST, color=False) == "You lost :("
        assert "Thanks for playing!" in end_message(GameStatus.QUIT)
        assert end_message(GameStatus.PLAYING) == ""


class TestPlayLoop:
    """Test the draw/read loop with scripted input."""

    def _run(self, state: GameState, keys):
        keys = iter(keys)
        output = []

        def read_line(prompt: str) -> str:
            try:
                return next(keys)
            except StopIteration:
                raise EOFError

        status = play(state, read_line=read_line, write=output.append)
        return status, output

    def test_quit_key(self, make_state) -> None:
        status, output = self._run(make_state(3, 3), ["x", "d", "q"])
        assert status == GameStatus.QUIT
        assert "Thanks for playing!" in output[-1]

    def test_end_of_input_quits(self, make_state) -> None:
        status, _ = self._run(make_state(3, 3), ["d"])
        assert status == GameStatus.QUIT

    def test_winning_game(self, make_state) -> None:
        status, output = self._run(make_state(3, 1), ["b"])
        assert status == GameStatus.WON
        assert "You won!" in output[-1]

    def test_losing_game(self, make_state) -> None:
        state = make_state(2, 2, mines=[3])
        status, _ = self._run(state, ["s", "d", "b"])
        assert status == GameStatus.LOST
        assert state.cursor == 3
