"""Food placement, player steering and random turns for computer snakes."""

from __future__ import annotations

from dataclasses import dataclass

from .state import GameState

KEY_MOVEUP = "w"
KEY_MOVERIGHT = "d"
KEY_MOVEDOWN = "s"
KEY_MOVELEFT = "a"
KEY_QUIT = "q"

_MASK32 = 0xFFFFFFFF
_TAPS = 0x80000057
_TURN_HEADS = "<v>^"
_STEERING = {"w": "W", "a": "A", "s": "S", "d": "D"}


def det_rand(value: int) -> int:
    """Next value of a 32-bit linear-feedback shift register; 0 counts as 1."""
    value &= _MASK32
    if value == 0:
        value = 1
    if value & 1:
        return ((value >> 1) ^ _TAPS) & _MASK32
    return value >> 1


def _num_cols(state: GameState, row: int) -> int:
    line = state.board[row]
    count = len(line)
    while count > 0 and line[count - 1] == "\n":
        count -= 1
    return count


@dataclass
class DeterministicFood:
    """Places food on a pseudo-random empty square, driven by its own seed."""

    seed: int = 1

    def _next(self) -> int:
        self.seed = det_rand(self.seed)
        return self.seed

    def __call__(self, state: GameState) -> tuple[int, int]:
        """Put '*' on an empty square and return its (row, col)."""
        if not any(" " in line for line in state.board):
            raise ValueError("no empty square left for food")
        while True:
            row = self._next() % state.num_rows
            width = _num_cols(state, row)
            if width == 0:
                raise ValueError(f"row {row} of the board is empty")
            col = self._next() % width
            if state.get_board_at(row, col) == " ":
                break
        state.set_board_at(row, col, "*")
        return row, col


_food = DeterministicFood()


def deterministic_food(state: GameState) -> tuple[int, int]:
    """Place food using the shared food generator."""
    return _food(state)


def corner_food(state: GameState) -> tuple[int, int]:
    """Place food in the top-left corner inside the wall."""
    state.set_board_at(1, 1, "*")
    return 1, 1


def redirect_snake(state: GameState, input_direction: str) -> None:
    """Point the player's snake (snake 0) in the direction of a w/a/s/d key."""
    if not state.snakes:
        return
    snake = state.snakes[0]
    if not snake.live:
        return
    head = _STEERING.get(input_direction)
    if head is not None:
        state.set_board_at(snake.head_row, snake.head_col, head)


@dataclass
class RandomTurner:
    """Turns a snake's head left or right, driven by its own seed."""

    seed: int = 1

    def __call__(self, state: GameState, snum: int) -> str:
        """Turn snake ``snum`` and return the new character at its head."""
        snake = state.snakes[snum]
        current = state.get_board_at(snake.head_row, snake.head_col)
        index = _TURN_HEADS.find(current)
        if index < 0:
            index = len(_TURN_HEADS)
        self.seed = det_rand(self.seed)
        index += 1 if self.seed % 2 == 0 else -1
        new_head = _TURN_HEADS[index % len(_TURN_HEADS)]
        state.set_board_at(snake.head_row, snake.head_col, new_head)
        return new_head


_turner = RandomTurner()


def random_turn(state: GameState, snum: int) -> str:
    """Turn snake ``snum`` using the shared turn generator."""
    return _turner(state, snum)