"""Board state and the rules that move snakes across it."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Callable, Optional, TextIO, Union

TAILS = "wasd"
HEADS = "WASDx"
BODIES = "^<v>"

_BODY_TO_TAIL = {"^": "w", "<": "a", "v": "s", ">": "d"}
_HEAD_TO_BODY = {"W": "^", "A": "<", "S": "v", "D": ">"}

DEFAULT_BOARD = (
    "####################",
    "#                  #",
    "# d>D    *         #",
    *(["#                  #"] * 14),
    "####################",
)

FoodFunction = Callable[["GameState"], object]


def is_tail(c: str) -> bool:
    """Return True for a tail character."""
    return len(c) == 1 and c in TAILS


def is_head(c: str) -> bool:
    """Return True for a head character, including a dead head."""
    return len(c) == 1 and c in HEADS


def is_snake(c: str) -> bool:
    """Return True for any character that is part of a snake."""
    return is_tail(c) or is_head(c) or (len(c) == 1 and c in BODIES)


def body_to_tail(c: str) -> str:
    """Convert a body character to the matching tail, or '?'."""
    return _BODY_TO_TAIL.get(c, "?")


def head_to_body(c: str) -> str:
    """Convert a head character to the matching body, or '?'."""
    return _HEAD_TO_BODY.get(c, "?")


def get_next_row(cur_row: int, c: str) -> int:
    """Row reached by moving one step in the direction of ``c``."""
    if c in ("^", "W", "w"):
        return cur_row - 1
    if c in ("v", "S", "s"):
        return cur_row + 1
    return cur_row


def get_next_col(cur_col: int, c: str) -> int:
    """Column reached by moving one step in the direction of ``c``."""
    if c in ("<", "A", "a"):
        return cur_col - 1
    if c in (">", "D", "d"):
        return cur_col + 1
    return cur_col


@dataclass
class Snake:
    """Position of a snake's tail and head, and whether it lives."""

    tail_row: int = 0
    tail_col: int = 0
    head_row: int = 0
    head_col: int = 0
    live: bool = True


@dataclass
class GameState:
    """A board of characters and the snakes on it."""

    board: list[list[str]] = field(default_factory=list)
    snakes: list[Snake] = field(default_factory=list)

    @classmethod
    def _from_rows(cls, rows, snakes=None) -> "GameState":
        return cls([list(row) for row in rows], list(snakes or []))

    @property
    def num_rows(self) -> int:
        """Number of rows on the board."""
        return len(self.board)

    def get_board_at(self, row: int, col: int) -> str:
        """Character at (row, col)."""
        if row < 0 or col < 0:
            raise IndexError(f"position ({row}, {col}) is off the board")
        return self.board[row][col]

    def set_board_at(self, row: int, col: int, ch: str) -> None:
        """Place ``ch`` at (row, col)."""
        if row < 0 or col < 0:
            raise IndexError(f"position ({row}, {col}) is off the board")
        self.board[row][col] = ch

    def render(self) -> str:
        """The board as text, one line per row."""
        return "".join("".join(row) + "\n" for row in self.board)

    def print_board(self, fp: TextIO) -> None:
        """Write the board to an open text stream."""
        fp.write(self.render())

    def save_board(self, filename: Union[str, PathLike]) -> None:
        """Write the board to a file."""
        with open(filename, "w", encoding="utf-8", newline="\n") as fp:
            self.print_board(fp)

    def _head_position(self, snum: int) -> tuple[int, int, str]:
        snake = self.snakes[snum]
        head = self.get_board_at(snake.head_row, snake.head_col)
        return (
            get_next_row(snake.head_row, head),
            get_next_col(snake.head_col, head),
            head,
        )

    def next_square(self, snum: int) -> str:
        """Character the head of snake ``snum`` would move onto."""
        row, col, _ = self._head_position(snum)
        return self.get_board_at(row, col)

    def update_head(self, snum: int) -> None:
        """Advance the head of snake ``snum`` one step."""
        snake = self.snakes[snum]
        row, col, head = self._head_position(snum)
        self.set_board_at(snake.head_row, snake.head_col, head_to_body(head))
        self.set_board_at(row, col, head)
        snake.head_row, snake.head_col = row, col

    def update_tail(self, snum: int) -> None:
        """Advance the tail of snake ``snum`` one step."""
        snake = self.snakes[snum]
        tail = self.get_board_at(snake.tail_row, snake.tail_col)
        self.set_board_at(snake.tail_row, snake.tail_col, " ")
        row = get_next_row(snake.tail_row, tail)
        col = get_next_col(snake.tail_col, tail)
        self.set_board_at(row, col, body_to_tail(self.get_board_at(row, col)))
        snake.tail_row, snake.tail_col = row, col

    def update_state(self, add_food: Optional[FoodFunction]) -> None:
        """Move every live snake one step, feeding or killing as needed."""
        for snum, snake in enumerate(self.snakes):
            if not snake.live:
                continue
            nxt = self.next_square(snum)
            if nxt == "#" or is_snake(nxt):
                snake.live = False
                self.set_board_at(snake.head_row, snake.head_col, "x")
            elif nxt == "*":
                self.update_head(snum)
                if add_food is not None:
                    add_food(self)
            else:
                self.update_head(snum)
                self.update_tail(snum)

    def find_head(self, snum: int) -> None:
        """Follow snake ``snum`` from its tail and record where its head is."""
        snake = self.snakes[snum]
        row, col = snake.tail_row, snake.tail_col
        current = self.get_board_at(row, col)
        while not is_head(current):
            next_row = get_next_row(row, current)
            next_col = get_next_col(col, current)
            if (next_row, next_col) == (row, col):
                raise ValueError(
                    f"snake {snum} is broken at ({row}, {col}): {current!r}"
                )
            row, col = next_row, next_col
            current = self.get_board_at(row, col)
        snake.head_row, snake.head_col = row, col

    def initialize_snakes(self) -> "GameState":
        """Find every snake on the board by its tail, in reading order."""
        self.snakes = []
        for row, line in enumerate(self.board):
            for col, ch in enumerate(line):
                if is_tail(ch):
                    self.snakes.append(Snake(tail_row=row, tail_col=col))
                    self.find_head(len(self.snakes) - 1)
        return self


def create_default_state() -> GameState:
    """The standard 20x18 board with one snake and one piece of food."""
    return GameState._from_rows(
        DEFAULT_BOARD,
        [Snake(tail_row=2, tail_col=2, head_row=2, head_col=4, live=True)],
    )


def load_board(filename: Union[str, PathLike]) -> GameState:
    """Read a board from a file; snakes are not located yet."""
    with open(filename, "r", encoding="utf-8", newline="") as fp:
        content = fp.read()
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    rows = [line[:-1] if line.endswith("\r") else line for line in lines]
    return GameState._from_rows(rows)