"""Board state and movement rules for the snake game."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

ENCODING = "latin-1"

WALL = "#"
EMPTY = " "
FOOD = "*"
DEAD = "x"

_TAILS = frozenset("wasd")
_HEADS = frozenset("WASDx")
_BODIES = frozenset("^<v>")
_BODY_TO_TAIL = dict(zip("^<v>", "wasd"))
_HEAD_TO_BODY = dict(zip("WASD", "^<v>"))
_DOWN = frozenset("vsS")
_UP = frozenset("^wW")
_RIGHT = frozenset(">dD")
_LEFT = frozenset("<aA")

DEFAULT_BOARD = (
    "####################",
    "#                  #",
    "# d>D    *         #",
    *("#                  #",) * 14,
    "####################",
)


def is_tail(c: str) -> bool:
    """Return True if ``c`` is a snake tail character (``wasd``)."""
    return c in _TAILS


def is_head(c: str) -> bool:
    """Return True if ``c`` is a snake head character (``WASDx``)."""
    return c in _HEADS


def is_snake(c: str) -> bool:
    """Return True if ``c`` is any part of a snake."""
    return is_tail(c) or is_head(c) or c in _BODIES


def body_to_tail(c: str) -> str:
    """Turn a body character into the matching tail character."""
    return _BODY_TO_TAIL.get(c, c)


def head_to_body(c: str) -> str:
    """Turn a head character into the matching body character."""
    return _HEAD_TO_BODY.get(c, c)


def get_next_row(cur_row: int, c: str) -> int:
    """Return the row reached by moving from ``cur_row`` in direction ``c``."""
    if c in _DOWN:
        return cur_row + 1
    if c in _UP:
        return cur_row - 1
    return cur_row


def get_next_col(cur_col: int, c: str) -> int:
    """Return the column reached by moving from ``cur_col`` in direction ``c``."""
    if c in _RIGHT:
        return cur_col + 1
    if c in _LEFT:
        return cur_col - 1
    return cur_col


@dataclass
class Snake:
    """Positions of a snake's tail and head, and whether it is alive."""

    tail_row: int
    tail_col: int
    head_row: int = 0
    head_col: int = 0
    live: bool = True


class GameState:
    """A mutable board of characters together with the snakes on it."""

    def __init__(self, rows: Iterable[str], snakes: Iterable[Snake] | None = None) -> None:
        self._board = [list(row) for row in rows]
        self.snakes: list[Snake] = list(snakes) if snakes is not None else []

    @property
    def num_rows(self) -> int:
        return len(self._board)

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self._board]

    def get(self, row: int, col: int) -> str:
        """Return the character at ``(row, col)``."""
        if row < 0 or col < 0:
            raise IndexError(f"position ({row}, {col}) is off the board")
        return self._board[row][col]

    def set(self, row: int, col: int, ch: str) -> None:
        """Put the single character ``ch`` at ``(row, col)``."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        if row < 0 or col < 0:
            raise IndexError(f"position ({row}, {col}) is off the board")
        self._board[row][col] = ch

    def num_cols(self, row: int) -> int:
        """Return the width of ``row``, ignoring trailing newlines."""
        return len("".join(self._board[row]).rstrip("\n"))

    def render(self) -> str:
        """Return the board as text, one line per row."""
        return "".join(f"{line}\n" for line in self.rows)

    def print_board(self, fp: TextIO) -> None:
        """Write the board to the text stream ``fp``."""
        fp.write(self.render())

    def save(self, filename: str) -> None:
        """Write the board to ``filename``."""
        with open(filename, "w", encoding=ENCODING, newline="") as fp:
            self.print_board(fp)

    def next_square(self, snum: int) -> str:
        """Return the character the head of snake ``snum`` is about to enter."""
        snake = self.snakes[snum]
        direction = self.get(snake.head_row, snake.head_col)
        return self.get(
            get_next_row(snake.head_row, direction),
            get_next_col(snake.head_col, direction),
        )

    def update_head(self, snum: int) -> None:
        """Move the head of snake ``snum`` one step, ignoring what is there."""
        snake = self.snakes[snum]
        if not snake.live:
            return
        row, col = snake.head_row, snake.head_col
        head = self.get(row, col)
        self.set(row, col, head_to_body(head))
        new_row, new_col = get_next_row(row, head), get_next_col(col, head)
        self.set(new_row, new_col, head)
        snake.head_row, snake.head_col = new_row, new_col

    def update_tail(self, snum: int) -> None:
        """Move the tail of snake ``snum`` one step forward."""
        snake = self.snakes[snum]
        if not snake.live:
            return
        row, col = snake.tail_row, snake.tail_col
        tail = self.get(row, col)
        new_row, new_col = get_next_row(row, tail), get_next_col(col, tail)
        self.set(row, col, EMPTY)
        self.set(new_row, new_col, body_to_tail(self.get(new_row, new_col)))
        snake.tail_row, snake.tail_col = new_row, new_col

    def update(self, add_food: Callable[[GameState], object] | None = None) -> None:
        """Advance every live snake by one time step.

        A snake that runs into a wall or a snake dies; one that eats food
        grows and ``add_food`` is called to place new food.
        """
        for snum, snake in enumerate(self.snakes):
            if not snake.live:
                continue
            ahead = self.next_square(snum)
            if ahead == WALL or is_snake(ahead):
                self.set(snake.head_row, snake.head_col, DEAD)
                snake.live = False
            elif ahead == FOOD:
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
        seen: set[tuple[int, int]] = set()
        ch = self.get(row, col)
        while not is_head(ch):
            if not is_snake(ch) or (row, col) in seen:
                raise ValueError(
                    f"no snake head reachable from tail at ({snake.tail_row}, {snake.tail_col})"
                )
            seen.add((row, col))
            row, col = get_next_row(row, ch), get_next_col(col, ch)
            ch = self.get(row, col)
        snake.head_row, snake.head_col = row, col

    def initialize_snakes(self) -> GameState:
        """Find every snake on the board, in reading order of their tails."""
        self.snakes = [
            Snake(row, col)
            for row, line in enumerate(self._board)
            for col, ch in enumerate(line)
            if is_tail(ch)
        ]
        for snum in range(len(self.snakes)):
            self.find_head(snum)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._board == other._board and self.snakes == other.snakes

    def __repr__(self) -> str:
        return f"GameState(rows={self.rows!r}, snakes={self.snakes!r})"


def create_default_state() -> GameState:
    """Return the standard 20x18 board with a single snake."""
    return GameState(DEFAULT_BOARD, [Snake(tail_row=2, tail_col=2, head_row=2, head_col=4)])


def load_board(filename: str) -> GameState:
    """Read a board from ``filename``; snakes are not located yet."""
    with open(filename, encoding=ENCODING, newline="") as fp:
        text = fp.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return GameState(lines)