"""Food placement, steering and random turns for snakes."""

from __future__ import annotations

from .state import EMPTY, FOOD, GameState

_MASK = 0xFFFFFFFF
_TAPS = 0x80000057

KEY_MOVE_UP = "w"
KEY_MOVE_RIGHT = "d"
KEY_MOVE_DOWN = "s"
KEY_MOVE_LEFT = "a"
KEY_QUIT = "q"

_STEERING = {
    KEY_MOVE_UP: "W",
    KEY_MOVE_LEFT: "A",
    KEY_MOVE_DOWN: "S",
    KEY_MOVE_RIGHT: "D",
}

_TURN_HEADS = "<v>^"


class Lfsr:
    """A deterministic 32-bit linear-feedback shift register."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & _MASK

    def next_value(self) -> int:
        """Advance the register and return its new state."""
        if self.state == 0:
            self.state = 1
        if self.state & 1:
            self.state = (self.state >> 1) ^ _TAPS
        else:
            self.state >>= 1
        return self.state


_food_rng = Lfsr(1)
_turn_rng = Lfsr(1)


def deterministic_food(state: GameState, rng: Lfsr | None = None) -> tuple[int, int]:
    """Place food on a pseudo-randomly chosen empty cell and return it."""
    rng = _food_rng if rng is None else rng
    if not any(ch == EMPTY for line in state.rows for ch in line):
        raise ValueError("no empty cell left for food")
    while True:
        row = rng.next_value() % state.num_rows
        col = rng.next_value() % state.num_cols(row)
        if state.get(row, col) == EMPTY:
            state.set(row, col, FOOD)
            return row, col


def corner_food(state: GameState) -> tuple[int, int]:
    """Place food just inside the top-left corner."""
    state.set(1, 1, FOOD)
    return 1, 1


def redirect_snake(state: GameState, key: str) -> None:
    """Point the first snake's head in the direction of a w/a/s/d key."""
    if not state.snakes:
        return
    snake = state.snakes[0]
    if not snake.live:
        return
    head = _STEERING.get(key)
    if head is not None:
        state.set(snake.head_row, snake.head_col, head)


def random_turn(state: GameState, snum: int, rng: Lfsr | None = None) -> None:
    """Turn snake ``snum`` left or right at random."""
    rng = _turn_rng if rng is None else rng
    snake = state.snakes[snum]
    index = _TURN_HEADS.find(state.get(snake.head_row, snake.head_col))
    if index < 0:
        index = len(_TURN_HEADS)
    index += 1 if rng.next_value() % 2 == 0 else -1
    state.set(snake.head_row, snake.head_col, _TURN_HEADS[index % len(_TURN_HEADS)])