"""Interactive, real-time snake game played in a terminal."""

from __future__ import annotations

import os
import sys
import threading
import time
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .snake_utils import Lfsr, deterministic_food, random_turn, redirect_snake
from .state import GameState, create_default_state, load_board

PROG = "snakeboard-interactive"

_NS_PER_SECOND = 1_000_000_000
_STEP_NS = 100_000_000
_MAX_SUBSECOND_NS = 900_000_000
_TURN_EVERY = 6

SLOWER_KEY = "["
FASTER_KEY = "]"
CLEAR_SCREEN = "\033[2J\033[H"


class InteractiveGame:
    """A game in which the first snake is steered and the others wander."""

    def __init__(self, state: GameState, interval: float = 1.0) -> None:
        if interval < 0:
            raise ValueError(f"interval must not be negative, got {interval}")
        self.state = state
        self._seconds = int(interval)
        self._nanos = int(interval * _NS_PER_SECOND) % _NS_PER_SECOND
        self.timestep = 0
        self._lock = threading.Lock()
        self._finished = threading.Event()
        self._food_rng = Lfsr(1)
        self._turn_rng = Lfsr(1)

    @property
    def interval(self) -> float:
        """Seconds between game steps."""
        return self._seconds + self._nanos / _NS_PER_SECOND

    @property
    def finished(self) -> bool:
        """True once every snake has died."""
        return self._finished.is_set()

    def slower(self) -> None:
        """Lengthen the step interval by a tenth of a second."""
        with self._lock:
            if self._nanos >= _MAX_SUBSECOND_NS:
                self._seconds += 1
                self._nanos = 0
            else:
                self._nanos += _STEP_NS

    def faster(self) -> None:
        """Shorten the step interval by a tenth of a second, down to a tenth."""
        with self._lock:
            if self._nanos == 0:
                if self._seconds > 0:
                    self._seconds -= 1
                    self._nanos = _MAX_SUBSECOND_NS
            elif self._seconds > 0 or self._nanos > _STEP_NS:
                self._nanos -= _STEP_NS

    def handle_key(self, key: str) -> None:
        """React to a key press: change speed or steer the player's snake."""
        if key == SLOWER_KEY:
            self.slower()
        elif key == FASTER_KEY:
            self.faster()
        else:
            with self._lock:
                redirect_snake(self.state, key)

    def tick(self) -> int:
        """Advance the game one step; return how many snakes were alive before it."""
        with self._lock:
            live = 0
            for snum, snake in enumerate(self.state.snakes):
                if snake.live:
                    live += 1
                    if snum >= 1 and self.timestep % _TURN_EVERY == 0:
                        random_turn(self.state, snum, self._turn_rng)
            self.state.update(lambda board: deterministic_food(board, self._food_rng))
            self.timestep += 1
        return live

    def _show(self, out: TextIO) -> None:
        with self._lock:
            out.write(CLEAR_SCREEN)
            self.state.print_board(out)
            out.flush()

    def _game_loop(self, out: TextIO) -> None:
        try:
            self._show(out)
            while True:
                time.sleep(self.interval)
                live = self.tick()
                self._show(out)
                if live == 0:
                    break
        finally:
            self._finished.set()

    def run(self, keys: Iterable[str], out: TextIO | None = None) -> None:
        """Play until every snake is dead, feeding it keys as they arrive."""
        out = sys.stdout if out is None else out
        worker = threading.Thread(target=self._game_loop, args=(out,), daemon=True)
        worker.start()
        for key in keys:
            if self.finished:
                break
            self.handle_key(key)
            self._show(out)
        worker.join()


def read_key(stream: TextIO) -> str:
    """Read one key from ``stream``, unbuffered when it is a terminal.

    Returns an empty string at end of input.
    """
    if not stream.isatty():
        return stream.read(1)

    import termios

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return data.decode("latin-1")


def _keys(stream: TextIO) -> Iterator[str]:
    while key := read_key(stream):
        yield key


class _UsageError(Exception):
    """Raised when the command line cannot be understood."""


def _parse_args(argv: Sequence[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    args = iter(argv)
    for arg in args:
        if arg in ("-i", "-d"):
            value = next(args, None)
            if value is not None:
                options[arg] = value
                continue
        raise _UsageError(arg)
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``snakeboard-interactive [-i FILE] [-d DELAY]``."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = _parse_args(argv)
    except _UsageError:
        print(f"Usage: {PROG} [-i filename] [-d delay]", file=sys.stderr)
        return 1

    delay = 1.0
    if "-d" in options:
        try:
            delay = float(options["-d"])
            if delay < 0:
                raise ValueError("delay must not be negative")
        except ValueError as exc:
            print(f"Error parsing delay: {exc}", file=sys.stderr)
            return 1

    in_filename = options.get("-i")
    try:
        if in_filename is not None:
            state = load_board(in_filename).initialize_snakes()
        else:
            state = create_default_state()
    except (OSError, ValueError) as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return -1

    try:
        InteractiveGame(state, delay).run(_keys(sys.stdin), sys.stdout)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())