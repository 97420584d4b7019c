# snakeboard

A small engine for snake games played on plain-text boards.

A board is a text file of rows. Walls are `#`, food is `*`, and empty cells
are spaces. Each snake is drawn with:

- a tail: `w`, `a`, `s` or `d` (pointing up, left, down or right),
- a body: `^`, `<`, `v` or `>`,
- a head: `W`, `A`, `S` or `D`, or `x` when the snake is dead.

Every live snake moves one cell per step in the direction its head points.
A snake whose next cell is a wall or any part of a snake dies and its head
becomes `x`; a snake that moves onto food grows by one cell and new food is
placed on an empty cell.

## Installation

```
pip install .
```

## Advancing a board by one step

```
snakeboard -i board.snk -o next.snk
```

Reads `board.snk`, finds its snakes, advances the game one step and writes
the result to `next.snk`. Without `-o` the board is printed to standard
output. New food is placed by a deterministic generator started afresh on
each run, so the same input always gives the same output.

An unknown option, or `-i`/`-o` without a value, prints a usage line and
exits with status 1. A missing `-i`, an unreadable file or a board on which
a snake has no reachable head ends with a non-zero status.

## Playing interactively

```
snakeboard-interactive [-i board.snk] [-d delay]
```

Without `-i` the default 20×18 board with one snake is used. `-d` sets the
seconds between steps (default 1; it must not be negative). Steer the first
snake with `w`, `a`, `s`, `d`; press `[` to add a tenth of a second between
steps and `]` to take one away (never below a tenth). Every other snake
turns left or right at random once every six steps. The game ends when all
snakes are dead; Ctrl-C leaves it at any time.

When standard input is a terminal, keys are read one at a time without
echo; this uses `termios` and so needs a POSIX terminal. Otherwise input is
read character by character as it comes.

## Using the library

```python
from snakeboard.state import create_default_state, load_board
from snakeboard.snake_utils import corner_food

state = create_default_state()
state.update(corner_food)
print(state.render(), end="")

board = load_board("board.snk")
board.initialize_snakes()
board.save("out.snk")
```

- `snakeboard.state` – `GameState` holds the board and a list of `Snake`
  records (tail and head positions and whether the snake is alive). It offers
  `get`, `set`, `num_cols`, `render`, `print_board`, `save`, `next_square`,
  `update_head`, `update_tail`, `update`, `find_head` and
  `initialize_snakes`. `create_default_state` and `load_board` build states;
  helpers such as `is_tail`, `is_head`, `is_snake`, `body_to_tail`,
  `head_to_body`, `get_next_row` and `get_next_col` classify and follow
  board characters.
- `snakeboard.snake_utils` – `Lfsr`, a deterministic 32-bit shift-register
  generator; `deterministic_food` and `corner_food` for placing food (pass
  either to `GameState.update`); `redirect_snake` to steer the first snake
  with a `w`/`a`/`s`/`d` key; and `random_turn` to turn a snake at random.
  `deterministic_food` raises `ValueError` when the board has no empty cell.
- `snakeboard.cli` – `run(in_filename, out_filename)` does the one-step job
  of the `snakeboard` command and returns the resulting `GameState`.
- `snakeboard.interactive` – `InteractiveGame` runs the real-time game;
  `tick()` advances it one step, `handle_key()` reacts to a key, and
  `run(keys, out)` plays until every snake is dead.

## Running the tests

```
pip install .[test]
pytest
```