# snakegame

A small snake game engine. A board is a grid of characters, and every snake on it is
drawn with these characters:

| Part  | Characters                                 |
|-------|--------------------------------------------|
| Tail  | `w` `a` `s` `d` (up, left, down, right)    |
| Body  | `^` `<` `v` `>`                            |
| Head  | `W` `A` `S` `D`, or `x` for a dead snake   |
| Wall  | `#`                                        |
| Food  | `*`                                        |

Each step moves every live snake one square in the direction its head points. A snake
whose next square is a wall or any part of a snake dies, and its head becomes `x`. A
snake that moves onto food grows by one square, and new food is placed on the board.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Running one step

The `snake` command loads a board, moves it forward one step and writes the result:

```
snake -i board.snk -o board-next.snk
```

- `-i FILE` loads the board from `FILE` and finds the snakes on it by their tails.
  Without it, the built-in 20×18 board with one snake is used.
- `-o FILE` writes the result to `FILE`. Without it, the board is printed to standard
  output.

Any other argument, or an option without a value, prints a usage line and exits with
status 1. If the input file cannot be opened, an error is printed and the command exits
with a non-zero status. Food is placed by a fixed pseudo-random sequence, so the same
input always gives the same output.

## Playing interactively

```
interactive-snake -i board.snk -d 0.5
```

- `-i FILE` loads the starting board; without it the built-in board is used.
- `-d SECONDS` sets the time between steps (one second by default). A value that is not
  a number prints `Error parsing delay` and is taken as 0.

While it runs, keys are read one at a time without waiting for Enter:

- `w`, `a`, `s`, `d` point the first snake up, left, down and right (if it is alive).
- `[` lengthens the time between steps by 0.1 seconds.
- `]` shortens it by 0.1 seconds, but not below 0.1 seconds.

Every other key is ignored. The other snakes on the board turn left or right at random
every six steps. The board stops advancing once no snake is left alive; the program
itself ends when its input ends (or on Ctrl-C at a terminal).

## Using the library

```python
from snakegame.state import create_default_state, load_board
from snakegame.snake_utils import corner_food, deterministic_food

state = create_default_state()
state.update_state(corner_food)
print(state.render(), end="")

board = load_board("board.snk")
board.initialize_snakes()
board.update_state(deterministic_food)
board.save_board("board-next.snk")
```

- `snakegame.state` holds `GameState` and `Snake`, `create_default_state()` and
  `load_board(filename)`. `load_board` raises `OSError` when the file cannot be read and
  strips a trailing `\r` from each line; it does not locate snakes, so call
  `initialize_snakes()` afterwards. `find_head` raises `ValueError` when a snake's chain
  of characters is broken.
- `GameState.update_state(add_food)` takes any callable that accepts the state and places
  food on its board, or `None` for no food.
- `snakegame.snake_utils` holds `det_rand`, `deterministic_food`, `corner_food`,
  `redirect_snake` and `random_turn`. `DeterministicFood` and `RandomTurner` are the
  seeded generators behind `deterministic_food` and `random_turn`; create your own
  instances for independent sequences. `DeterministicFood` raises `ValueError` when the
  board has no empty square left.
- `snakegame.interactive.InteractiveGame` runs a game with `step()`, `handle_key(key)`,
  `render()`, `game_loop()` and `input_loop()`, and can be given its own input and
  output streams.

## Running the tests

```
pytest
```