"""Interactive game: the player steers snake 0 while the board advances on a timer."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TextIO

from .snake_utils import deterministic_food, random_turn, redirect_snake
from .state import GameState, create_default_state, load_board

try:
    import termios
except ImportError:  # not available on every platform
    termios = None

_NS_PER_SEC = 1_000_000_000
_STEP_NS = 100_000_000
_CLEAR_SCREEN = "\033[2J\033[H"
_USAGE = "Usage: {prog} [-i filename] [-d delay]"


def get_raw_char(stream: Optional[TextIO] = None) -> str:
    """Read one character without waiting for Enter; '' at end of input."""
    stream = sys.stdin if stream is None else stream
    if termios is None or not stream.isatty():
        return stream.read(1)

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


@dataclass
class InteractiveGame:
    """A running game: its board, tick interval and the streams it uses."""

    state: GameState
    interval_ns: int = _NS_PER_SEC
    add_food: Callable = deterministic_food
    turn: Callable = random_turn
    input: Optional[TextIO] = None
    output: Optional[TextIO] = None
    timestep: int = 0
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)
    _stop: threading.Event = field(default_factory=threading.Event, repr=False, compare=False)

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return self.interval_ns / _NS_PER_SEC

    def _slower(self) -> None:
        sec, nsec = divmod(self.interval_ns, _NS_PER_SEC)
        if nsec >= 900_000_000:
            sec, nsec = sec + 1, 0
        else:
            nsec += _STEP_NS
        self.interval_ns = sec * _NS_PER_SEC + nsec

    def _faster(self) -> None:
        sec, nsec = divmod(self.interval_ns, _NS_PER_SEC)
        if nsec == 0:
            if sec > 0:
                sec, nsec = sec - 1, 900_000_000
        elif sec > 0 or nsec > _STEP_NS:
            nsec -= _STEP_NS
        self.interval_ns = sec * _NS_PER_SEC + nsec

    def handle_key(self, key: str) -> None:
        """'[' slows the game, ']' speeds it up, other keys steer snake 0."""
        with self._lock:
            if key == "[":
                self._slower()
            elif key == "]":
                self._faster()
            else:
                redirect_snake(self.state, key)

    def step(self) -> int:
        """Advance one tick; return how many snakes were alive before it."""
        with self._lock:
            live = 0
            for snum, snake in enumerate(self.state.snakes):
                if snake.live:
                    live += 1
                    if snum >= 1 and self.timestep % 6 == 0:
                        self.turn(self.state, snum)
            self.state.update_state(self.add_food)
            self.timestep += 1
        return live

    def render(self) -> None:
        """Clear the screen and draw the board."""
        out = sys.stdout if self.output is None else self.output
        with self._lock:
            text = self.state.render()
        out.write(_CLEAR_SCREEN + text)
        out.flush()

    def stop(self) -> None:
        """Ask the game loop to finish."""
        self._stop.set()

    def game_loop(self) -> None:
        """Tick until every snake has died or the game is stopped."""
        self.render()
        while not self._stop.wait(self.interval):
            live = self.step()
            self.render()
            if live == 0:
                break

    def input_loop(self) -> None:
        """Read keys and apply them until input ends."""
        while True:
            key = get_raw_char(self.input)
            if key == "":
                break
            self.handle_key(key)
            self.render()


def _parse_delay(text: str) -> int:
    try:
        delay = float(text)
    except ValueError:
        print("Error parsing delay", file=sys.stderr)
        delay = 0.0
    return max(0, int(delay * _NS_PER_SEC))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the game in the terminal; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    in_filename = None
    interval_ns = _NS_PER_SEC

    it = iter(args)
    for arg in it:
        value = next(it, None) if arg in ("-i", "-d") else None
        if value is None:
            print(_USAGE.format(prog="interactive-snake"), file=sys.stderr)
            return 1
        if arg == "-i":
            in_filename = value
        else:
            interval_ns = _parse_delay(value)

    if in_filename is not None:
        try:
            state = load_board(in_filename)
        except OSError:
            print(f"Error: could not open file {in_filename}", file=sys.stderr)
            return -1
        state.initialize_snakes()
    else:
        state = create_default_state()

    game = InteractiveGame(state, interval_ns=interval_ns)
    thread = threading.Thread(target=game.game_loop, daemon=True)
    thread.start()
    try:
        game.input_loop()
    finally:
        game.stop()
        thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())