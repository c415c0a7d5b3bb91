"""
Single-game runner and config.

- GameConfig: display and metrics knobs (rules and puzzle are fixed).
- GameRunner: drives one Sudoku session against the fixed puzzle.
  - Prompts for coordinates then a number via Console, parses with move_validator,
    checks and applies placements through Board, and re-renders after each change.
  - Stops the Stopwatch once the board is solved and reports the elapsed time.
  - Keeps a per-turn record list and exposes metrics() at the end.

"""
from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass
from .board import Board
from .console import Console
from .move_validator import parse_coordinates, parse_number
from .stopwatch import Stopwatch

COORDINATES_PROMPT = "Enter row (1-9) and column (1-9) to input a number (e.g., '5 2'): "
NUMBER_PROMPT = "Enter the number (1-9): "

MESSAGES = {
    "invalid_input": "Invalid input. Please enter row and column (e.g., '5 2').",
    "locked_cell": "This cell is pre-filled. Please select another cell.",
    "cell_filled": "This cell is already filled. Please select another cell.",
    "invalid_number": "Invalid number. Please enter a number between 1 and 9.",
    "unsafe_placement": "Invalid move. Try again.",
}
SOLVED_MESSAGE = "Congratulations! You solved the puzzle."

# Turn-loop states
PROMPT_COORDINATES = "prompt_coordinates"
PROMPT_NUMBER = "prompt_number"
VALIDATING = "validating"
RENDERING = "rendering"
SOLVED = "solved"
TERMINATED = "terminated"


@dataclass
class GameConfig:
    clear_screen: bool = True
    # Console logging of each turn outcome at INFO instead of DEBUG
    game_log: bool = False


class GameRunner:
    def __init__(self, console: Console | None = None, cfg: GameConfig | None = None,
                 board: Board | None = None, stopwatch: Stopwatch | None = None):
        self.log = logging.getLogger("GameRunner")
        self.cfg = cfg or GameConfig()
        self.console = console or Console(clear_screen=self.cfg.clear_screen)
        self.board = board or Board()
        self.stopwatch = stopwatch or Stopwatch()
        self.state = PROMPT_COORDINATES
        self.records: list[dict] = []  # one dict per turn attempt
        self.termination_reason: str | None = None

    @property
    def finished(self) -> bool:
        return self.state == TERMINATED

    def render(self):
        self.console.show(self.board.render())

    # ---------------- Turn -----------------
    def _record(self, ok: bool, reason: str | None = None, row: int | None = None,
                col: int | None = None, num: int | None = None) -> dict:
        rec = {"turn": len(self.records) + 1, "row": row, "col": col, "num": num, "ok": ok, "reason": reason}
        self.records.append(rec)
        level = logging.INFO if self.cfg.game_log else logging.DEBUG
        if ok:
            self.log.log(level, "[turn %d] placed %d at r%dc%d, %d left", rec["turn"], num, row + 1, col + 1, self.board.remaining)
        else:
            self.log.log(level, "[turn %d] rejected: %s", rec["turn"], reason)
        return rec

    def _reject(self, reason: str, **cell) -> dict:
        self.console.say(MESSAGES[reason])
        self.state = PROMPT_COORDINATES
        return self._record(False, reason, **cell)

    def step(self) -> dict:
        """Run one turn from the coordinates prompt to its outcome and return the turn record.

        Rejections print their message and leave the runner ready for the next turn.
        EOFError / KeyboardInterrupt from the console propagate.
        """
        if self.finished:
            raise RuntimeError("Game already finished")
        self.state = PROMPT_COORDINATES
        coords = parse_coordinates(self.console.ask(COORDINATES_PROMPT))
        if not coords["ok"]:
            return self._reject(coords["reason"])
        row, col = coords["row"], coords["col"]
        if self.board.is_locked(row, col):
            return self._reject("locked_cell", row=row, col=col)
        if self.board.value(row, col) != 0:
            return self._reject("cell_filled", row=row, col=col)

        self.state = PROMPT_NUMBER
        number = parse_number(self.console.ask(NUMBER_PROMPT))
        if not number["ok"]:
            return self._reject(number["reason"], row=row, col=col)
        num = number["num"]

        self.state = VALIDATING
        if not self.board.is_safe_to_place(row, col, num):
            return self._reject("unsafe_placement", row=row, col=col, num=num)
        self.board.place_number(row, col, num)

        self.state = RENDERING
        self.render()
        rec = self._record(True, row=row, col=col, num=num)
        if self.board.is_solved():
            self._finish_solved()
        else:
            self.state = PROMPT_COORDINATES
        return rec

    def _finish_solved(self):
        self.state = SOLVED
        self.stopwatch.stop()
        self.console.say(SOLVED_MESSAGE)
        self.console.say(f"Time taken: {self.stopwatch.formatted()}")
        self.termination_reason = "solved"
        self.state = TERMINATED

    # ---------------- Session -----------------
    def play(self) -> str | None:
        """Render, start the clock and run turns until solved or input closes. Returns termination reason."""
        self.render()
        self.stopwatch.start()
        self.log.info("Game started: %d blank cell(s) to fill", self.board.remaining)
        while not self.finished:
            try:
                self.step()
            except (EOFError, KeyboardInterrupt):
                self.console.say("")
                self.termination_reason = "input_closed"
                self.state = TERMINATED
        self.log.info("Game finished reason=%s turns=%d elapsed=%s",
                      self.termination_reason, len(self.records), self.stopwatch.formatted())
        return self.termination_reason

    # ---------------- Metrics -----------------
    def metrics(self) -> dict:
        placements = [r for r in self.records if r["ok"]]
        rejections = Counter(r["reason"] for r in self.records if not r["ok"])
        return {
            "turns_total": len(self.records),
            "placements": len(placements),
            "rejections": dict(rejections),
            "remaining": self.board.remaining,
            "solved": self.board.is_solved(),
            "termination_reason": self.termination_reason,
            "elapsed": self.stopwatch.formatted(),
            "duration_s": round(self.stopwatch.elapsed(), 2),
        }
