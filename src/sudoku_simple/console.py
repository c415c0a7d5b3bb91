from __future__ import annotations
"""Terminal I/O for the interactive player."""
from typing import Callable

# Erase display, cursor home
CLEAR_SEQUENCE = "\033[2J\033[H"


class Console:
    def __init__(self, clear_screen: bool = True,
                 input_fn: Callable[[str], str] = input,
                 print_fn: Callable[..., None] = print):
        self.clear_screen = clear_screen
        self._input = input_fn
        self._print = print_fn

    def ask(self, prompt: str) -> str:
        """Prompt and return the raw line. EOFError/KeyboardInterrupt propagate to the caller."""
        return self._input(prompt)

    def say(self, message: str) -> None:
        self._print(message)

    def clear(self) -> None:
        if self.clear_screen:
            self._print(CLEAR_SEQUENCE, end="", flush=True)

    def show(self, text: str) -> None:
        """Redraw text in place of the previous screen."""
        self.clear()
        self._print(text)

    def close(self):
        return
