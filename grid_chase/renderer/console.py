"""Terminal display surface and line input backed by ``rich``."""

from typing import Optional, Sequence

from rich.console import Console

from grid_chase.actions import KEY_BINDINGS

SEPARATOR = "=" * 27

PATH_PROMPT = "Please enter your path with these keys ({keys}):"


def key_legend() -> str:
    """Prompt text listing every key binding, one per line."""
    keys = ", ".join(f"'{key}'" for key in KEY_BINDINGS)
    lines = [PATH_PROMPT.format(keys=keys)]
    lines.extend(
        f"  '{key}' => {action.name}" for key, action in KEY_BINDINGS.items()
    )
    return "\n".join(lines)


class ConsoleDisplay:
    """Clears the terminal and prints the board row by row."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def draw(self, rows: Sequence[Sequence[str]], score_line: str) -> None:
        self.console.print(SEPARATOR, markup=False)
        self.console.clear()
        for row in rows:
            self.console.print("".join(f" {glyph} " for glyph in row), markup=False)
        self.console.print(score_line, markup=False)

    def show_message(self, text: str) -> None:
        self.console.print(text, markup=False)


class ConsoleInput:
    """Reads one path per turn from the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def read_line(self) -> Optional[str]:
        """Show the key legend and read a line.

        Returns:
            Optional[str]: The raw line, or ``None`` if stdin is closed.
        """
        self.console.print()
        self.console.print(key_legend(), markup=False)
        try:
            return self.console.input()
        except EOFError:
            return None
