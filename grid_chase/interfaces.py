"""Collaborator protocols for the game engine.

The engine only needs two capabilities from the outside world: a surface to
draw the glyph-resolved board on and a way to read one line of player input.
Console and test doubles implement these structurally.
"""

from typing import Optional, Protocol, Sequence


class Display(Protocol):
    def draw(self, rows: Sequence[Sequence[str]], score_line: str) -> None:
        """Redraw the whole board followed by the score line."""
        ...

    def show_message(self, text: str) -> None:
        """Print a single informational line below the board."""
        ...


class InputSource(Protocol):
    def read_line(self) -> Optional[str]:
        """Return one raw line, or ``None`` once the stream is closed."""
        ...
