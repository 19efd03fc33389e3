from enum import Enum

from asciiramp.grid import CharGrid

# Terminal cells are roughly three times taller than wide
REPEAT = 3

MATRIX_GREEN_PREFIX = "\033[48;2;13;2;8m\033[38;2;0;143;17m"
RESET = "\033[0m"


class OutputColour(Enum):
    DEFAULT = "default"
    MATRIX_GREEN = "matrix_green"
    COLOUR = "colour"


def _format_colour(grid: CharGrid, repeat: int) -> str:
    """Prefix each character group with an ANSI truecolor foreground escape."""
    if grid.colours is None:
        raise ValueError("Colour output requires per-pixel colours")
    colours = grid.colours
    out = []
    for r, line in enumerate(grid.chars):
        parts = []
        for c, char in enumerate(line):
            red, green, blue = int(colours[r, c, 0]), int(colours[r, c, 1]), int(colours[r, c, 2])
            parts.append(f"\033[38;2;{red};{green};{blue}m{char * repeat}")
        parts.append("\n")
        out.append("".join(parts))
    return "".join(out)


def render(grid: CharGrid, output_colour: OutputColour = OutputColour.DEFAULT, repeat: int = REPEAT) -> str:
    """Render a character grid as terminal text.

    Every row ends with a newline. Coloured modes finish with a reset
    sequence; the default mode emits no escape sequences at all.
    """
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")
    output_colour = OutputColour(output_colour)

    if output_colour is OutputColour.COLOUR:
        return _format_colour(grid, repeat) + RESET

    body = "".join("".join(char * repeat for char in line) + "\n" for line in grid.chars)
    if output_colour is OutputColour.MATRIX_GREEN:
        return MATRIX_GREEN_PREFIX + body + RESET
    return body
