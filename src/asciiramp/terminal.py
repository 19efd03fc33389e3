import os
import sys


def get_terminal_size(fallback: tuple[int, int] = (80, 24)) -> tuple[int, int]:
    """Columns and rows of the terminal on stdout, or `fallback` when output is piped."""
    if not sys.stdout.isatty():
        return fallback
    columns, lines = os.get_terminal_size(sys.stdout.fileno())
    return columns, lines


def fit_bounds(max_width: int, max_height: int, repeat: int) -> tuple[int, int]:
    """Shrink pixel bounds so the rendered image fits the terminal.

    Each pixel takes `repeat` columns; one row is left free for the prompt.
    """
    columns, rows = get_terminal_size()
    return max(1, min(max_width, columns // repeat)), max(1, min(max_height, rows - 1))
