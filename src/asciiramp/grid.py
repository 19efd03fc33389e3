from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class CharGrid:
    chars: list[str]  # one string per pixel row
    colours: np.ndarray | None  # (rows, cols, 3) uint8 source pixel colours, or None

    @property
    def rows(self) -> int:
        return len(self.chars)

    @property
    def cols(self) -> int:
        return len(self.chars[0]) if self.chars else 0
