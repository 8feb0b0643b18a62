from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int, int] = (0, 100, 300, 500, 800)
    initial_interval: int = 1000
    speed_step: int = 50
    # Floor for the gravity interval; the raw formula goes non-positive past level 20.
    min_interval: int = 50

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        index = min(lines, len(self.line_clear_scores) - 1)
        return self.line_clear_scores[index] * level

    def next_level(self, level: int, lines: int) -> int:
        # Truncates every clear, so fractional progress between clears is lost.
        return math.floor(level + lines * 0.1)

    def drop_interval(self, level: int) -> int:
        raw = self.initial_interval - (level - 1) * self.speed_step
        return max(self.min_interval, raw)
