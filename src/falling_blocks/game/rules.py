from __future__ import annotations

from dataclasses import dataclass

from .errors import TooManyRowsError


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (100, 300, 500, 800)

    def score_for_lines(self, lines: int) -> int:
        # A single piece spans at most four rows
        if not 1 <= lines <= len(self.line_clear_scores):
            raise TooManyRowsError(lines)
        return self.line_clear_scores[lines - 1]
