from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Iterator, Optional, Tuple

import numpy as np

from .falling import FALL, FallingPiece, Move
from .grid import OccupancyGrid
from .pieces import TetrominoType, random_piece
from .rules import ScoringRules
from .timer import Duration, FallTimer


logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    columns: int = 10
    rows: int = 20
    buffer_rows: int = 4
    spawn_x: int = 6
    spawn_y: Optional[int] = None  # defaults to just above the visible field
    fall_interval: Duration = Fraction(1, 5)
    soft_drop_factor: int = 3
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.columns}x{self.rows}")
        # A vertical I piece spawned at the skyline reaches three rows above it
        if self.buffer_rows < 4:
            raise ValueError(f"buffer_rows must be at least 4, got {self.buffer_rows}")
        if not 0 <= self.spawn_x < self.columns:
            raise ValueError(f"spawn_x {self.spawn_x} is outside 0..{self.columns - 1}")
        if self.fall_interval <= 0:
            raise ValueError("fall_interval must be positive")
        if self.soft_drop_factor < 1:
            raise ValueError("soft_drop_factor must be at least 1")
        if self.spawn_y is None:
            self.spawn_y = self.rows


@dataclass
class TickInput:
    """Player commands for one frame.

    Movement and rotation flags are edges (true only on the frame the key went
    down). ``soft_drop`` is the level of the drop key. ``any_key`` is true on
    any key press and only matters after the game is over.
    """

    left: bool = False
    right: bool = False
    rotate_cw: bool = False
    rotate_ccw: bool = False
    soft_drop: bool = False
    any_key: bool = False


@dataclass
class TickReport:
    gravity_steps: int = 0
    pieces_locked: int = 0
    lines_cleared: int = 0
    points: int = 0
    moved: bool = False
    game_over: bool = False
    restarted: bool = False


class FallingBlocksGame:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = OccupancyGrid(self.config.columns, self.config.rows, self.config.buffer_rows)
        self.timer = FallTimer(self.config.fall_interval, self.config.soft_drop_factor)
        self.score = 0
        self.lines_cleared_total = 0
        self.state = GameState.PLAYING
        self.current_piece: Optional[FallingPiece] = None
        self.start_game()

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def start_game(self) -> None:
        """Enter Playing from scratch: empty grid, zero score, default gravity, new piece."""
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.timer.reset()
        self.state = GameState.PLAYING
        self._spawn_piece()

    def _spawn_piece(self) -> None:
        template = random_piece(self.rng)
        self.current_piece = FallingPiece.spawn(template, self.config.spawn_x, self.config.spawn_y)
        logger.debug("spawned %s at %s", template.kind.name, self.current_piece.cells())

    def _enter_game_over(self) -> None:
        self.state = GameState.GAME_OVER
        self.current_piece = None
        logger.info("game over with score %d", self.score)

    def _lock_piece(self, report: TickReport) -> None:
        assert self.current_piece is not None
        piece = self.current_piece
        self.current_piece = None
        self.grid.lock(piece.cells(), int(piece.kind))
        report.pieces_locked += 1

        lines = self.grid.clear_full_rows()
        if lines:
            points = self.rules.score_for_lines(lines)
            self.score += points
            self.lines_cleared_total += lines
            report.lines_cleared += lines
            report.points += points
            logger.info("cleared %d row(s) for %d points", lines, points)

        if self.grid.is_loss():
            self._enter_game_over()
            report.game_over = True
        else:
            self._spawn_piece()

    def step_gravity(self, report: Optional[TickReport] = None) -> None:
        """Drop the piece one row, or lock it and spawn the next one."""
        report = report if report is not None else TickReport()
        if self.game_over or self.current_piece is None:
            return
        report.gravity_steps += 1
        if self.current_piece.try_fit(self.grid, FALL):
            self.current_piece = self.current_piece.transformed(FALL)
        else:
            self._lock_piece(report)

    def handle_input(self, inputs: TickInput) -> bool:
        """Apply this frame's commands; returns whether the piece moved."""
        if self.game_over or self.current_piece is None:
            return False
        self.timer.set_soft_drop(inputs.soft_drop)
        move = Move.from_input(inputs.left, inputs.right, inputs.rotate_cw, inputs.rotate_ccw)
        if move.is_noop or not self.current_piece.try_fit(self.grid, move):
            return False
        self.current_piece = self.current_piece.transformed(move)
        return True

    def tick(self, elapsed: Duration, inputs: Optional[TickInput] = None) -> TickReport:
        """Advance one frame of ``elapsed`` seconds."""
        inputs = inputs or TickInput()
        report = TickReport()

        if self.game_over:
            if inputs.any_key:
                logger.info("restarting")
                self.start_game()
                report.restarted = True
            return report

        # Each firing may lock and respawn, so they are not coalesced
        for _ in range(self.timer.tick(elapsed)):
            self.step_gravity(report)
            if self.game_over:
                return report

        report.moved = self.handle_input(inputs)
        return report

    def cells(self) -> Iterator[Tuple[int, int, TetrominoType]]:
        """Visible settled and falling cells as (x, y, kind), y counted from the bottom."""
        ys, xs = np.nonzero(self.grid.grid[: self.grid.visible_height])
        for y, x in zip(ys, xs):
            yield int(x), int(y), TetrominoType(int(self.grid.grid[y, x]))
        if self.current_piece is not None:
            for x, y in self.current_piece.cells():
                if y < self.grid.visible_height:
                    yield x, y, self.current_piece.kind

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.visible_state()
        if self.current_piece is not None and not self.game_over:
            top = self.grid.visible_height - 1
            for x, y in self.current_piece.cells():
                if 0 <= y < self.grid.visible_height and 0 <= x < self.grid.width:
                    # Use negative to indicate falling piece overlay
                    state[top - y, x] = -int(self.current_piece.kind)
        return state
