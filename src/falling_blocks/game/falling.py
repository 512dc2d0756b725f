from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .grid import Coordinate, OccupancyGrid
from .pieces import Segment, Tetromino, TetrominoType


@dataclass(frozen=True)
class Tile:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """One atomic transformation: a shift plus a net quarter-turn.

    ``rotation`` is +1 for clockwise, -1 for counter-clockwise, 0 for none.
    """

    dx: int = 0
    dy: int = 0
    rotation: int = 0

    @classmethod
    def from_input(cls, left: bool, right: bool, rotate_cw: bool, rotate_ccw: bool) -> "Move":
        return cls(dx=int(right) - int(left), rotation=int(rotate_cw) - int(rotate_ccw))

    @property
    def is_noop(self) -> bool:
        return self.dx == 0 and self.dy == 0 and self.rotation == 0


FALL = Move(dy=-1)


@dataclass(frozen=True)
class FallingPiece:
    """The active piece: four absolute tiles and their offsets from the pivot.

    Every transformation returns a new piece, so a candidate can be tested
    against the grid and then either adopted whole or dropped.
    """

    kind: TetrominoType
    tiles: Tuple[Tile, ...]
    segments: Tuple[Segment, ...]
    rotates: bool = True

    @classmethod
    def spawn(cls, template: Tetromino, x: int, y: int) -> "FallingPiece":
        tiles = tuple(Tile(x + s.x_offset, y + s.y_offset) for s in template.shape)
        return cls(template.kind, tiles, template.shape, template.rotates)

    @property
    def pivot(self) -> Tile:
        tile, segment = self.tiles[0], self.segments[0]
        return Tile(tile.x - segment.x_offset, tile.y - segment.y_offset)

    def cells(self) -> List[Coordinate]:
        return [(t.x, t.y) for t in self.tiles]

    def _with_segments(self, pivot: Tile, segments: Tuple[Segment, ...]) -> "FallingPiece":
        tiles = tuple(Tile(pivot.x + s.x_offset, pivot.y + s.y_offset) for s in segments)
        return FallingPiece(self.kind, tiles, segments, self.rotates)

    def translate(self, dx: int, dy: int = 0) -> "FallingPiece":
        pivot = self.pivot
        return self._with_segments(Tile(pivot.x + dx, pivot.y + dy), self.segments)

    def rotate_clockwise(self) -> "FallingPiece":
        if not self.rotates:
            return self
        return self._with_segments(self.pivot, tuple(s.rotate_clockwise() for s in self.segments))

    def rotate_counterclockwise(self) -> "FallingPiece":
        if not self.rotates:
            return self
        return self._with_segments(self.pivot, tuple(s.rotate_counterclockwise() for s in self.segments))

    def transformed(self, move: Move) -> "FallingPiece":
        piece = self.translate(move.dx, move.dy)
        if move.rotation > 0:
            piece = piece.rotate_clockwise()
        elif move.rotation < 0:
            piece = piece.rotate_counterclockwise()
        return piece

    def try_fit(self, grid: OccupancyGrid, move: Move) -> bool:
        return grid.can_fit(self.transformed(move).cells())
