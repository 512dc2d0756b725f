from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple


Color = Tuple[int, int, int]


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


@dataclass(frozen=True)
class Segment:
    """Offset of one cell from the piece's pivot. y grows upwards."""

    x_offset: int
    y_offset: int

    def rotate_clockwise(self) -> "Segment":
        return Segment(self.y_offset, -self.x_offset)

    def rotate_counterclockwise(self) -> "Segment":
        return Segment(-self.y_offset, self.x_offset)


@dataclass(frozen=True)
class Tetromino:
    kind: TetrominoType
    shape: Tuple[Segment, Segment, Segment, Segment]
    color: Color
    # The O piece has no integer pivot it can spin about without wobbling
    rotates: bool = True


def _shape(*offsets: Tuple[int, int]) -> Tuple[Segment, ...]:
    return tuple(Segment(x, y) for x, y in offsets)


# The first segment of every shape is the pivot itself.
CATALOG: Dict[TetrominoType, Tetromino] = {
    TetrominoType.I: Tetromino(TetrominoType.I, _shape((0, 0), (-1, 0), (1, 0), (2, 0)), (0, 128, 128)),
    TetrominoType.T: Tetromino(TetrominoType.T, _shape((0, 0), (-1, 0), (1, 0), (0, 1)), (128, 0, 128)),
    TetrominoType.J: Tetromino(TetrominoType.J, _shape((0, 0), (-1, 0), (-1, 1), (1, 0)), (0, 0, 255)),
    TetrominoType.L: Tetromino(TetrominoType.L, _shape((0, 0), (-1, 0), (1, 0), (1, 1)), (255, 165, 0)),
    TetrominoType.S: Tetromino(TetrominoType.S, _shape((0, 0), (0, 1), (-1, 0), (1, 1)), (0, 255, 0)),
    TetrominoType.Z: Tetromino(TetrominoType.Z, _shape((0, 0), (0, 1), (-1, 1), (1, 0)), (255, 0, 0)),
    TetrominoType.O: Tetromino(TetrominoType.O, _shape((0, 0), (0, 1), (-1, 0), (-1, 1)), (255, 255, 0), rotates=False),
}


def color_for(kind: int) -> Color:
    return CATALOG[TetrominoType(abs(kind))].color


def random_piece(rng: random.Random) -> Tetromino:
    """Pick one of the seven templates, each with probability 1/7."""
    return CATALOG[rng.choice(list(TetrominoType))]
