"""Rules engine for the falling-block game.

Exports the core game engine and supporting classes:
- OccupancyGrid: Settled cells, row clearing and loss detection
- FallingPiece / Move: The active piece and its atomic transformations
- Tetromino / TetrominoType: The seven piece templates
- FallTimer: Gravity timer with exact soft-drop speed-up
- ScoringRules: Points per rows cleared
- FallingBlocksGame: Tick engine and Playing/GameOver state machine
"""

from .errors import InvariantViolation, LockOutOfBoundsError, TooManyRowsError
from .grid import OccupancyGrid
from .pieces import CATALOG, Segment, Tetromino, TetrominoType, random_piece
from .falling import FALL, FallingPiece, Move, Tile
from .timer import FallTimer
from .rules import ScoringRules
from .core import FallingBlocksGame, GameConfig, GameState, TickInput, TickReport

__all__ = [
    "InvariantViolation",
    "LockOutOfBoundsError",
    "TooManyRowsError",
    "OccupancyGrid",
    "CATALOG",
    "Segment",
    "Tetromino",
    "TetrominoType",
    "random_piece",
    "FALL",
    "FallingPiece",
    "Move",
    "Tile",
    "FallTimer",
    "ScoringRules",
    "FallingBlocksGame",
    "GameConfig",
    "GameState",
    "TickInput",
    "TickReport",
]
