from __future__ import annotations


class InvariantViolation(RuntimeError):
    """A logic bug in the engine, never a consequence of player input."""


class LockOutOfBoundsError(InvariantViolation):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"cannot lock cell ({x}, {y}) outside a {width}x{height} grid")
        self.x = x
        self.y = y


class TooManyRowsError(InvariantViolation):
    def __init__(self, rows: int) -> None:
        super().__init__(f"no scoring entry for {rows} rows cleared in one pass")
        self.rows = rows
