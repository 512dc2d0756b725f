import random
from collections import Counter

from falling_blocks.game import CATALOG, FallingPiece, Segment, TetrominoType, random_piece


def _connected(cells):
    cells = set(cells)
    start = next(iter(cells))
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if n in cells and n not in seen:
                seen.add(n)
                stack.append(n)
    return seen == cells


def test_catalog_has_seven_four_cell_connected_shapes():
    assert set(CATALOG) == set(TetrominoType)
    for kind, tetromino in CATALOG.items():
        offsets = [(s.x_offset, s.y_offset) for s in tetromino.shape]
        assert tetromino.kind is kind
        assert len(set(offsets)) == 4
        assert offsets[0] == (0, 0)
        assert _connected(offsets)


def test_segment_rotation_formulas():
    s = Segment(2, 1)
    assert s.rotate_clockwise() == Segment(1, -2)
    assert s.rotate_counterclockwise() == Segment(-1, 2)
    assert s.rotate_clockwise().rotate_counterclockwise() == s


def test_four_clockwise_rotations_restore_every_piece():
    for tetromino in CATALOG.values():
        piece = FallingPiece.spawn(tetromino, 5, 10)
        rotated = piece
        for _ in range(4):
            rotated = rotated.rotate_clockwise()
        assert rotated == piece


def test_rotation_keeps_pivot():
    for tetromino in CATALOG.values():
        piece = FallingPiece.spawn(tetromino, 5, 10)
        assert piece.rotate_clockwise().pivot == piece.pivot
        assert piece.rotate_counterclockwise().pivot == piece.pivot


def test_o_piece_maps_to_itself():
    piece = FallingPiece.spawn(CATALOG[TetrominoType.O], 5, 10)
    assert piece.rotate_clockwise() == piece
    assert piece.rotate_counterclockwise() == piece


def test_t_piece_turns_a_quarter():
    piece = FallingPiece.spawn(CATALOG[TetrominoType.T], 5, 10)
    assert set(piece.rotate_clockwise().cells()) == {(5, 10), (5, 11), (5, 9), (6, 10)}


def test_random_piece_is_roughly_uniform():
    rng = random.Random(1234)
    counts = Counter(random_piece(rng).kind for _ in range(7000))
    assert set(counts) == set(TetrominoType)
    for n in counts.values():
        assert 800 < n < 1200
