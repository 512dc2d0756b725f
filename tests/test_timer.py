from fractions import Fraction

from falling_blocks.game import FallTimer


def test_tick_counts_every_finished_period():
    timer = FallTimer(Fraction(1, 5))
    assert timer.tick(Fraction(1, 10)) == 0
    assert timer.tick(Fraction(1, 10)) == 1
    assert timer.tick(Fraction(1, 2)) == 2
    assert timer.elapsed == Fraction(1, 10)
    assert timer.tick(Fraction(1, 10)) == 1


def test_float_durations_are_exact_enough():
    timer = FallTimer(0.2)
    assert timer.period == Fraction(1, 5)
    assert timer.tick(0.6) == 3


def test_soft_drop_divides_and_restores_exactly():
    timer = FallTimer(Fraction(1, 5), soft_drop_factor=3)
    timer.set_soft_drop(True)
    assert timer.period == Fraction(1, 15)
    timer.set_soft_drop(True)
    assert timer.period == Fraction(1, 15)
    timer.set_soft_drop(False)
    assert timer.period == Fraction(1, 5)


def test_release_without_press_is_ignored():
    timer = FallTimer(Fraction(1, 5))
    timer.set_soft_drop(False)
    assert timer.period == Fraction(1, 5)


def test_many_press_release_cycles_do_not_drift():
    timer = FallTimer(Fraction(1, 7))
    for _ in range(1000):
        timer.set_soft_drop(True)
        timer.set_soft_drop(False)
    assert timer.period == Fraction(1, 7)


def test_reset_restores_default():
    timer = FallTimer(Fraction(1, 5))
    timer.set_soft_drop(True)
    timer.tick(Fraction(1, 30))
    timer.reset()
    assert timer.period == Fraction(1, 5)
    assert timer.elapsed == 0
    assert not timer.soft_drop_held
