import pytest

from lyric_sync.sync.animator import ScrollAnimator


def test_single_tick_moves_ten_percent():
    anim = ScrollAnimator(line_spacing=80)
    anim.retarget(1)
    assert anim.target_offset == 80
    assert anim.tick() is True
    assert anim.current_offset == pytest.approx(8.0)


def test_converges_monotonically_then_stops():
    anim = ScrollAnimator(line_spacing=80, damping=0.1, epsilon=0.5)
    anim.retarget(3)
    prev = abs(anim.current_offset - anim.target_offset)
    ticks = 0
    while anim.tick():
        dist = abs(anim.current_offset - anim.target_offset)
        assert dist < prev
        assert anim.current_offset <= anim.target_offset
        prev = dist
        ticks += 1
        assert ticks < 500
    assert anim.settled
    settled_at = anim.current_offset
    for _ in range(10):
        assert anim.tick() is False
    assert anim.current_offset == settled_at


def test_scrolls_back_up():
    anim = ScrollAnimator(line_spacing=10, damping=0.5, epsilon=0.01)
    anim.current_offset = 40.0
    anim.retarget(0)
    anim.tick()
    assert anim.current_offset == pytest.approx(20.0)


def test_no_line_targets_top():
    anim = ScrollAnimator(line_spacing=80)
    anim.retarget(-1)
    assert anim.target_offset == 0
    assert anim.tick() is False


def test_reset():
    anim = ScrollAnimator()
    anim.retarget(5)
    anim.tick()
    anim.reset()
    assert anim.current_offset == 0
    assert anim.target_offset == 0
    assert anim.settled


@pytest.mark.parametrize(
    "kwargs",
    [
        {"damping": 0},
        {"damping": 1},
        {"damping": -0.2},
        {"epsilon": 0},
        {"line_spacing": 0},
    ],
)
def test_invalid_constants(kwargs):
    with pytest.raises(ValueError):
        ScrollAnimator(**kwargs)
