"""배치 계산 테스트."""

import pytest

from errors import InvalidGeometryError
from renderer.layout import Box, DigitPairLayout, fit_into, fit_scale, scale_size

BOX = Box(x=507, y=182, width=54, height=54)


def test_fit_scale_picks_smaller_axis():
    assert fit_scale(82, 60, 54, 54) == pytest.approx(54 / 82)
    assert fit_scale(20, 60, 54, 54) == pytest.approx(54 / 60)


@pytest.mark.parametrize("args", [
    (0, 60, 54, 54),
    (40, 0, 54, 54),
    (40, 60, 0, 54),
    (40, 60, 54, -1),
])
def test_fit_scale_rejects_degenerate(args):
    with pytest.raises(InvalidGeometryError):
        fit_scale(*args)


def test_scale_size_truncates():
    assert scale_size(40, 60, 54 / 82) == (26, 39)


def test_scale_size_rejects_zero():
    with pytest.raises(InvalidGeometryError):
        scale_size(1, 60, 0.5)


def test_digit_pair_concrete_scenario():
    layout = DigitPairLayout(BOX, gap=2)
    tens, ones = layout.place((40, 60), (40, 60))

    assert layout.scale_for((40, 60), (40, 60)) == pytest.approx(0.6585, abs=1e-3)
    assert tens.size == (26, 39)
    assert ones.size == (26, 39)
    # 가운데 정렬 여백 0
    assert tens.position[0] == BOX.x
    assert ones.position[0] + ones.size[0] == BOX.x + BOX.width
    # 세로 가운데: (54 - 39) // 2
    assert tens.position[1] == BOX.y + 7
    assert ones.position[1] == BOX.y + 7


@pytest.mark.parametrize("tens_size, ones_size, box", [
    ((40, 60), (40, 60), BOX),
    ((10, 60), (40, 20), BOX),
    ((300, 50), (5, 400), BOX),
    ((7, 9), (8, 9), BOX),
    ((40, 60), (33, 61), Box(0, 0, 120, 30)),
    ((12, 12), (12, 12), Box(10, 10, 17, 200)),
])
def test_digit_pair_fits_and_is_centered(tens_size, ones_size, box):
    layout = DigitPairLayout(box, gap=2)
    tens, ones = layout.place(tens_size, ones_size)

    combined = tens_size[0] + ones_size[0] + 2
    expected = min(box.width / combined, box.height / max(tens_size[1], ones_size[1]))
    assert tens.scale == pytest.approx(expected)

    assert tens.size[0] + ones.size[0] <= box.width
    assert tens.size[1] <= box.height
    assert ones.size[1] <= box.height

    left = tens.position[0] - box.x
    right = box.x + box.width - (ones.position[0] + ones.size[0])
    assert left >= 0
    assert abs(left - right) <= 1

    for p in (tens, ones):
        top = p.position[1] - box.y
        bottom = box.y + box.height - (p.position[1] + p.size[1])
        assert abs(top - bottom) <= 1


def test_digit_pair_rejects_empty_box():
    with pytest.raises(InvalidGeometryError):
        DigitPairLayout(Box(0, 0, 0, 54))


def test_digit_pair_rejects_zero_size_glyph():
    with pytest.raises(InvalidGeometryError):
        DigitPairLayout(BOX).place((40, 0), (40, 0))


def test_fit_into_centers_single_fragment():
    p = fit_into(Box(10, 20, 100, 50), 200, 50)
    assert p.size == (100, 25)
    assert p.position == (10, 32)
