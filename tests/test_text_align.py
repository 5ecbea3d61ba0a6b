import pytest
from hypothesis import given
from hypothesis import strategies as st

from vftext.text_align import CenterTextAlign, LeftTextAlign, RightTextAlign, TextAlign

sizes = st.tuples(st.integers(0, 10_000), st.integers(0, 10_000)).map(sorted)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        TextAlign()


@given(sizes)
def test_left_offset_is_zero(pair):
    line, box = pair
    assert LeftTextAlign().line_offset(line, box) == (0.0, 0.0)


@given(sizes)
def test_right_offset_fills_box(pair):
    line, box = pair
    x, y = RightTextAlign().line_offset(line, box)
    assert x + line == box
    assert y == 0.0


@given(sizes)
def test_center_offset_is_symmetric(pair):
    line, box = pair
    x, y = CenterTextAlign().line_offset(line, box)
    assert x * 2 + line == box
    assert y == 0.0


def test_center_example():
    assert CenterTextAlign().line_offset(40, 100) == (30.0, 0.0)


@pytest.mark.parametrize("line, box", [(-1, 10), (5, -1)])
def test_negative_sizes_rejected(line, box):
    with pytest.raises(ValueError):
        LeftTextAlign().line_offset(line, box)
    with pytest.raises(ValueError):
        CenterTextAlign().line_offset(line, box)
    with pytest.raises(ValueError):
        RightTextAlign().line_offset(line, box)


def test_line_longer_than_box_rejected():
    with pytest.raises(ValueError):
        LeftTextAlign().line_offset(11, 10)
    with pytest.raises(ValueError):
        CenterTextAlign().line_offset(11, 10)
    with pytest.raises(ValueError):
        RightTextAlign().line_offset(11, 10)