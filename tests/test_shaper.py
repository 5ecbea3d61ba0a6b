import pytest
from hypothesis import given
from hypothesis import strategies as st

from vftext.shaper import preprocess_text, split_lines


def test_tab_becomes_four_spaces():
    assert preprocess_text("a\tb") == "a" + " " * 4 + "b"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\r\nb", "a\nb"),
        ("a\rb", "a\nb"),
        ("\r\r\n", "\n\n"),
        ("a\n\rb", "a\n\nb"),
        ("plain", "plain"),
        ("", ""),
    ],
)
def test_line_breaks_normalised(text, expected):
    assert preprocess_text(text) == expected


def test_split_keeps_empty_lines():
    assert split_lines("a\n\nb") == ["a", "", "b"]


def test_split_empty_text_gives_one_empty_line():
    assert split_lines("") == [""]


def test_split_trailing_break():
    assert split_lines("a\n") == ["a", ""]


def test_split_mixed_breaks():
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]


def test_split_expands_tabs():
    assert split_lines("\tx\ny") == ["    x", "y"]


_texts = st.text(alphabet=st.sampled_from(["a", "b", " ", "\t", "\r", "\n"]))


@given(_texts)
def test_preprocessed_text_has_no_tabs_or_carriage_returns(text):
    result = preprocess_text(text)
    assert "\t" not in result
    assert "\r" not in result


@given(_texts)
def test_preprocess_is_idempotent(text):
    once = preprocess_text(text)
    assert preprocess_text(once) == once


@given(_texts)
def test_split_lines_rejoins_to_preprocessed(text):
    lines = split_lines(text)
    assert "\n".join(lines) == preprocess_text(text)
    assert len(lines) == preprocess_text(text).count("\n") + 1