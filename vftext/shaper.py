"""Preparation of text for shaping: whitespace normalisation and line splitting."""

from __future__ import annotations

TAB = "\t"
CARRIAGE_RETURN = "\r"
LINE_FEED = "\n"
TAB_REPLACEMENT = " " * 4


def preprocess_text(text: str) -> str:
    """Normalise ``text`` before shaping.

    Tabs become four spaces, and CR LF pairs and lone CRs become a single LF.
    """
    return (
        text.replace(TAB, TAB_REPLACEMENT)
        .replace(CARRIAGE_RETURN + LINE_FEED, LINE_FEED)
        .replace(CARRIAGE_RETURN, LINE_FEED)
    )


def split_lines(text: str) -> list[str]:
    """Normalise ``text`` and split it into lines at CR, LF or CR LF.

    Empty lines are kept, so the result always holds one more line than
    there are line breaks.
    """
    return preprocess_text(text).split(LINE_FEED)