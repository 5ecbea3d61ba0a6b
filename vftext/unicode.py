"""Conversions between UTF-8, UTF-16 and UTF-32 encoded text.

UTF-8 text is handled as ``bytes``, UTF-16 text as a list of 16-bit code
units and UTF-32 text as ``str`` (or any iterable of integer code points
when encoding).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

MAX_CODE_POINT = 0x10FFFF

_HIGH_SURROGATE_FIRST = 0xD800
_HIGH_SURROGATE_LAST = 0xDBFF
_LOW_SURROGATE_FIRST = 0xDC00
_LOW_SURROGATE_LAST = 0xDFFF


def utf8_char_size(first_byte: int) -> int:
    """Return how many bytes a UTF-8 character starting with ``first_byte`` takes."""
    if (first_byte & 0x80) == 0x00:
        return 1
    if (first_byte & 0xE0) == 0xC0:
        return 2
    if (first_byte & 0xF0) == 0xE0:
        return 3
    if (first_byte & 0xF8) == 0xF0:
        return 4
    raise ValueError(f"invalid first byte of UTF-8 character: {first_byte:#04x}")


def utf16_char_size(code_unit: int) -> int:
    """Return how many bytes a UTF-16 character starting with ``code_unit`` takes."""
    if _HIGH_SURROGATE_FIRST <= code_unit <= _HIGH_SURROGATE_LAST:
        return 4
    return 2


def _to_char(code_point: int) -> str:
    if code_point > MAX_CODE_POINT:
        raise ValueError(f"code point out of range: {code_point:#x}")
    return chr(code_point)


def utf8_to_utf32(data: bytes) -> str:
    """Decode UTF-8 bytes into a string of code points."""
    chars: list[str] = []
    stream = iter(data)
    for first in stream:
        size = utf8_char_size(first)
        if size == 1:
            chars.append(chr(first))
            continue
        tail = bytes(islice(stream, size - 1))
        if len(tail) != size - 1:
            raise ValueError("truncated UTF-8 character")
        code_point = first & (0x7F >> size)
        for byte in tail:
            code_point = (code_point << 6) | (byte & 0x3F)
        chars.append(_to_char(code_point))
    return "".join(chars)


def utf16_to_utf32(units: Iterable[int]) -> str:
    """Decode UTF-16 code units into a string of code points."""
    chars: list[str] = []
    stream = iter(units)
    for unit in stream:
        if not 0 <= unit <= 0xFFFF:
            raise ValueError(f"invalid UTF-16 code unit: {unit:#x}")
        if utf16_char_size(unit) == 2:
            chars.append(chr(unit))
            continue
        low = next(stream, None)
        if low is None:
            raise ValueError("truncated UTF-16 surrogate pair")
        if not _LOW_SURROGATE_FIRST <= low <= _LOW_SURROGATE_LAST:
            raise ValueError(f"invalid low surrogate: {low:#x}")
        code_point = ((unit - _HIGH_SURROGATE_FIRST) << 10) + (low - _LOW_SURROGATE_FIRST) + 0x10000
        chars.append(chr(code_point))
    return "".join(chars)


def _code_point_values(code_points: str | Iterable[int]) -> Iterator[int]:
    if isinstance(code_points, str):
        yield from map(ord, code_points)
    else:
        yield from code_points


def utf32_to_utf8(code_points: str | Iterable[int]) -> bytes:
    """Encode code points as UTF-8 bytes."""
    output = bytearray()
    for cp in _code_point_values(code_points):
        if 0 <= cp <= 0x7F:
            output.append(cp)
        elif 0x80 <= cp <= 0x7FF:
            output += bytes(((cp >> 6) + 0xC0, (cp & 0x3F) + 0x80))
        elif 0x800 <= cp <= 0xFFFF:
            output += bytes(((cp >> 12) + 0xE0, ((cp >> 6) & 0x3F) + 0x80, (cp & 0x3F) + 0x80))
        elif 0x10000 <= cp <= MAX_CODE_POINT:
            output += bytes(
                (
                    (cp >> 18) + 0xF0,
                    ((cp >> 12) & 0x3F) + 0x80,
                    ((cp >> 6) & 0x3F) + 0x80,
                    (cp & 0x3F) + 0x80,
                )
            )
        else:
            raise ValueError(f"invalid UTF-32 character: {cp:#x}")
    return bytes(output)


def utf32_to_utf16(code_points: str | Iterable[int]) -> list[int]:
    """Encode code points as UTF-16 code units."""
    output: list[int] = []
    for cp in _code_point_values(code_points):
        if 0 <= cp < _HIGH_SURROGATE_FIRST or _LOW_SURROGATE_LAST < cp <= 0xFFFF:
            output.append(cp)
        elif 0x10000 <= cp <= MAX_CODE_POINT:
            offset = cp - 0x10000
            output.append((offset >> 10) + _HIGH_SURROGATE_FIRST)
            output.append((offset & 0x3FF) + _LOW_SURROGATE_FIRST)
        else:
            raise ValueError(f"invalid UTF-32 character: {cp:#x}")
    return output


def utf8_to_utf16(data: bytes) -> list[int]:
    """Convert UTF-8 bytes into UTF-16 code units."""
    return utf32_to_utf16(utf8_to_utf32(data))


def utf16_to_utf8(units: Iterable[int]) -> bytes:
    """Convert UTF-16 code units into UTF-8 bytes."""
    return utf32_to_utf8(utf16_to_utf32(units))