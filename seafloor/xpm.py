"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from seafloor.colors import lookup_color
from seafloor.image import Image

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_outside_quotes(text: str, pattern: str) -> int:
    quoted = False
    for i in range(len(text) - len(pattern) + 1):
        if text[i] == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, i):
            return i
    return -1


def _blank_comments(text: str, opener: str, closer: str, extra: int) -> str:
    while (begin := _find_outside_quotes(text, opener)) != -1:
        after = begin + len(opener)
        found = text.find(closer, after)
        body = found - after if found != -1 else -1
        span = min(body + len(opener) + extra, len(text) - begin)
        text = text[:begin] + " " * span + text[begin + span:]
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces, keeping offsets."""
    text = _blank_comments(text, "/*", "*/", 2)
    return _blank_comments(text, "//", "\n", 1)


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string, in order."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def color_key(chars: str) -> int:
    """Pack the characters of a pixel code into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex(text: str) -> int:
    match = re.match(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)", text)
    digits = match.group(2) if match else ""
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    "#RRGGBB" is read as hexadecimal. Otherwise ``name`` (joined to ``end`` with a
    space when given) is looked up in the colour table; "none" gives -1 and an
    unknown name gives 0.
    """
    if name.startswith("#"):
        return _to_int32(_parse_hex(name[1:]))
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"XPM data ends before the {what}")
    return line


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _parse_color(line: str, cpp: int) -> tuple[int, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line shorter than its pixel code: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return color_key(line[:cpp]), text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str], endian: int = 0) -> Image:
    """Build an image from the XPM strings: header, colours, then pixel rows."""
    it = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(it, "header"))
    direct = cpp <= 2

    palette: dict[int, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(it, "colour table"), cpp)
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height, endian)
    for y in range(height):
        line = _next_line(it, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short: {line!r}")
        for x in range(width):
            color = palette.get(color_key(line[cpp * x:cpp * (x + 1)]), 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_from_data(lines: Iterable[str], endian: int = 0) -> Image:
    """Build an image from XPM strings held in memory."""
    return parse_xpm(lines, endian)


def read_xpm_file(path: str | Path, endian: int = 0) -> Image:
    """Read an XPM file, ignoring comments, and build an image from it."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)), endian)