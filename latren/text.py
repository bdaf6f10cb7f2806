"""Font metrics, text measurement and glyph layout."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

# Largest code point a font's character map holds (16-bit wide characters).
WCHAR_MAX = 0xFFFF
# Code point shown for characters the font lacks (WHITE SQUARE).
MISSING_CHAR = 0x25A1
TEXTURE_NONE = -1

Vec2 = tuple[float, float]
Vertex = tuple[float, float, float, float]
Quad = tuple[Vertex, Vertex, Vertex, Vertex, Vertex, Vertex]


class HorizontalAlignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class Character:
    """Metrics of one glyph, in pixels of the font's native size."""

    texture: int = 0
    size: tuple[int, int] = (0, 0)
    bearing: tuple[int, int] = (0, 0)
    advance: int = 0
    atlas_offset: tuple[int, int] = (0, 0)


EMPTY_CHAR = Character(texture=0, size=(0, 0), bearing=(0, 0), advance=50 << 6)


@dataclass(frozen=True)
class BaseLine:
    """Distances from the baseline to the lowest and highest glyph pixels."""

    from_glyph_bottom: float = 0
    from_glyph_top: float = 0


@dataclass
class Font:
    """A loaded font: its glyphs and overall metrics.

    ``base_size`` is the reference pixel height that layout is expressed in;
    when omitted it equals the font's own height, so no scaling applies.
    """

    char_map: dict[int, Character] = field(default_factory=dict)
    size: tuple[int, int] = (0, 0)
    base_size: int | None = None
    base_line: BaseLine = field(default_factory=BaseLine)
    font_height: int = 0
    atlas_texture: int = TEXTURE_NONE
    atlas_size: tuple[int, int] = (0, 0)

    @property
    def size_modifier(self) -> float:
        """Scale from the font's pixel size to the reference size."""
        if self.base_size is None:
            return 1.0
        return self.base_size / self.size[1]

    def get_char(self, code: str | int) -> Character:
        """Return the glyph for ``code``, the missing-glyph box, or an empty glyph."""
        key = ord(code) if isinstance(code, str) else code
        if key in self.char_map:
            return self.char_map[key]
        if MISSING_CHAR in self.char_map:
            return self.char_map[MISSING_CHAR]
        return EMPTY_CHAR


@dataclass(frozen=True)
class PlacedChar:
    """A glyph together with the screen position of its bottom-left corner."""

    position: Vec2
    character: Character


def row_baseline(font: Font, text: Iterable[str | int], apply_modifier: bool = True) -> BaseLine:
    """Baseline distances of a single row of text."""
    bottom = 0
    top = 0
    for code in text:
        char = font.get_char(code)
        bottom = max(char.size[1] - char.bearing[1], bottom)
        top = max(char.bearing[1], top)
    if apply_modifier:
        m = font.size_modifier
        return BaseLine(math.ceil(bottom * m), math.ceil(top * m))
    return BaseLine(bottom, top)


def line_width(font: Font, text: str) -> int:
    """Width of one line: advances of all but the last glyph plus the last glyph's extent."""
    if not text:
        return 0
    width = sum(font.get_char(c).advance for c in text[:-1])
    last = font.get_char(text[-1])
    width += last.bearing[0] + last.size[0]
    return math.ceil(width * font.size_modifier)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def line_widths(font: Font, text: str) -> list[int]:
    """Width of every line; a trailing newline adds no empty line."""
    if "\n" in text:
        return [line_width(font, line) for line in _split_lines(text)]
    return [line_width(font, text)]


def text_width(font: Font, text: str) -> int:
    """Width of the widest line."""
    return max(line_widths(font, text))


def baseline(font: Font, text: str) -> BaseLine:
    """Baseline of a text block: bottom of its last row, top of its first."""
    if "\n" in text:
        first = text[: text.find("\n")]
        last = text[text.rfind("\n") + 1:]
        return BaseLine(
            row_baseline(font, last).from_glyph_bottom,
            row_baseline(font, first).from_glyph_top,
        )
    return row_baseline(font, text)


def row_height(font: Font, text: str) -> int:
    bl = row_baseline(font, text)
    return bl.from_glyph_bottom + bl.from_glyph_top


def text_height(font: Font, text: str, line_spacing: int) -> int:
    """Height of the glyphs actually present, including rows in between."""
    breaks = text.count("\n")
    if breaks == 0:
        return row_height(font, text)
    bl = baseline(font, text)
    row = int(font.font_height * font.size_modifier) + line_spacing
    return bl.from_glyph_bottom + bl.from_glyph_top + breaks * row


def fixed_text_height(font: Font, text: str, line_spacing: int) -> int:
    """Height of the block measured in whole font rows."""
    lines = text.count("\n") + 1
    return lines * int(font.font_height * font.size_modifier) + (lines - 1) * line_spacing


def layout_text(
    font: Font,
    text: str,
    pos: Vec2,
    size: float,
    aspect_ratio: float,
    alignment: HorizontalAlignment,
    line_spacing: float,
) -> list[PlacedChar]:
    """Place every glyph of ``text``, starting at ``pos`` and moving down per line."""
    widths = line_widths(font, text)
    widest = max(widths)
    m = font.size_modifier
    start_x = x = pos[0]
    y = pos[1]
    line = 0
    placed: list[PlacedChar] = []
    for code in text:
        if code == "\n":
            x = start_x
            y -= font.font_height * size + line_spacing
            line += 1
            continue
        char = font.get_char(code)
        actual_y = y - (char.size[1] - char.bearing[1]) * size
        if alignment is HorizontalAlignment.LEFT:
            actual_x = x + char.bearing[0] * size
        elif alignment is HorizontalAlignment.RIGHT:
            actual_x = x + (char.bearing[0] * m + widest - widths[line]) / m * size * aspect_ratio
        else:
            actual_x = x + (char.bearing[0] * m * size + (widest - widths[line]) / 2.0) / m * size * aspect_ratio
        placed.append(PlacedChar((actual_x, actual_y), char))
        x += char.advance * size * aspect_ratio
    return placed


def build_quads(font: Font, placed: Sequence[PlacedChar], size: float, aspect_ratio: float) -> list[Quad]:
    """Two triangles per glyph as ``(x, y, u, v)`` vertices.

    With an atlas texture the texture coordinates address the glyph's region
    of the atlas; otherwise each glyph spans its whole own texture.
    """
    quads: list[Quad] = []
    use_atlas = font.atlas_texture != TEXTURE_NONE
    for item in placed:
        char = item.character
        x, y = item.position
        w = char.size[0] * size * aspect_ratio
        h = char.size[1] * size
        if use_atlas:
            atlas_w, atlas_h = font.atlas_size
            top = char.atlas_offset[1] / atlas_h
            bottom = char.atlas_offset[1] / atlas_h + char.size[1] / atlas_h
            left = char.atlas_offset[0] / atlas_w
            right = char.atlas_offset[0] / atlas_w + char.size[0] / atlas_w
        else:
            top, bottom, left, right = 0.0, 1.0, 0.0, 1.0
        quads.append((
            (x, y + h, left, top),
            (x, y, left, bottom),
            (x + w, y, right, bottom),
            (x, y + h, left, top),
            (x + w, y, right, bottom),
            (x + w, y + h, right, top),
        ))
    return quads