"""Enumerations shared by the renderer, the window and the lighting system."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class ShaderID(IntEnum):
    """Built-in shader programs."""

    UNLIT = 0
    LIT = 1
    FRAMEBUFFER = 2
    HIGHLIGHT_NORMALS = 3
    UI_TEXT = 4
    UI_SHAPE = 5
    UI_BLINK = 6
    LINE = 7
    STROBE_UNLIT = 8
    SKYBOX = 9
    BILLBOARD = 10


class RenderPass(IntEnum):
    """The pass a renderable is drawn in.

    Transparent objects belong in ``LATE``; ``CUSTOM`` objects are not drawn
    by the renderer pipeline at all.
    """

    NORMAL = 0
    LATE = 1
    AFTER_POST_PROCESSING = 2
    CUSTOM = 3


TOTAL_RENDER_PASSES = 4


class RenderMode(IntEnum):
    """How a renderable is drawn; negative modes are debug views."""

    NORMAL = 0
    NO_MATERIALS = 1
    DEBUG_NORMALS = -1
    DEBUG_AABBS = -2

    @property
    def is_debug(self) -> bool:
        return self.value < 0


class WindowEventType(Enum):
    """Events a game window dispatches to its subscribers."""

    MOUSE_MOVE = auto()
    MOUSE_SCROLL = auto()
    WINDOW_RESIZE = auto()


class LightType(IntEnum):
    """Kinds of light, numbered as the lighting shaders expect."""

    NONE = 0
    POINT = 1
    SPOTLIGHT = 2
    DIRECTIONAL = 3
    DIRECTIONAL_PLANE = 4