"""Point colors, capture classifications and engine defaults."""

from enum import Enum
from typing import Any, Dict, Final, Tuple

from tengen.core.errors import InvalidColorError


class Color(Enum):
    """Contents of a point."""

    EMPTY = "empty"
    WHITE = "white"
    BLACK = "black"


STONE_COLORS: Final[Tuple[Color, Color]] = (Color.WHITE, Color.BLACK)


class CaptureType(Enum):
    """Result of classifying a prospective move's capture."""

    NONE = "none"  # no adjacent opponent group in atari
    VALID = "valid"
    KO = "ko"  # capture would recreate a retained position


# --- Rendering ---
GLYPHS: Final[Dict[Color, str]] = {Color.BLACK: "X", Color.WHITE: "O", Color.EMPTY: "."}

# --- Defaults ---
DEFAULT_BOARD_SIZE: Final[int] = 19
# prior positions retained for the ko/superko test
DEFAULT_HISTORY_WINDOW: Final[int] = 8


def opponent(color: Any) -> Color:
    if color is Color.WHITE:
        return Color.BLACK
    if color is Color.BLACK:
        return Color.WHITE
    raise InvalidColorError(f"No opponent for color {color!r}", context={"color": repr(color)})
