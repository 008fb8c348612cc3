# tengen/common/typed_config/models.py
#
# Frozen config dataclasses and the type conversion helpers they parse with.

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from tengen.core.constants import DEFAULT_BOARD_SIZE, DEFAULT_HISTORY_WINDOW
from tengen.core.errors import ConfigError
from tengen.core.zobrist import MIN_HISTORY_WINDOW

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


def safe_int(value: Any, default: int) -> int:
    """int conversion. None, bool, float or unparseable values give ``default``.

    bool is an int subclass but is rejected so that True does not become 1;
    floats are rejected to avoid silent truncation.
    """
    if value is None or isinstance(value, (bool, float)):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_bool(value: Any, default: bool = False) -> bool:
    """bool conversion. Unrecognized strings (typos like "fasle") give ``default``."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in _TRUE_STRINGS:
            return True
        if lower in _FALSE_STRINGS:
            return False
    return default


@dataclass(frozen=True)
class BoardConfig:
    """Board engine settings ("board" section).

    Attributes:
        dim: Board dimension for new games.
        history_window: Prior positions retained for the ko/superko test.
            Must be the same for every board in one superko check.
        validate_moves: Run the invariant validator after every move (debug).
    """

    dim: int = DEFAULT_BOARD_SIZE
    history_window: int = DEFAULT_HISTORY_WINDOW
    validate_moves: bool = False

    def __post_init__(self) -> None:
        if self.dim < 1:
            raise ConfigError(f"Board dimension must be at least 1, got {self.dim}", context={"dim": self.dim})
        if self.history_window < MIN_HISTORY_WINDOW:
            raise ConfigError(
                f"history_window must be at least {MIN_HISTORY_WINDOW}, got {self.history_window}",
                context={"history_window": self.history_window},
            )

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "BoardConfig":
        return cls(
            dim=safe_int(d.get("dim"), DEFAULT_BOARD_SIZE),
            history_window=safe_int(d.get("history_window"), DEFAULT_HISTORY_WINDOW),
            validate_moves=safe_bool(d.get("validate_moves"), default=False),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
