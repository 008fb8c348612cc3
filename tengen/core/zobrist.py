"""Zobrist position hashing with a bounded history of prior positions.

A :class:`PositionHash` is an immutable value. Every operation returns a new
hash, so callers can simulate a move on a derived value without touching the
board's own hash.

The history window is shared configuration: boards that take part in the
same superko check must be created with the same window.
"""

import random
import threading
from dataclasses import dataclass, field
from typing import List, Tuple

from tengen.core.constants import DEFAULT_HISTORY_WINDOW, Color
from tengen.core.errors import ConfigError, InvalidColorError

ZOBRIST_SEED = 0x7E6E6E
MIN_HISTORY_WINDOW = 2

_KEYS: List[Tuple[int, int]] = []  # (white, black) key per point index
_keys_lock = threading.Lock()
_rng = random.Random(ZOBRIST_SEED)


def zobrist_key(index: int, color: Color) -> int:
    """Random 64-bit key for ``color`` at ``index``; the table grows on demand."""
    if color is Color.WHITE:
        slot = 0
    elif color is Color.BLACK:
        slot = 1
    else:
        raise InvalidColorError(f"Cannot hash color {color!r}")
    if index >= len(_KEYS):
        with _keys_lock:
            while index >= len(_KEYS):
                _KEYS.append((_rng.getrandbits(64), _rng.getrandbits(64)))
    return _KEYS[index][slot]


@dataclass(frozen=True)
class PositionHash:
    """Running hash of the current position plus retained prior positions.

    Attributes:
        value: Hash of the current position.
        history: Prior position hashes, most recent first, at most ``window`` long.
        window: Number of prior positions retained for the repeat test.
    """

    value: int = 0
    history: Tuple[int, ...] = field(default=())
    window: int = DEFAULT_HISTORY_WINDOW

    @classmethod
    def fresh(cls, window: int = DEFAULT_HISTORY_WINDOW) -> "PositionHash":
        # the current position is pushed before every move, so simple ko needs two slots
        if window < MIN_HISTORY_WINDOW:
            raise ConfigError(
                f"History window must be at least {MIN_HISTORY_WINDOW}, got {window}",
                context={"window": window},
            )
        return cls(value=0, history=(), window=window)

    def rotate(self) -> "PositionHash":
        """Retain the current position and start a new tentative one."""
        return PositionHash(
            value=self.value,
            history=((self.value,) + self.history)[: self.window],
            window=self.window,
        )

    def update(self, index: int, color: Color) -> "PositionHash":
        """Toggle ``color`` at ``index``. Applying the same update twice cancels out."""
        return PositionHash(
            value=self.value ^ zobrist_key(index, color),
            history=self.history,
            window=self.window,
        )

    def is_repeat(self) -> bool:
        return self.value in self.history
