# tengen/common/typed_config/reader.py

from typing import Any

from tengen.common.typed_config.models import BoardConfig


class TypedConfigReader:
    """Typed view over a raw config dict.

    Each get_*() parses a copy of its section, so the result always reflects
    the current dict contents.

    Usage:
        reader = TypedConfigReader(dict(store))
        board = reader.get_board()  # BoardConfig
    """

    def __init__(self, config_dict: dict[str, Any]) -> None:
        self._config = config_dict

    def get_board(self) -> BoardConfig:
        raw = self._config.get("board")
        snapshot = dict(raw) if isinstance(raw, dict) else {}
        return BoardConfig.from_dict(snapshot)
