# tengen/common/typed_config - typed config accessors
#
# Config sections as frozen dataclasses, read through get_<section>().

from tengen.common.typed_config.models import BoardConfig, safe_bool, safe_int
from tengen.common.typed_config.reader import TypedConfigReader

__all__ = [
    "BoardConfig",
    "TypedConfigReader",
    "safe_int",
    "safe_bool",
]
