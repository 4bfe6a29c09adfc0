from ._checks import ensure_callable, ensure_mapping, ensure_positive
from ._config import Config, get_config
from ._depreciation import deprecated
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "deprecated",
    "ensure_callable",
    "ensure_mapping",
    "ensure_positive",
    "get_config",
]
