import logging

from ._core import Config, get_config
from ._eager import Seq, Vec
from ._lazy import Iter
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._tools import lift
from ._types import Item

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "Item",
    "Iter",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Seq",
    "Some",
    "Vec",
    "get_config",
    "lift",
]
