"""Process-wide display settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from typing import Any, Final

from ._format import collection_repr, iterator_repr

logger = logging.getLogger(__name__)

MAX_ITEMS_ENV: Final = "SEQCHAIN_REPR_MAX_ITEMS"


@dataclass(slots=True)
class Config:
    """Settings controlling how wrappers render themselves.

    Args:
        max_items (int): Number of elements shown by eager collections before truncating with `...`.
    """

    max_items: int = 20

    @staticmethod
    def from_env() -> Config:
        """Build a `Config`, reading overrides from the environment.

        Returns:
            Config: The defaults, with `SEQCHAIN_REPR_MAX_ITEMS` applied when it holds a positive integer.
        """
        config = Config()
        raw = os.environ.get(MAX_ITEMS_ENV)
        if raw:
            try:
                value = int(raw)
            except ValueError:
                logger.debug("ignoring non-integer %s=%r", MAX_ITEMS_ENV, raw)
            else:
                if value > 0:
                    config.max_items = value
                else:
                    logger.debug("ignoring non-positive %s=%r", MAX_ITEMS_ENV, raw)
        return config

    def iter_repr(self, v: Iterable[Any]) -> str:
        """Render the content of a wrapper.

        Collections are shown element by element, lazy iterators only by type so that nothing is consumed.

        Args:
            v (Iterable[Any]): The wrapped data.

        Returns:
            str: The text placed between the wrapper's parentheses.
        """
        match v:
            case Collection():
                return collection_repr(v, self.max_items)
            case _:
                return iterator_repr(v)


_CONFIG: Config | None = None


def get_config() -> Config:
    """Get the global `Config` instance, creating it on first use.

    Returns:
        Config: The shared, mutable configuration.
    """
    global _CONFIG  # noqa: PLW0603
    if _CONFIG is None:
        _CONFIG = Config.from_env()
    return _CONFIG
