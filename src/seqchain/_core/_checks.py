import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def ensure_callable(func: object, name: str) -> None:
    if not callable(func):
        logger.debug("rejecting non-callable %s: %r", name, func)
        msg = f"`{name}` must be callable, got {type(func).__name__}"
        raise TypeError(msg)


def ensure_positive(n: int, name: str) -> None:
    if n <= 0:
        logger.debug("rejecting non-positive %s: %r", name, n)
        msg = f"`{name}` must be a positive integer, got {n}"
        raise ValueError(msg)


def ensure_mapping(data: Any, name: str) -> None:
    if not isinstance(data, Mapping):
        logger.debug("rejecting non-mapping %s: %r", name, type(data))
        msg = f"`{name}` must be a Mapping, got {type(data).__name__}"
        raise TypeError(msg)
