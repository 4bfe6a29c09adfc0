import logging
import warnings
from collections.abc import Callable
from functools import wraps

logger = logging.getLogger(__name__)


def deprecated[**P, R](
    replacement: str,
    *,
    category: type[Warning] = DeprecationWarning,
    stacklevel: int = 2,
):
    """Mark a method as renamed, pointing callers at **replacement**.

    The warning is attributed to the caller of the decorated method, and the message
    is also stored on `__deprecated__` for type checkers and `help()`.
    """

    def decorator(func: Callable[P, R]):
        msg = f"`{func.__qualname__}` is deprecated, use `{replacement}` instead."

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            logger.debug("call to deprecated %s", func.__qualname__)
            warnings.warn(msg, category, stacklevel=stacklevel)
            return func(*args, **kwargs)

        wrapper.__deprecated__ = msg  # type: ignore[attr-defined]
        return wrapper

    return decorator
