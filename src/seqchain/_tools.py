from collections.abc import Callable, Iterable

from ._core import ensure_callable
from ._lazy import Iter
from ._results import Option


def lift[T, R](func: Callable[[T], Option[R]]) -> Callable[[Iterable[T]], Iter[R]]:
    """Turn a single-value function into a reusable iterator transformer.

    The returned function applies `Iter.filter_map(func)` to whatever iterable it receives, so **func** can both map (`Some(value)`) and reject (`NONE`) values.

    Args:
        func (Callable[[T], Option[R]]): Function to apply to each item.

    Returns:
        Callable[[Iterable[T]], Iter[R]]: A function of one iterable, returning a new `Iter`.

    Example:
    ```python
    >>> import seqchain as sc
    >>> def tag_odd(x: int) -> sc.Option[str]:
    ...     return sc.Some(f"odd_{x}") if x % 2 else sc.NONE
    >>> tag_odds = sc.lift(tag_odd)
    >>> tag_odds(range(6)).collect()
    Vec('odd_1', 'odd_3', 'odd_5')
    >>> sc.Iter([7, 8]).into(tag_odds).collect()
    Vec('odd_7')

    ```
    """
    ensure_callable(func, "func")

    def _lifted(data: Iterable[T]) -> Iter[R]:
        return Iter(data).filter_map(func)

    return _lifted
