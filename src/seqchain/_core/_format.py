from collections.abc import Collection, Iterable
from typing import Any


def collection_repr(v: Collection[Any], max_items: int) -> str:
    items = [repr(x) for _, x in zip(range(max_items), v, strict=False)]
    suffix = ", ..." if len(v) > max_items else ""
    return ", ".join(items) + suffix


def iterator_repr(v: Iterable[Any]) -> str:
    return f"<{type(v).__name__}>"
