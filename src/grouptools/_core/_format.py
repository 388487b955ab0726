from collections.abc import Iterable, Mapping
from itertools import islice
from pprint import pformat
from typing import Any


def dict_repr(
    v: Mapping[Any, Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    """Pretty-print a mapping in insertion order, truncated to `max_items` keys."""
    truncated = dict(islice(v.items(), max_items))
    suffix = "..." if len(v) > max_items else ""
    return (
        pformat(truncated, depth=depth, width=width, compact=compact, sort_dicts=False)
        + suffix
    )


def iter_repr(v: Iterable[Any], max_items: int = 20) -> str:
    """Join the reprs of the first `max_items` elements."""
    head = list(islice(v, max_items + 1))
    suffix = ", ..." if len(head) > max_items else ""
    return ", ".join(repr(x) for x in head[:max_items]) + suffix
