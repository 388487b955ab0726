from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ._format import dict_repr, iter_repr


@dataclass(slots=True)
class Config:
    """Display settings shared by every wrapper.

    Only `repr` output reads these values, the transformations never do.

    Attributes:
        max_items (int): Number of elements or keys shown before truncating with `...`.
        depth (int): Nesting levels shown for `Dict` values.
        width (int): Target line width for `Dict` output.
        compact (bool): Pack short sequences on one line when wrapping.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80
    compact: bool = True

    def iter_repr(self, v: Iterable[Any]) -> str:
        """Render the elements of a sequence wrapper."""
        return iter_repr(v, self.max_items)

    def dict_repr(self, v: Mapping[Any, Any]) -> str:
        """Render the items of a mapping wrapper."""
        return dict_repr(
            v, self.max_items, self.depth, self.width, compact=self.compact
        )


_CONFIG = Config()


def get_config() -> Config:
    """Get the process-wide display configuration.

    Returns:
        Config: The shared instance, whose attributes can be changed in place.

    Example:
    ```python
    >>> import grouptools as gt
    >>> cfg = gt.get_config()
    >>> cfg.max_items = 3
    >>> gt.Seq(range(10))
    Seq(0, 1, 2, ...)
    >>> cfg.max_items = 20

    ```
    """
    return _CONFIG
