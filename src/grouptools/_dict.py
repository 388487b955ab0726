from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping

import cytoolz as cz

from ._core import CommonBase, get_config
from ._seq import Seq


class Dict[K, V](CommonBase[dict[K, V]], Mapping[K, V]):
    """Wrapper for Python dictionaries with chainable methods.

    Returned by `Seq.group_by()`. Keys keep their insertion order.
    """

    __slots__ = ()

    _inner: dict[K, V]

    def __repr__(self) -> str:
        return f"{self.into(lambda d: get_config().dict_repr(d._inner))}"

    def __iter__(self) -> Iterator[K]:
        return self._inner.__iter__()

    def __len__(self) -> int:
        return len(self._inner)

    def __getitem__(self, key: K) -> V:
        return self._inner[key]

    @staticmethod
    def from_[G, I](data: Mapping[G, I] | Iterable[tuple[G, I]]) -> Dict[G, I]:
        """Create a `Dict` from a mapping or an iterable of pairs.

        Args:
            data (Mapping[G, I] | Iterable[tuple[G, I]]): Object convertible into a Dict.

        Returns:
            Dict[G, I]: Instance holding a copy of the input.

        Example:
        ```python
        >>> import grouptools as gt
        >>> gt.Dict.from_([("d", "e"), ("f", "g")])
        {'d': 'e', 'f': 'g'}

        ```
        """
        return Dict(dict(data))

    def keys_seq(self) -> Seq[K]:
        """Return the keys, in insertion order, as a `Seq`.

        Returns:
            Seq[K]: The keys.

        ```python
        >>> import grouptools as gt
        >>> gt.Seq(["b", "a", "b"]).group_by(lambda s: s).keys_seq()
        Seq('b', 'a')

        ```
        """
        return Seq(self._inner.keys())

    def values_seq(self) -> Seq[V]:
        """Return the values, in insertion order, as a `Seq`.

        Returns:
            Seq[V]: The values.

        ```python
        >>> import grouptools as gt
        >>> gt.Dict({1: 2, 3: 4}).values_seq()
        Seq(2, 4)

        ```
        """
        return Seq(self._inner.values())

    def map_values[U](self, func: Callable[[V], U]) -> Dict[K, U]:
        """Apply a function to every value, keeping the keys.

        Args:
            func (Callable[[V], U]): Function applied to each value.

        Returns:
            Dict[K, U]: A new Dict with transformed values.

        Example:
        ```python
        >>> import grouptools as gt
        >>> gt.Seq(["cat", "mouse", "dog"]).group_by(len).map_values(len)
        {'3': 2, '5': 1}

        ```
        """
        return Dict(cz.dicttoolz.valmap(func, self._inner))
