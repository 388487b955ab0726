from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from . import _grouping
from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._dict import Dict
    from ._grouping import Partition


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    """Treat a non-iterable first argument as the first of several values."""
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class Seq[T](CommonBase[tuple[T, ...]], Sequence[T]):
    """`Seq` represent an in memory, immutable Sequence.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be passed anywhere a standard sequence is expected.

    The grouping operations are available as methods, returning wrapped results so calls can be chained.

    The constructor copies any `Iterable` into a tuple, so the wrapper never aliases a caller's mutable list.

    Args:
        data (Iterable[T]): The data to initialize the Seq with.
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = tuple(data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Examples:
        ```python
        >>> import grouptools as gt
        >>> gt.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> gt.Seq.from_([1, 2, 3])
        Seq(1, 2, 3)

        ```
        """
        return Seq(convert_data(data, *more_data))

    @staticmethod
    def new() -> Seq[T]:
        """Create an empty `Seq`.

        Returns:
            Seq[T]: A new empty Seq instance.

        Example:
        ```python
        >>> import grouptools as gt
        >>> gt.Seq.new()
        Seq()

        ```
        """
        return Seq(())

    def length(self) -> int:
        """Return the number of elements.

        Returns:
            int: The length of the sequence.

        ```python
        >>> import grouptools as gt
        >>> gt.Seq("abc").length()
        3

        ```
        """
        return len(self._inner)

    def group_by(self, key: str | Callable[[T], object]) -> Dict[str, list[T]]:
        """Group elements by a field name or key function and return a `Dict` result.

        See `grouptools.group_by()` for the full contract.

        Args:
            key (str | Callable[[T], object]): Field name or key function.

        Returns:
            Dict[str, list[T]]: Dict from key string to grouped elements.

        Example:
        ```python
        >>> import grouptools as gt
        >>> gt.Seq([1, 2, 3, 4, 5, 6]).group_by(lambda x: x % 3)
        {'1': [1, 4], '2': [2, 5], '0': [3, 6]}

        ```
        """
        from ._dict import Dict

        return Dict(_grouping.group_by(self._inner, key))

    def partition(self, predicate: Callable[[T], object]) -> Partition[T]:
        """Split elements in two by a predicate.

        See `grouptools.partition()` for the full contract.

        Args:
            predicate (Callable[[T], object]): Function whose truthiness routes each element.

        Returns:
            Partition[T]: `(passed, failed)`, each preserving input order.

        Example:
        ```python
        >>> import grouptools as gt
        >>> gt.Seq(range(6)).partition(lambda x: x < 2).failed
        [2, 3, 4, 5]

        ```
        """
        return _grouping.partition(self._inner, predicate)

    def chunk(self, size: int) -> Seq[Seq[T]]:
        """Split elements into contiguous chunks of `size`.

        See `grouptools.chunk()` for the full contract.

        Args:
            size (int): Maximum length of each chunk.

        Returns:
            Seq[Seq[T]]: A Seq of chunks, each a Seq.

        Example:
        ```python
        >>> import grouptools as gt
        >>> gt.Seq([1, 2, 3, 4, 5, 6, 7, 8]).chunk(3)
        Seq(Seq(1, 2, 3), Seq(4, 5, 6), Seq(7, 8))

        ```
        """
        return Seq(Seq(c) for c in _grouping.chunk(self._inner, size))
