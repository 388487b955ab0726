from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import NamedTuple

import cytoolz as cz
import more_itertools as mit

from ._core import InvalidArgumentError

type KeyFn[T] = Callable[[T], object]


class Partition[T](NamedTuple):
    """The two sides of a predicate split.

    See `partition()` for details.
    """

    passed: list[T]
    """Elements for which the predicate was truthy, in input order."""
    failed: list[T]
    """Elements for which the predicate was falsy, in input order."""


def _field_getter(field: str) -> KeyFn[tuple[int, object]]:
    def _get(pair: tuple[int, object]) -> object:
        idx, item = pair
        try:
            if isinstance(item, Mapping):
                return item[field]
            return getattr(item, field)
        except (KeyError, AttributeError) as e:
            msg = (
                f"Cannot group by {field!r}: element at index {idx} ({item!r}) "
                "has no such field"
            )
            raise InvalidArgumentError(msg) from e

    return _get


def _strip_index[T](pairs: list[tuple[int, T]]) -> list[T]:
    return [item for _, item in pairs]


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        msg = f"size must be a positive integer, got {size!r}"
        raise InvalidArgumentError(msg)


def group_by[T](items: Iterable[T], key: str | KeyFn[T]) -> dict[str, list[T]]:
    """Group elements into buckets named after the string form of a key.

    `key` is either a field name, read with `item[key]` on mappings and `getattr(item, key)` on anything else, or a function computing the key from each element.

    The derived value is always converted with `str()`, so `25` and `"25"` share a bucket.

    Buckets appear in the order their key is first seen, and each keeps its elements in input order.

    Args:
        items (Iterable[T]): Elements to group.
        key (str | Callable[[T], object]): Field name or key function.

    Returns:
        dict[str, list[T]]: Fresh mapping from key string to the elements sharing it.

    Raises:
        InvalidArgumentError: If `key` is a field name and an element lacks that field, naming the element index.

    Example:
    ```python
    >>> import grouptools as gt
    >>> people = [
    ...     {"name": "Alice", "age": 25},
    ...     {"name": "Bob", "age": 30},
    ...     {"name": "Charlie", "age": 25},
    ... ]
    >>> gt.group_by(people, "age")  # doctest: +NORMALIZE_WHITESPACE
    {'25': [{'name': 'Alice', 'age': 25}, {'name': 'Charlie', 'age': 25}],
     '30': [{'name': 'Bob', 'age': 30}]}
    >>> gt.group_by(["ox", "cat", "pig", "hen"], len)
    {'2': ['ox'], '3': ['cat', 'pig', 'hen']}
    >>> gt.group_by([], "age")
    {}

    ```
    """
    if callable(key):
        return cz.itertoolz.groupby(cz.functoolz.compose_left(key, str), items)
    indexed = cz.itertoolz.groupby(
        cz.functoolz.compose_left(_field_getter(key), str), enumerate(items)
    )
    return cz.dicttoolz.valmap(_strip_index, indexed)


def partition[T](items: Iterable[T], predicate: Callable[[T], object]) -> Partition[T]:
    """Split elements in two by a predicate, in a single pass.

    The predicate is called exactly once per element.

    Args:
        items (Iterable[T]): Elements to split.
        predicate (Callable[[T], object]): Function whose truthiness routes each element.

    Returns:
        Partition[T]: `(passed, failed)`, each preserving input order.

    Example:
    ```python
    >>> import grouptools as gt
    >>> even, odd = gt.partition([1, 2, 3, 4, 5], lambda n: n % 2 == 0)
    >>> even
    [2, 4]
    >>> odd
    [1, 3, 5]
    >>> gt.partition(["apple", "banana", "cherry", "date"], lambda w: len(w) <= 5)
    Partition(passed=['apple', 'date'], failed=['banana', 'cherry'])

    ```
    """
    passed: list[T] = []
    failed: list[T] = []
    for item in items:
        (passed if predicate(item) else failed).append(item)
    return Partition(passed, failed)


def chunk[T](items: Iterable[T], size: int) -> list[list[T]]:
    """Split elements into contiguous chunks of `size`.

    Every chunk holds exactly `size` elements except the last, which holds the remainder.

    There is never an empty trailing chunk.

    Args:
        items (Iterable[T]): Elements to split. Must not be `None`, see `group_items()` for that.
        size (int): Maximum length of each chunk.

    Returns:
        list[list[T]]: Fresh list of fresh chunks, empty if `items` is empty.

    Raises:
        InvalidArgumentError: If `size` is not a positive integer.

    Example:
    ```python
    >>> import grouptools as gt
    >>> gt.chunk(range(1, 11), 3)
    [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10]]
    >>> gt.chunk("abcdefgh", 4)
    [['a', 'b', 'c', 'd'], ['e', 'f', 'g', 'h']]
    >>> gt.chunk([], 3)
    []
    >>> gt.chunk([1, 2], 0)
    Traceback (most recent call last):
        ...
    grouptools._core._errors.InvalidArgumentError: size must be a positive integer, got 0

    ```
    """
    _check_size(size)
    data = items if isinstance(items, Sequence) else tuple(items)
    if not len(data):
        return []
    if size >= len(data):
        return [list(data)]
    return list(mit.chunked(data, size))


def group_items[T](items: Iterable[T] | None, size: int) -> list[list[T]]:
    """Split elements into contiguous chunks of `size`, accepting a missing input.

    Same contract as `chunk()`, except that `None` yields an empty result.

    `None` is checked before `size`, so `group_items(None, 0)` is still `[]`.

    Args:
        items (Iterable[T] | None): Elements to split, or `None`.
        size (int): Maximum length of each chunk.

    Returns:
        list[list[T]]: Fresh list of fresh chunks.

    Raises:
        InvalidArgumentError: If `items` is present and `size` is not a positive integer.

    Example:
    ```python
    >>> import grouptools as gt
    >>> products = ["Laptop", "Mouse", "Keyboard", "Monitor", "USB cable"]
    >>> gt.group_items(products, 2)
    [['Laptop', 'Mouse'], ['Keyboard', 'Monitor'], ['USB cable']]
    >>> gt.group_items(None, 2)
    []

    ```
    """
    if items is None:
        return []
    return chunk(items, size)
