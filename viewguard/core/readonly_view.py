"""ReadOnlyList — a non-owning, read-only window onto a mutable list.

The view holds a *reference* to the backing list, never a copy.  Every
read goes straight to the backing list, so changes made through the
original list show up in the view immediately.  "Read-only" describes the
access path, not the data: the view refuses to mutate, the list does not.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, NoReturn, overload

logger = logging.getLogger(__name__)


class UnsupportedOperationError(TypeError):
    """Raised when a mutating operation is attempted through a read-only view."""


class ReadOnlyList(Sequence[Any]):
    """A live, read-only view over a ``list``.

    Usage
    -----
    >>> words = ["Java", "is"]
    >>> view = ReadOnlyList(words)
    >>> words.append("fun")
    >>> str(view)
    '[Java, is, fun]'
    >>> view.append("!")
    Traceback (most recent call last):
        ...
    viewguard.core.readonly_view.UnsupportedOperationError: ReadOnlyList does not support append()
    """

    __slots__ = ("_items",)

    # Contents can change under the view, so it must not be hashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: list[Any]) -> None:
        self._items = items

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def copy(self) -> list[Any]:
        """Return an independent snapshot of the current contents."""
        return list(self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # ------------------------------------------------------------------
    # Mutations — all rejected
    # ------------------------------------------------------------------

    def _reject(self, operation: str) -> NoReturn:
        logger.debug("Rejected %s() on read-only view of %d items", operation, len(self._items))
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support {operation}()"
        )

    def append(self, value: Any) -> NoReturn:
        self._reject("append")

    def extend(self, values: Iterable[Any]) -> NoReturn:
        self._reject("extend")

    def insert(self, index: int, value: Any) -> NoReturn:
        self._reject("insert")

    def remove(self, value: Any) -> NoReturn:
        self._reject("remove")

    def pop(self, index: int = -1) -> NoReturn:
        self._reject("pop")

    def clear(self) -> NoReturn:
        self._reject("clear")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject("sort")

    def reverse(self) -> NoReturn:
        self._reject("reverse")

    def __setitem__(self, index: int | slice, value: Any) -> NoReturn:
        self._reject("__setitem__")

    def __delitem__(self, index: int | slice) -> NoReturn:
        self._reject("__delitem__")

    def __iadd__(self, values: Iterable[Any]) -> NoReturn:
        self._reject("__iadd__")

    def __imul__(self, count: int) -> NoReturn:
        self._reject("__imul__")


def wrap(sequence: list[Any] | ReadOnlyList) -> ReadOnlyList:
    """Return a read-only view over *sequence*, sharing its storage.

    Wrapping a view yields a view over the same backing list.
    """
    if isinstance(sequence, ReadOnlyList):
        return ReadOnlyList(sequence._items)
    logger.debug("Wrapping list %#x (%d items) in a read-only view", id(sequence), len(sequence))
    return ReadOnlyList(sequence)
