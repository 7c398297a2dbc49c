"""Fixed-size windows over ordered result lists for display."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from search_server.errors import InvalidArgumentError


T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous slice of the paginated sequence."""

    __slots__ = ("_items",)

    def __init__(self, items: Sequence[T]) -> None:
        self._items = tuple(items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Page({list(self._items)!r})"


class Paginator(Generic[T]):
    """Split a sequence into pages of ``page_size`` items; the last page may be short."""

    def __init__(self, items: Sequence[T], page_size: int) -> None:
        if page_size <= 0:
            raise InvalidArgumentError(f"Page size must be positive, got {page_size}")
        self.page_size = page_size
        self._pages = [Page(items[start : start + page_size]) for start in range(0, len(items), page_size)]

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> Page[T]:
        return self._pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    """Return a :class:`Paginator` over ``items``."""
    return Paginator(items, page_size)
