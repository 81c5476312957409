from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, TypeVar, Union

from .semigroup import NotASemigroup

T = TypeVar("T")


@dataclass(frozen=True)
class Errors(Sequence[T]):
    """Immutable ordered collection of validation errors.

    Implements the ``Semigroup`` protocol: ``append`` concatenates, keeping
    this collection's errors ahead of ``other``'s. Being a read-only
    ``Sequence``, it also mixes with plain lists and tuples in either
    operand position of ``validatedpy.append``.
    """

    _items: Tuple[T, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "_items", tuple(self._items))

    @staticmethod
    def of(*items: T) -> "Errors[T]":
        return Errors(items)

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "Errors[T]":
        return Errors(tuple(items))

    def append(self, other: Sequence[T]) -> "Errors[T]":
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return Errors(self._items + tuple(other))
        raise NotASemigroup(self, other)

    def add(self, item: T) -> "Errors[T]":
        return Errors(self._items + (item,))

    def to_list(self) -> List[T]:
        return list(self._items)

    def __add__(self, other: Sequence[T]) -> "Errors[T]":
        return self.append(other)

    def __getitem__(self, i: Union[int, slice]) -> Union[T, "Errors[T]"]:
        if isinstance(i, slice):
            return Errors(self._items[i])
        return self._items[i]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Errors{list(self._items)!r}"
