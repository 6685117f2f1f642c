"""
Optional values.
"""
import abc
import attr
from typing import Any, Callable, Generic, Iterator, TypeVar

from attempt.errors import NoSuchElementError


T = TypeVar("T")
U = TypeVar("U")


class Option(abc.ABC, Generic[T]):
    @abc.abstractmethod
    def is_present(self) -> bool:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return not self.is_present()

    @abc.abstractmethod
    def get(self) -> T:
        raise NotImplementedError

    @abc.abstractmethod
    def or_else(self, other: T) -> T:
        raise NotImplementedError

    @abc.abstractmethod
    def map(self, f: Callable[[T], U]) -> "Option[U]":
        raise NotImplementedError

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError


@attr.s(frozen=True)
class Some(Option[T]):
    value: T = attr.ib()

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def or_else(self, other: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Some(f(self.value))

    def __iter__(self) -> Iterator[T]:
        yield self.value


@attr.s(frozen=True)
class Nothing(Option[Any]):
    def is_present(self) -> bool:
        return False

    def get(self):
        raise NoSuchElementError("Nothing.get()")

    def or_else(self, other: T) -> T:
        return other

    def map(self, f: Callable[[Any], U]) -> Option[U]:
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(())


def some(value: T) -> Some[T]:
    return Some(value)


def nothing() -> Nothing:
    return Nothing()
