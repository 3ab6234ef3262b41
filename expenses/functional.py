from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from expenses.domain import Record

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Either(Generic[E, T], ABC):
    """Result of a query that can fail: Left carries the error, Right the value."""

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        pass

    @abstractmethod
    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def get_error(self) -> E:
        pass

    @abstractmethod
    def is_right(self) -> bool:
        pass

    def is_left(self) -> bool:
        return not self.is_right()


class Right(Either[E, T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return Right(f(self._value))

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return f(self._value)

    def get_or_else(self, default: T) -> T:
        return self._value

    def get_error(self) -> E:
        raise ValueError("Right holds a value, not an error")

    def is_right(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Right({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self._value == other._value


class Left(Either[E, T]):

    def __init__(self, error: E):
        self._error = error

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return self

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def get_error(self) -> E:
        return self._error

    def is_right(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Left({self._error!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self._error == other._error


def all_of(*predicates: Callable[[Record], bool]) -> Callable[[Record], bool]:
    """Predicate that holds when every given predicate holds (vacuously true)."""
    def _filter(r: Record) -> bool:
        return all(p(r) for p in predicates)
    return _filter
