"""
The outcome of a computation that may raise.

An ``Attempt`` is either a ``Success`` holding the value produced by the
computation or a ``Failure`` holding the exception it raised. Exceptions
classified as fatal (see ``attempt.fatal``) are never captured.
"""
import abc
import attr
from attr.validators import instance_of
import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from attempt.errors import NonFatalError, NoSuchElementError, PredicateMismatchError
from attempt.fatal import DEFAULT, Classifier
from attempt.option import Nothing, Option, Some

logger = logging.getLogger(__name__)


E = TypeVar("E", bound=BaseException)
S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")


def _evaluate(
    boundary: str, classifier: Classifier, f: Callable[[], "Attempt[T]"]
) -> "Attempt[T]":
    try:
        return f()
    except BaseException as e:
        if classifier.is_fatal(e):
            logger.debug("[%s] Fatal error, propagating: %r", boundary, e)
            raise
        logger.debug("[%s] Captured error", boundary, exc_info=True)
        return Failure(e, classifier=classifier)


def of(
    computation: Callable[[], T], classifier: Classifier = DEFAULT
) -> "Attempt[T]":
    """
    Evaluate ``computation`` once and capture its outcome.

    Raises:
        BaseException: the error raised by ``computation`` if it is fatal.
    """
    return _evaluate(
        "of", classifier, lambda: Success(computation(), classifier=classifier)
    )


class Attempt(abc.ABC, Generic[T]):
    of = staticmethod(of)

    @abc.abstractmethod
    def is_success(self) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def is_failure(self) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self) -> T:
        """
        Raises:
            NonFatalError: if this is a ``Failure``.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def or_else(self, other: T) -> T:
        raise NotImplementedError

    @abc.abstractmethod
    def or_else_get(self, f: Callable[[BaseException], T]) -> T:
        raise NotImplementedError

    @abc.abstractmethod
    def or_else_raise(self, provider: Callable[[BaseException], E]) -> T:
        raise NotImplementedError

    @abc.abstractmethod
    def failed(self) -> "Attempt[BaseException]":
        raise NotImplementedError

    @abc.abstractmethod
    def map(self, f: Callable[[T], U]) -> "Attempt[U]":
        raise NotImplementedError

    @abc.abstractmethod
    def flat_map(self, f: Callable[[T], "Attempt[U]"]) -> "Attempt[U]":
        raise NotImplementedError

    @abc.abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Attempt[T]":
        raise NotImplementedError

    @abc.abstractmethod
    def for_each(self, action: Callable[[T], Any]) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def recover(self, f: Callable[[BaseException], T]) -> "Attempt[T]":
        raise NotImplementedError

    @abc.abstractmethod
    def recover_with(
        self, f: Callable[[BaseException], "Attempt[T]"]
    ) -> "Attempt[T]":
        raise NotImplementedError

    @abc.abstractmethod
    def to_option(self) -> Option[T]:
        raise NotImplementedError

    def match(self, matcher: Callable[["Attempt[T]"], S]) -> S:
        if matcher is None:
            raise TypeError("matcher is None")
        return matcher(self)

    def __iter__(self) -> Iterator[T]:
        if self.is_success():
            yield self.get()


@attr.s(frozen=True)
class Success(Attempt[T]):
    value: T = attr.ib()
    classifier: Classifier = attr.ib(
        default=DEFAULT,
        validator=instance_of(Classifier),
        eq=False,
        repr=False,
        kw_only=True,
    )

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def or_else(self, other: T) -> T:
        return self.value

    def or_else_get(self, f: Callable[[BaseException], T]) -> T:
        return self.value

    def or_else_raise(self, provider: Callable[[BaseException], E]) -> T:
        return self.value

    def failed(self) -> Attempt[BaseException]:
        return Failure(
            NoSuchElementError("Success.failed()"), classifier=self.classifier
        )

    def map(self, f: Callable[[T], U]) -> Attempt[U]:
        return _evaluate(
            "map",
            self.classifier,
            lambda: Success(f(self.value), classifier=self.classifier),
        )

    def flat_map(self, f: Callable[[T], Attempt[U]]) -> Attempt[U]:
        def _flat_map() -> Attempt[U]:
            result = f(self.value)
            if not isinstance(result, Attempt):
                raise TypeError(f"flat_map expected an Attempt, got {result!r}")
            return result

        return _evaluate("flat_map", self.classifier, _flat_map)

    def filter(self, predicate: Callable[[T], bool]) -> Attempt[T]:
        def _filter() -> Attempt[T]:
            if predicate(self.value):
                return self
            return Failure(
                PredicateMismatchError(self.value), classifier=self.classifier
            )

        return _evaluate("filter", self.classifier, _filter)

    def for_each(self, action: Callable[[T], Any]) -> None:
        action(self.value)

    def recover(self, f: Callable[[BaseException], T]) -> Attempt[T]:
        return self

    def recover_with(self, f: Callable[[BaseException], Attempt[T]]) -> Attempt[T]:
        return self

    def to_option(self) -> Option[T]:
        return Some(self.value)


@attr.s(frozen=True)
class Failure(Attempt[T]):
    error: BaseException = attr.ib(validator=instance_of(BaseException))
    classifier: Classifier = attr.ib(
        default=DEFAULT,
        validator=instance_of(Classifier),
        eq=False,
        repr=False,
        kw_only=True,
    )

    def __attrs_post_init__(self):
        if self.classifier.is_fatal(self.error):
            raise self.error

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self) -> T:
        raise NonFatalError(self.error) from self.error

    def or_else(self, other: T) -> T:
        return other

    def or_else_get(self, f: Callable[[BaseException], T]) -> T:
        return f(self.error)

    def or_else_raise(self, provider: Callable[[BaseException], E]) -> T:
        error = provider(self.error)
        if error is self.error:
            raise error
        raise error from self.error

    def failed(self) -> Attempt[BaseException]:
        return Success(self.error, classifier=self.classifier)

    def map(self, f: Callable[[T], U]) -> Attempt[U]:
        return self

    def flat_map(self, f: Callable[[T], Attempt[U]]) -> Attempt[U]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Attempt[T]:
        return self

    def for_each(self, action: Callable[[T], Any]) -> None:
        pass

    def recover(self, f: Callable[[BaseException], T]) -> Attempt[T]:
        return Success(f(self.error), classifier=self.classifier)

    def recover_with(self, f: Callable[[BaseException], Attempt[T]]) -> Attempt[T]:
        return f(self.error)

    def to_option(self) -> Option[T]:
        return Nothing()
