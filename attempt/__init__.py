from attempt.attempt import Attempt, Failure, Success, of
from attempt.errors import (
    AttemptError,
    NoSuchElementError,
    NonFatalError,
    PredicateMismatchError,
)
from attempt.fatal import Classifier, is_fatal, is_non_fatal
from attempt.match import Match, MatchError
from attempt.option import Nothing, Option, Some, nothing, some


def success(value) -> Success:
    return Success(value)


def failure(error: BaseException) -> Failure:
    return Failure(error)


__all__ = [
    "Attempt",
    "AttemptError",
    "Classifier",
    "Failure",
    "Match",
    "MatchError",
    "NoSuchElementError",
    "NonFatalError",
    "Nothing",
    "Option",
    "PredicateMismatchError",
    "Some",
    "Success",
    "failure",
    "is_fatal",
    "is_non_fatal",
    "nothing",
    "of",
    "some",
    "success",
]
