import asyncio
from pyrsistent import s
import pytest

from attempt.fatal import DEFAULT, Classifier, is_fatal, is_non_fatal


@pytest.mark.parametrize(
    "error",
    [
        KeyboardInterrupt(),
        SystemExit(0),
        GeneratorExit(),
        asyncio.CancelledError(),
        MemoryError(),
        RecursionError(),
        AssertionError("invariant"),
    ],
)
def test_fatal(error):
    assert is_fatal(error)
    assert not is_non_fatal(error)


@pytest.mark.parametrize(
    "error",
    [
        ZeroDivisionError(),
        ValueError(),
        KeyError("key"),
        RuntimeError(),
        OSError(),
        asyncio.TimeoutError(),
    ],
)
def test_non_fatal(error):
    assert is_non_fatal(error)
    assert not is_fatal(error)


def test_base_exception_subclass_is_fatal():
    class Signal(BaseException):
        pass

    assert is_fatal(Signal())


def test_extend():
    class Critical(Exception):
        pass

    classifier = DEFAULT.extend(Critical)

    assert classifier.is_fatal(Critical())
    assert not DEFAULT.is_fatal(Critical())
    assert classifier.is_non_fatal(ValueError())


def test_empty_classifier_still_treats_base_exceptions_as_fatal():
    classifier = Classifier(fatal=s())

    assert classifier.is_fatal(KeyboardInterrupt())
    assert classifier.is_non_fatal(MemoryError())


def test_rejects_non_exception_types():
    with pytest.raises(TypeError):
        Classifier(fatal=s(int))

    with pytest.raises(TypeError):
        Classifier(fatal={MemoryError})
