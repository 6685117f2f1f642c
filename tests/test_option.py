import pytest

from attempt.errors import NoSuchElementError
from attempt.option import Nothing, Some, nothing, some


def test_some():
    option = some(1)

    assert option == Some(1)
    assert option.is_present()
    assert not option.is_empty()
    assert option.get() == 1
    assert option.or_else(2) == 1
    assert option.map(lambda x: x + 1) == Some(2)
    assert list(option) == [1]


def test_nothing():
    option = nothing()

    assert option == Nothing()
    assert not option.is_present()
    assert option.is_empty()
    assert option.or_else(2) == 2
    assert option.map(lambda x: x + 1) == Nothing()
    assert list(option) == []


def test_nothing_get():
    with pytest.raises(NoSuchElementError):
        Nothing().get()
