import pytest

from attempt.match import Match, MatchError


class Animal:
    pass


class Dog(Animal):
    pass


def test_dispatch_on_type():
    matcher = Match().case(int, lambda x: "int").case(str, lambda x: "str")

    assert matcher(1) == "int"
    assert matcher("a") == "str"


def test_most_specific_type_wins():
    matcher = Match().case(Animal, lambda x: "animal").case(Dog, lambda x: "dog")

    assert matcher(Dog()) == "dog"
    assert matcher(Animal()) == "animal"


def test_first_case_wins_for_same_type():
    matcher = Match().case(int, lambda x: "first").case(int, lambda x: "second")

    assert matcher(1) == "first"


def test_no_match():
    matcher = Match().case(int, lambda x: x)

    with pytest.raises(MatchError) as excinfo:
        matcher("a")
    assert excinfo.value.obj == "a"


def test_otherwise():
    matcher = Match().case(int, lambda x: x).otherwise(lambda x: None)

    assert matcher("a") is None
    assert matcher(1) == 1


def test_builder_is_immutable():
    base = Match()
    extended = base.case(int, lambda x: x)

    assert len(base.cases) == 0
    assert len(extended.cases) == 1


def test_case_requires_type():
    with pytest.raises(TypeError):
        Match().case("int", lambda x: x)


def test_dispatcher_built_once(monkeypatch):
    from attempt import match

    built = []

    class CountingDispatcher(match.Dispatcher):
        def __init__(self, *args, **kwargs):
            built.append(self)
            super().__init__(*args, **kwargs)

    monkeypatch.setattr(match, "Dispatcher", CountingDispatcher)

    matcher = Match().case(int, lambda x: "int")
    assert len(built) == 2

    assert matcher(1) == "int"
    assert matcher(2) == "int"
    assert len(built) == 2
