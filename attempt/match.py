"""
Case dispatch over the runtime type of a value.

The most specific registered type wins. When the same type is
registered more than once the first case is used.
"""
import attr
from attr.validators import instance_of, is_callable, optional
from multipledispatch import Dispatcher
from pyrsistent import PVector, v
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from attempt.errors import AttemptError


S = TypeVar("S")


class MatchError(AttemptError):
    def __init__(self, obj: Any):
        super().__init__(f"No case matched {obj!r}")
        self.obj = obj


@attr.s(frozen=True)
class Match(Generic[S]):
    cases: PVector = attr.ib(default=v(), validator=instance_of(PVector))
    default: Optional[Callable[[Any], S]] = attr.ib(
        default=None, validator=optional(is_callable())
    )
    _dispatcher: Dispatcher = attr.ib(init=False, eq=False, repr=False)

    def __attrs_post_init__(self):
        dispatcher = Dispatcher("match")
        for type_, f in self.cases:
            if (type_,) not in dispatcher.funcs:
                dispatcher.add((type_,), f)
        object.__setattr__(self, "_dispatcher", dispatcher)

    def case(self, type_: Type, f: Callable[[Any], S]) -> "Match[S]":
        if not isinstance(type_, type):
            raise TypeError(f"Expected a type, got {type_!r}")
        return attr.evolve(self, cases=self.cases.append((type_, f)))

    def otherwise(self, f: Callable[[Any], S]) -> "Match[S]":
        return attr.evolve(self, default=f)

    def __call__(self, obj: Any) -> S:
        f = self._dispatcher.dispatch(type(obj))
        if f is None:
            if self.default is None:
                raise MatchError(obj)
            f = self.default
        return f(obj)
