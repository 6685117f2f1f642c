"""
Classification of exceptions into fatal and non-fatal.

Fatal exceptions are never captured into a ``Failure``; they always
propagate out of the boundary that raised them.
"""
import asyncio
import attr
from attr.validators import deep_iterable, instance_of
from pyrsistent import PSet, s
from typing import Type


def _is_exception_type(instance, attribute, value):
    if not (isinstance(value, type) and issubclass(value, BaseException)):
        raise TypeError(
            f"`{attribute.name}` members must be exception types: {value!r}"
        )


DEFAULT_FATAL = s(
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
    MemoryError,
    RecursionError,
    AssertionError,
)


@attr.s(frozen=True)
class Classifier:
    fatal: PSet = attr.ib(
        default=DEFAULT_FATAL,
        validator=deep_iterable(
            member_validator=_is_exception_type, iterable_validator=instance_of(PSet)
        ),
    )

    @classmethod
    def default(cls) -> "Classifier":
        return cls()

    def extend(self, *types: Type[BaseException]) -> "Classifier":
        return Classifier(fatal=self.fatal.update(types))

    def is_fatal(self, error: BaseException) -> bool:
        # Anything outside the Exception hierarchy signals interruption
        # or shutdown of the running context.
        if not isinstance(error, Exception):
            return True
        return isinstance(error, tuple(self.fatal))

    def is_non_fatal(self, error: BaseException) -> bool:
        return not self.is_fatal(error)


DEFAULT = Classifier.default()

is_fatal = DEFAULT.is_fatal
is_non_fatal = DEFAULT.is_non_fatal
