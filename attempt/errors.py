class AttemptError(Exception):
    pass


class NonFatalError(AttemptError):
    """
    Raised when the value of a ``Failure`` is requested.

    The captured exception is available as ``cause``.
    """

    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"{type(self.cause).__name__}: {self.cause}"


class NoSuchElementError(AttemptError, LookupError):
    pass


class PredicateMismatchError(AttemptError, ValueError):
    def __init__(self, value):
        super().__init__(f"Predicate does not hold for {value!r}")
        self.value = value
