"""Exceptions raised by probsim."""


class ProbSimError(Exception):
    """Base class for all probsim errors."""


class InvalidParameter(ProbSimError, ValueError):
    """A probability, count, bound or quantile level is out of range."""


class InvalidState(ProbSimError, RuntimeError):
    """An operation was requested on data that cannot support it."""
