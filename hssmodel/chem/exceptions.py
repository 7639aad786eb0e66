"""Custom exceptions raised by the steady state chemistry models."""


class SteadyStateError(Exception):
    """Base class for all steady state model exceptions."""


class PreconditionViolation(SteadyStateError, ValueError):
    """An input lies outside the domain on which the model is defined.

    For example, a non-positive concentration or rate constant, or a
    branching ratio outside of [0, 1].
    """


class NumericDomainError(SteadyStateError, ArithmeticError):
    """A closed-form expression left its numeric domain.

    Raised for a negative discriminant in the analytic OH estimate or a
    division by a vanishing rate term.
    """
