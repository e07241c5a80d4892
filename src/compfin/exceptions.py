class CompfinError(Exception):
    """Base class for all errors raised by the compfin library."""


class ConfigurationError(CompfinError, ValueError):
    """Raised when an object is constructed with invalid parameters.

    Examples are a non-positive number of simulations, a time grid that is not
    strictly increasing (or has fewer than two points), or a confidence level
    outside ``(0, 1)``.

    Notes
    -----
    Subclasses :class:`ValueError`, so callers that only guard against bad
    scalar inputs keep working.
    """


class OutOfRangeError(CompfinError, LookupError):
    """Raised when a time or time index is not part of a time grid.

    A time lookup never snaps to an adjacent grid point: asking for a time that
    is not on the grid is an error.
    """


class IndexOutOfRangeError(CompfinError, IndexError):
    """Raised when a simulation, path or factor index is outside its range."""


class ModelMismatchError(CompfinError, TypeError):
    """Raised when an estimator is applied to a model it was not derived for.

    The pathwise and likelihood ratio Delta estimators use closed-form
    expressions that are only valid under Black-Scholes (log-normal) dynamics.
    """
