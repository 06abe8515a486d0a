"""
Exception hierarchy for pga2d.

Every error raised by the algebra derives from :class:`PGAError` and from the
builtin exception a caller would naturally catch for the same condition, so
``except TypeError`` keeps working for bad casts and ``except
ZeroDivisionError`` for ideal elements.
"""


class PGAError(Exception):
    """Base exception for pga2d errors."""
    pass


class InvalidGradeCastError(PGAError, TypeError):
    """A KVector was cast to a grade it does not hold."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Illegal {expected} cast: k-vector holds a {actual}")
        self.expected = expected
        self.actual = actual


class InvalidGradeError(PGAError, ValueError):
    """Grade projection outside the algebra's grade range."""

    def __init__(self, grade: object):
        super().__init__(f"Illegal grade projection: {grade!r} (expected 0, 1, 2 or 3)")
        self.grade = grade


class UnsupportedProductError(PGAError, NotImplementedError):
    """A product has no formula for the given operand types."""

    def __init__(self, product: str, left: object, right: object):
        super().__init__(
            f"{product} is not defined for "
            f"{type(left).__name__} x {type(right).__name__}"
        )
        self.product = product


class IdealElementError(PGAError, ZeroDivisionError):
    """Normalizing an element whose weight is zero (point or line at infinity)."""
    pass
