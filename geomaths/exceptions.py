"""Exception types raised by geomaths"""

__all__ = ['GeomathsError', 'InvalidArgumentError', 'NumericDegeneracyError']


class GeomathsError(Exception):
    """Base class for all geomaths errors"""


class InvalidArgumentError(GeomathsError, ValueError):
    """An argument lies outside the domain accepted by a calculation"""


class NumericDegeneracyError(GeomathsError, ArithmeticError):
    """
    A calculation could not produce a meaningful result, e.g. an iterative solver
    failed to converge or a formula divided by a vanishing angular distance.
    """
