"""Distance unit conversions"""

__all__ = ['kilometres_to_miles', 'miles_to_kilometres']

from geomaths._const import MILES_PER_KILOMETRE


def kilometres_to_miles(kilometres: float) -> float:
    """Convert kilometres to statute miles"""
    return kilometres * MILES_PER_KILOMETRE


def miles_to_kilometres(miles: float) -> float:
    """Convert statute miles to kilometres"""
    return miles / MILES_PER_KILOMETRE
