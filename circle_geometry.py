# Circle geometry in inches, with cm -> in conversion

import numpy as np
from typing import Union

from circle_constants import PI, CM_PER_INCH

# All radii in this file are either centimeters (*_cm) or inches (*_in)

ArrayLike = Union[float, np.ndarray]


def cm_to_inches(r_cm: ArrayLike) -> ArrayLike:
    return r_cm / CM_PER_INCH


def inches_to_cm(r_in: ArrayLike) -> ArrayLike:
    return r_in * CM_PER_INCH


def circle_area(r_in: ArrayLike) -> ArrayLike:
    """Area in square inches for a radius in inches: PI * r^2."""
    return PI * r_in * r_in


def circle_circumference(r_in: ArrayLike) -> ArrayLike:
    """Circumference in inches for a radius in inches: 2 * PI * r."""
    return 2 * PI * r_in


def area_from_cm(r_cm: ArrayLike) -> ArrayLike:
    """
    Convert a radius in cm to inches and return the area in sq in.
    Works elementwise on numpy arrays as well as plain floats.
    """
    return circle_area(cm_to_inches(r_cm))


def circumference_from_cm(r_cm: ArrayLike) -> ArrayLike:
    return circle_circumference(cm_to_inches(r_cm))
