"""Quick sanity checks for the cm -> in circle formulas.

Run as: python -m tools.circle_consistency_check
"""
import numpy as np
from circle_constants import PI, CM_PER_INCH
from circle_geometry import (
    cm_to_inches, inches_to_cm, area_from_cm, circumference_from_cm
)


def one_inch_test(tol_abs=0.01):
    """A radius of exactly one inch (in cm) must give an area of PI sq in.

    Returns: (ok, abs_err, area)
    """
    area = area_from_cm(CM_PER_INCH)
    abs_err = abs(area - PI)
    return abs_err <= tol_abs, abs_err, area


def two_inch_test(tol_abs=0.01):
    """Two inches: area = 4*PI and circumference = 4*PI, both ~12.57.

    Returns: (ok, area, circumference)
    """
    r_cm = 2 * CM_PER_INCH
    area = area_from_cm(r_cm)
    circ = circumference_from_cm(r_cm)
    ok = abs(area - 12.57) <= tol_abs and abs(circ - 12.57) <= tol_abs
    return ok, area, circ


def round_trip_test(radii_cm=None, tol_rel=1e-12):
    """cm -> in -> cm should give back the input radii.

    Returns: (ok, max_rel_err)
    """
    if radii_cm is None:
        radii_cm = np.linspace(0.0, 100.0, 1001)
    r_cm = np.asarray(radii_cm, dtype=float)
    back = inches_to_cm(cm_to_inches(r_cm))
    rel_err = np.abs(back - r_cm) / np.maximum(np.abs(r_cm), 1.0)
    max_rel_err = float(rel_err.max()) if rel_err.size else 0.0
    return max_rel_err <= tol_rel, max_rel_err


def main():
    ok, abs_err, area = one_inch_test()
    if ok:
        print("GREEN: one-inch area test passed. abs_err=", abs_err)
    else:
        print("RED: one-inch area test FAILED. area=", area)

    ok, area, circ = two_inch_test()
    status = "GREEN" if ok else "RED"
    print(f"{status}: two-inch test, area~{area:.2f} sq in, circumference~{circ:.2f} in")

    ok, max_rel_err = round_trip_test()
    status = "GREEN" if ok else "RED"
    print(f"{status}: cm -> in -> cm round trip, max rel_err={max_rel_err:.3e}")


if __name__ == '__main__':
    main()
