"""Conversion constants for the circle area programs.

Notes:
- PI: the fixed approximation of pi used for every area and circumference.
  Use 3.14159 here, not math.pi / np.pi, so printed results stay the same
  across platforms.
- CM_PER_INCH: centimeters in one inch. Radii come in as cm and are divided
  by this before any geometry is done.

Keep this module minimal: only declare the two constants above. No other
source file should spell these literals out.
"""

# Approximation of pi [-]
PI = 3.14159

# Centimeters per inch [cm/in]
CM_PER_INCH = 2.54
