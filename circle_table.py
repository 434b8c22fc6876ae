import numpy as np
import pandas as pd

from circle_geometry import cm_to_inches, circle_area, circle_circumference

# Radii in cm on input; all derived columns are in inches / sq inches

TABLE_COLUMNS = ("radius_cm", "radius_in", "area_sq_in", "circumference_in")


def sweep_radii(start_cm=0.0, stop_cm=10.0, n=21):
    """Evenly spaced radii (cm), endpoints included."""
    return np.linspace(start_cm, stop_cm, n)


def build_circle_table(radii_cm) -> pd.DataFrame:
    """
    One row per radius with the inch radius, area and circumference.
    Values are full precision; rounding happens only when printed.
    """
    r_cm = np.asarray(radii_cm, dtype=float)
    r_in = cm_to_inches(r_cm)
    return pd.DataFrame({
        "radius_cm": r_cm,
        "radius_in": r_in,
        "area_sq_in": circle_area(r_in),
        "circumference_in": circle_circumference(r_in),
    }, columns=list(TABLE_COLUMNS))


def save_circle_table(df: pd.DataFrame, path: str = "circle_table.csv") -> None:
    """Save the sweep table to CSV (no index column)."""
    df.to_csv(path, index=False)
    print(f"Saved DataFrame ({len(df)} rows) to {path!r}")


def load_circle_table(path: str = "circle_table.csv") -> pd.DataFrame:
    """Load a sweep table written by save_circle_table."""
    df = pd.read_csv(path)
    print(f"Loaded DataFrame ({len(df)} rows) from {path!r}")
    return df
