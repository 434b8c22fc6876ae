"""Tabulate and plot area / circumference over a range of radii.

Run as: python -m tools.circle_sweep
"""
import os

from circle_table import sweep_radii, build_circle_table, save_circle_table
from plot_scripts import plot_circle_table

# ---------------------- Config -----------------------
SWEEP_START_CM = 0.0    # first radius [cm]
SWEEP_STOP_CM  = 10.0   # last radius [cm]
SWEEP_POINTS   = 21     # number of radii, endpoints included


def main(out_dir=None):
    radii = sweep_radii(SWEEP_START_CM, SWEEP_STOP_CM, SWEEP_POINTS)
    df = build_circle_table(radii)
    print(df.to_string(index=False, float_format=lambda v: f"{v:.2f}"))

    if out_dir is None:
        csv_path = "circle_table.csv"
    else:
        os.makedirs(out_dir, exist_ok=True)
        csv_path = os.path.join(out_dir, "circle_table.csv")
    save_circle_table(df, csv_path)
    png_path = plot_circle_table(df, out_dir=out_dir)
    print(f"Saved plot to {png_path!r}")
    return df


if __name__ == '__main__':
    main()
