import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from datetime import datetime
import os


def _img_dir():
    # Timestamped folder, e.g. img/10_19_14_03_22
    ts = datetime.now().strftime("%m_%d_%H_%M_%S")
    return os.path.join("img", ts)


def plot_circle_table(df, out_dir=None, fname="circle_sweep.png"):
    """
    Two-panel figure from a build_circle_table() DataFrame:
      left  = area (sq in) vs radius (cm)
      right = circumference (in) vs radius (cm)
    Returns the path of the saved PNG.
    """
    out_dir = _img_dir() if out_dir is None else out_dir
    os.makedirs(out_dir, exist_ok=True)

    fig, axs = plt.subplots(1, 2, figsize=(12, 5))

    axs[0].plot(df["radius_cm"], df["area_sq_in"], marker="o", color="#0015BC")
    axs[0].set_xlabel('Radius (cm)')
    axs[0].set_ylabel('Area (sq in)')
    axs[0].set_title('Circle Area')
    axs[0].grid(True)

    axs[1].plot(df["radius_cm"], df["circumference_in"], marker="o", color="#D81B60")
    axs[1].set_xlabel('Radius (cm)')
    axs[1].set_ylabel('Circumference (in)')
    axs[1].set_title('Circle Circumference')
    axs[1].grid(True)

    plt.tight_layout()
    path = os.path.join(out_dir, fname)
    plt.savefig(path)
    plt.close(fig)
    return path
