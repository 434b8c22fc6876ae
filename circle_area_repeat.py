# circle_area_repeat.py
# Loop: prompt for radii in cm until 0 is entered, print area and circumference.
import sys

from circle_report import run


def main():
    return run(include_circumference=True, repeat=True)


if __name__ == '__main__':
    sys.exit(main())
