# circle_area.py
# Single pass: prompt for a radius in cm, print the area in sq in.
import sys

from circle_report import run


def main():
    return run(include_circumference=False, repeat=False)


if __name__ == '__main__':
    sys.exit(main())
