# circle_report.py
"""Read a radius in cm, print the circle's area (and circumference) in inches.

One reporter covers both programs:
  include_circumference=False, repeat=False -> single pass, area only
  include_circumference=True,  repeat=True  -> loop until a radius of 0 is read

The loop reads before it checks: it always prompts at least once, and a radius
of exactly 0 ends it without printing any result line.
"""
import re
import sys

from circle_geometry import area_from_cm, circumference_from_cm

PROMPT = "Enter radius (in cm):"

# ASCII decimal or exponent literal, or inf/infinity/nan (what scanf %f takes)
FLOAT_TOKEN = re.compile(
    r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?(inf(inity)?|nan)",
    re.IGNORECASE,
)


class RadiusParseError(ValueError):
    """Input token could not be read as a radius."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"invalid radius {token!r} (expected a number in cm)")


def iter_tokens(stream):
    """Yield whitespace-delimited tokens, one line at a time (scanf-style)."""
    for line in stream:
        for tok in line.split():
            yield tok


def read_radius(tokens) -> float:
    tok = next(tokens, None)
    if tok is None:
        raise EOFError("no radius supplied")
    if FLOAT_TOKEN.fullmatch(tok) is None:
        raise RadiusParseError(tok)
    return float(tok)


def format_area_line(area: float) -> str:
    return f"Circle's area is {area:3.2f} (sq in)."


def format_circumference_line(circumference: float) -> str:
    return f"Its circumference is {circumference:3.2f} (in)."


def prompt_radius(tokens, out) -> float:
    # flush so the prompt is visible before the blocking read
    print(PROMPT, file=out, flush=True)
    return read_radius(tokens)


def report_radius(r_cm: float, out, include_circumference: bool = False) -> None:
    print(format_area_line(area_from_cm(r_cm)), file=out)
    if include_circumference:
        print(format_circumference_line(circumference_from_cm(r_cm)), file=out)


def report_once(tokens, out, include_circumference: bool = False) -> float:
    """Prompt, read one radius, print its results. Returns the radius read."""
    r_cm = prompt_radius(tokens, out)
    report_radius(r_cm, out, include_circumference=include_circumference)
    return r_cm


def run(stdin=None, stdout=None, stderr=None,
        include_circumference: bool = False, repeat: bool = False) -> int:
    """
    Run the read-compute-print program on the given streams.

    Returns the exit code:
      0 -> single pass done, or loop ended on radius 0 / end of input
      1 -> a token was not a number, or the single pass got no input
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    tokens = iter_tokens(stdin)
    try:
        if not repeat:
            report_once(tokens, stdout, include_circumference=include_circumference)
            return 0

        while True:
            try:
                r_cm = prompt_radius(tokens, stdout)
            except EOFError:
                return 0
            if r_cm == 0.0:
                return 0
            report_radius(r_cm, stdout, include_circumference=include_circumference)
    except RadiusParseError as e:
        print(f"Error: {e}.", file=stderr)
        return 1
    except EOFError as e:
        print(f"Error: {e}.", file=stderr)
        return 1
