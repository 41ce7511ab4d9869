"""Duration string parsing.

Accepts the same syntax as Go's ``time.ParseDuration``: an optional sign
followed by one or more ``<number><unit>`` terms, e.g. ``"300ms"``,
``"1.5h"`` or ``"2h45m"``. Durations are integer nanoseconds throughout
gutimer.
"""

from __future__ import annotations

import re

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# Largest representable duration, matches a signed 64-bit nanosecond count
MAX_DURATION = 2**63 - 1

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_TERM = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)")


class DurationError(ValueError):
    """Raised when a duration string cannot be parsed."""


def parse_duration(text: str) -> int:
    """Parse a duration string into nanoseconds.

    Raises:
        DurationError: if the string is empty, malformed, uses an unknown
            unit or overflows ``MAX_DURATION``.
    """
    original = text
    if not text:
        raise DurationError('invalid duration ""')

    negative = False
    if text[0] in "+-":
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return 0
    if not text:
        raise DurationError(f'invalid duration "{original}"')

    total = 0
    pos = 0
    while pos < len(text):
        match = _TERM.match(text, pos)
        whole, frac, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not frac:
            raise DurationError(f'invalid duration "{original}"')
        if not unit:
            raise DurationError(f'missing unit in duration "{original}"')
        if unit not in UNITS:
            raise DurationError(f'unknown unit "{unit}" in duration "{original}"')

        scale = UNITS[unit]
        value = int(whole or "0") * scale
        if frac:
            # integer arithmetic keeps nanosecond precision
            value += int(frac) * scale // 10 ** len(frac)
        total += value
        if total > MAX_DURATION + (1 if negative else 0):
            raise DurationError(f'invalid duration "{original}"')
        pos = match.end()

    if negative:
        return -total
    if total > MAX_DURATION:
        raise DurationError(f'invalid duration "{original}"')
    return total


def format_duration_string(ns: int) -> str:
    """Render nanoseconds in Go's duration notation, e.g. ``1h2m3.5s``."""
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < SECOND:
        for unit, scale in (("ms", MILLISECOND), ("µs", MICROSECOND)):
            if ns >= scale:
                return f"{sign}{_trim_fraction(ns, scale)}{unit}"
        return f"{sign}{ns}ns"

    hours, ns = divmod(ns, HOUR)
    minutes, ns = divmod(ns, MINUTE)
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return out + f"{_trim_fraction(ns, SECOND)}s"


def _trim_fraction(value: int, scale: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = len(str(scale)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")
