"""Gregorian calendar and Julian Date conversions."""

import math

from .consts import D1900, DJ00, DJM0, DTY, EPSILON, IYMIN, MTAB

_DJMIN = -68569.5
_DJMAX = 1e9


class CalendarError(ValueError):
    """Raised for an unacceptable date; ``status`` holds the error code."""

    def __init__(self, message, status):
        super().__init__(message)
        self.status = status


def _round_half_away(x):
    """Round to nearest integer, halves away from zero."""
    r = math.floor(x)
    diff = x - r
    if diff > 0.5 or (diff == 0.5 and x > 0.0):
        r += 1
    return float(r)


def cal2jd(iy, im, id):
    """Gregorian calendar date to two-part Modified Julian Date (DJM0, MJD).

    Raises CalendarError with status -1 (bad year), -2 (bad month)
    or -3 (bad day).
    """
    if iy < IYMIN:
        raise CalendarError(f"year {iy} is before {IYMIN}", -1)
    if not 1 <= im <= 12:
        raise CalendarError(f"month {im} is out of range", -2)

    leap = im == 2 and iy % 4 == 0 and (iy % 100 != 0 or iy % 400 == 0)
    if not 1 <= id <= MTAB[im - 1] + int(leap):
        raise CalendarError(f"day {id} is out of range for month {im}", -3)

    my = -1 if im < 3 else 0
    iypmy = iy + my
    djm = (
        (1461 * (iypmy + 4800)) // 4
        + (367 * (im - 2 - 12 * my)) // 12
        - (3 * ((iypmy + 4900) // 100)) // 4
        + id
        - 2432076
    )
    return DJM0, float(djm)


def jd2cal(dj1, dj2):
    """Two-part Julian Date to Gregorian (year, month, day, fraction of day).

    Raises CalendarError with status -1 if the date is out of range.
    """
    dj = dj1 + dj2
    if dj < _DJMIN or dj > _DJMAX:
        raise CalendarError(f"Julian Date {dj} is out of range", -1)

    # Separate day and fraction (where -0.5 <= fraction < 0.5).
    d = _round_half_away(dj1)
    f1 = dj1 - d
    jd = int(d)
    d = _round_half_away(dj2)
    f2 = dj2 - d
    jd += int(d)

    # Compute f1+f2+0.5 using compensated summation (Klein 2006).
    s = 0.5
    cs = 0.0
    for x in (f1, f2):
        t = s + x
        cs += (s - t) + x if abs(s) >= abs(x) else (x - t) + s
        s = t
        if s >= 1.0:
            jd += 1
            s -= 1.0
    f = s + cs
    cs = f - s

    # Deal with negative f.
    if f < 0.0:
        f = s + 1.0
        cs += (1.0 - f) + s
        s = f
        f = s + cs
        cs = f - s
        jd -= 1

    # Deal with f that is 1.0 or more (when rounded to double).
    if (f - 1.0) >= -EPSILON / 4.0:
        t = s - 1.0
        cs += (s - t) - 1.0
        s = t
        f = s + cs
        if -EPSILON / 2.0 < f:
            jd += 1
            f = max(f, 0.0)

    # Express day in Gregorian calendar.
    l = jd + 68569
    n = (4 * l) // 146097
    l -= (146097 * n + 3) // 4
    i = (4000 * (l + 1)) // 1461001
    l -= (1461 * i) // 4 - 31
    k = (80 * l) // 2447
    day = l - (2447 * k) // 80
    l = k // 11
    month = k + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    return year, month, day, f


def epb(dj1, dj2):
    """Two-part Julian Date to Besselian Epoch."""
    return 1900.0 + ((dj1 - DJ00) + (dj2 + D1900)) / DTY