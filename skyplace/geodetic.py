"""Reference ellipsoids and geodetic to geocentric conversion."""

import enum
import math

from .consts import GRS80, WGS72, WGS84


class Ellipsoid(enum.IntEnum):
    """Earth reference ellipsoids."""

    WGS84 = WGS84
    GRS80 = GRS80
    WGS72 = WGS72


class GeodeticError(ValueError):
    """Raised for invalid geodetic input; ``status`` holds the error code."""

    def __init__(self, message, status):
        super().__init__(message)
        self.status = status


_ELLIPSOIDS = {
    Ellipsoid.WGS84: (6378137.0, 1.0 / 298.257223563),
    Ellipsoid.GRS80: (6378137.0, 1.0 / 298.257222101),
    Ellipsoid.WGS72: (6378135.0, 1.0 / 298.26),
}


def eform(n):
    """Equatorial radius (m) and flattening of a nominated ellipsoid.

    Raises GeodeticError with status -1 for an unknown identifier.
    """
    try:
        return _ELLIPSOIDS[Ellipsoid(n)]
    except ValueError:
        raise GeodeticError(f"unknown ellipsoid identifier {n!r}", -1) from None


def gd2gce(a, f, elong, phi, height):
    """Geodetic to geocentric (x, y, z) in metres for ellipsoid a, f.

    Raises GeodeticError with status -1 for an illegal case.
    """
    sp = math.sin(phi)
    cp = math.cos(phi)
    w = (1.0 - f) ** 2
    d = cp * cp + w * sp * sp
    if d <= 0.0:
        raise GeodeticError("illegal ellipsoid parameters", -1)
    ac = a / math.sqrt(d)
    as_ = w * ac

    r = (ac + height) * cp
    return (r * math.cos(elong), r * math.sin(elong), (as_ + height) * sp)


def gd2gc(n, elong, phi, height):
    """Geodetic to geocentric (x, y, z) in metres for a nominated ellipsoid.

    Raises GeodeticError with status -1 for an unknown ellipsoid and
    -2 for an illegal case.
    """
    a, f = eform(n)
    try:
        return gd2gce(a, f, elong, phi, height)
    except GeodeticError:
        raise GeodeticError("illegal case for geodetic conversion", -2) from None