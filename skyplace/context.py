"""Star-independent astrometry parameters and their preparation."""

import math
from dataclasses import dataclass, field

from .consts import AULT, DAU, DAYSEC, DJ00, DJY

_ZERO3 = (0.0, 0.0, 0.0)
_IDENTITY = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def _zero_matrix():
    return (_ZERO3, _ZERO3, _ZERO3)


@dataclass
class Astrom:
    """Star-independent astrometry parameters.

    Vectors are with respect to BCRS axes.
    """

    pmt: float = 0.0
    """PM time interval (SSB, Julian years)."""
    eb: tuple = _ZERO3
    """SSB to observer (vector, au)."""
    eh: tuple = _ZERO3
    """Sun to observer (unit vector)."""
    em: float = 0.0
    """Distance from Sun to observer (au)."""
    v: tuple = _ZERO3
    """Barycentric observer velocity (vector, c)."""
    bm1: float = 0.0
    """sqrt(1-|v|^2): reciprocal of Lorenz factor."""
    bpn: tuple = field(default_factory=_zero_matrix)
    """Bias-precession-nutation matrix."""
    along: float = 0.0
    """Longitude + s' + dERA(DUT) (radians)."""
    phi: float = 0.0
    """Geodetic latitude (radians)."""
    xpl: float = 0.0
    """Polar motion xp with respect to local meridian (radians)."""
    ypl: float = 0.0
    """Polar motion yp with respect to local meridian (radians)."""
    sphi: float = 0.0
    """Sine of geodetic latitude."""
    cphi: float = 0.0
    """Cosine of geodetic latitude."""
    diurab: float = 0.0
    """Magnitude of diurnal aberration vector."""
    eral: float = 0.0
    """"Local" Earth rotation angle (radians)."""
    refa: float = 0.0
    """Refraction constant A (radians)."""
    refb: float = 0.0
    """Refraction constant B (radians)."""


@dataclass
class LdBody:
    """Body parameters for light deflection."""

    bm: float = 0.0
    """Mass of the body (solar masses)."""
    dl: float = 0.0
    """Deflection limiter (radians^2/2)."""
    pv: tuple = (_ZERO3, _ZERO3)
    """Barycentric position/velocity of the body (au, au/day)."""


def _modulus_and_direction(p):
    modulus = math.sqrt(sum(c * c for c in p))
    if modulus == 0.0:
        return 0.0, _ZERO3
    return modulus, tuple(c / modulus for c in p)


def apcs(date1, date2, pv, ebpv, ehp, astrom=None):
    """Prepare ICRS <-> GCRS parameters for an observer with known geocentric pv.

    date1 + date2 is the TDB Julian Date; pv is the observer's geocentric
    position/velocity (m, m/s); ebpv the Earth barycentric position/velocity
    (au, au/day); ehp the Earth heliocentric position (au).  Fills in pmt, eb,
    eh, em, v, bm1 and bpn (reset to identity) of ``astrom``, leaving the other
    fields untouched, and returns it.  A new Astrom is made if none is given.
    """
    if astrom is None:
        astrom = Astrom()

    audms = DAU / DAYSEC  # au/d to m/s
    cr = AULT / DAYSEC  # light time for 1 au (day)

    astrom.pmt = ((date1 - DJ00) + date2) / DJY

    dp = [c / DAU for c in pv[0]]
    dv = [c / audms for c in pv[1]]
    pb = tuple(e + d for e, d in zip(ebpv[0], dp))
    vb = tuple(e + d for e, d in zip(ebpv[1], dv))
    ph = tuple(e + d for e, d in zip(ehp, dp))

    astrom.eb = pb
    astrom.em, astrom.eh = _modulus_and_direction(ph)

    v = tuple(c * cr for c in vb)
    astrom.v = v
    astrom.bm1 = math.sqrt(1.0 - sum(c * c for c in v))

    astrom.bpn = _IDENTITY
    return astrom


def apcg(date1, date2, ebpv, ehp, astrom=None):
    """Prepare ICRS <-> GCRS parameters for a geocentric observer.

    Same as :func:`apcs` with zero geocentric position and velocity.
    """
    return apcs(date1, date2, (_ZERO3, _ZERO3), ebpv, ehp, astrom)