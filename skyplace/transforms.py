"""Quick catalog, CIRS and observed place transformations."""

import math

from .consts import D2PI
from .light import ab, ldsun, pmpx

# Minimum cos(alt) and sin(alt) for refraction purposes.
_CELMIN = 1e-6
_SELMIN = 0.05


def _anp(a):
    """Normalize an angle into the range 0 <= a < 2pi."""
    w = math.fmod(a, D2PI)
    if w < 0.0:
        w += D2PI
    return w


def _c2s(p):
    """Cartesian vector to spherical (theta, phi)."""
    x, y, z = p
    d2 = x * x + y * y
    theta = 0.0 if d2 == 0.0 else math.atan2(y, x)
    phi = 0.0 if z == 0.0 else math.atan2(z, math.sqrt(d2))
    return theta, phi


def _s2c(theta, phi):
    """Spherical coordinates to unit vector."""
    cp = math.cos(phi)
    return (math.cos(theta) * cp, math.sin(theta) * cp, math.sin(phi))


def _rxp(r, p):
    """Product of a 3x3 matrix and a 3-vector."""
    return tuple(sum(rij * pj for rij, pj in zip(row, p)) for row in r)


def atccq(rc, dc, pr, pd, px, rv, astrom):
    """Quick ICRS catalog entry (epoch J2000.0) to ICRS astrometric (RA, Dec).

    Uses the star-independent parameters in ``astrom``; pr is dRA/dt
    (radians/year), px the parallax (arcsec) and rv the radial velocity
    (km/s, positive receding).
    """
    p = pmpx(rc, dc, pr, pd, px, rv, astrom.pmt, astrom.eb)
    w, da = _c2s(p)
    return _anp(w), da


def atciq(rc, dc, pr, pd, px, rv, astrom):
    """Quick ICRS (epoch J2000.0) to CIRS (RA, Dec) transformation.

    Applies proper motion and parallax, light deflection by the Sun,
    aberration and bias-precession-nutation from ``astrom``.
    """
    pco = pmpx(rc, dc, pr, pd, px, rv, astrom.pmt, astrom.eb)
    pnat = ldsun(pco, astrom.eh, astrom.em)
    ppr = ab(pnat, astrom.v, astrom.em, astrom.bm1)
    pi = _rxp(astrom.bpn, ppr)
    w, di = _c2s(pi)
    return _anp(w), di


def atioq(ri, di, astrom):
    """Quick CIRS (RA, Dec) to observed place.

    Returns (azimuth N=0 E=90, zenith distance, hour angle, declination,
    CIO-based right ascension), all in radians.
    """
    x, y, z = _s2c(ri - astrom.eral, di)

    # Polar motion.
    sx, cx = math.sin(astrom.xpl), math.cos(astrom.xpl)
    sy, cy = math.sin(astrom.ypl), math.cos(astrom.ypl)
    xhd = cx * x + sx * z
    yhd = sx * sy * x + cy * y - cx * sy * z
    zhd = -sx * cy * x + sy * y + cx * cy * z

    # Diurnal aberration.
    f = 1.0 - astrom.diurab * yhd
    xhdt = f * xhd
    yhdt = f * (yhd + astrom.diurab)
    zhdt = f * zhd

    # Cartesian -HA,Dec to Cartesian Az,El (S=0,E=90).
    xaet = astrom.sphi * xhdt - astrom.cphi * zhdt
    yaet = yhdt
    zaet = astrom.cphi * xhdt + astrom.sphi * zhdt

    # Azimuth (N=0,E=90).
    azobs = math.atan2(yaet, -xaet) if (xaet != 0.0 or yaet != 0.0) else 0.0

    # Cosine and sine of altitude, with precautions.
    r = max(math.sqrt(xaet * xaet + yaet * yaet), _CELMIN)
    zs = max(zaet, _SELMIN)

    # A*tan(z)+B*tan^3(z) model, with Newton-Raphson correction.
    tz = r / zs
    w = astrom.refb * tz * tz
    delta = (astrom.refa + w) * tz / (1.0 + (astrom.refa + 3.0 * w) / (zs * zs))

    # Apply the change, giving observed vector.
    cosdel = 1.0 - delta * delta / 2.0
    f = cosdel - delta * zs / r
    xaeo = xaet * f
    yaeo = yaet * f
    zaeo = cosdel * zaet + delta * r

    # Observed zenith distance.
    zdobs = math.atan2(math.sqrt(xaeo * xaeo + yaeo * yaeo), zaeo)

    # Az/El vector to HA,Dec vector (both right-handed).
    v = (
        astrom.sphi * xaeo + astrom.cphi * zaeo,
        yaeo,
        -astrom.cphi * xaeo + astrom.sphi * zaeo,
    )
    hmobs, dcobs = _c2s(v)

    # Right ascension with respect to the CIO.
    raobs = astrom.eral + hmobs

    return _anp(azobs), zdobs, -hmobs, dcobs, _anp(raobs)