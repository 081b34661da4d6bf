"""Proper motion, parallax, light deflection and stellar aberration."""

import math

from .consts import AULT, DAS2R, DAU, DAYSEC, DJM, DJY, SRS


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _unit(p):
    modulus = math.sqrt(_dot(p, p))
    if modulus == 0.0:
        return (0.0, 0.0, 0.0)
    return tuple(c / modulus for c in p)


def ab(pnat, v, s, bm1):
    """Apply stellar aberration, turning natural direction into proper direction.

    pnat is the natural direction to the source (unit vector), v the observer
    barycentric velocity in units of c, s the Sun-observer distance (au) and
    bm1 the reciprocal of the Lorentz factor.  Returns a unit vector.
    """
    pdv = _dot(pnat, v)
    w1 = 1.0 + pdv / (1.0 + bm1)
    w2 = SRS / s
    p = tuple(
        pn * bm1 + w1 * vi + w2 * (vi - pdv * pn) for pn, vi in zip(pnat, v)
    )
    r = math.sqrt(_dot(p, p))
    return tuple(c / r for c in p)


def ld(bm, p, q, e, em, dlim):
    """Apply light deflection by a single solar-system body.

    bm is the body's mass (solar masses), p the observer-to-source direction,
    q the body-to-source direction, e the body-to-observer direction (all unit
    vectors), em the body-observer distance (au) and dlim the deflection
    limiter.  Returns the deflected direction (not renormalized).
    """
    qpe = tuple(qi + ei for qi, ei in zip(q, e))
    qdqpe = _dot(q, qpe)
    w = bm * SRS / em / max(qdqpe, dlim)
    peq = _cross(p, _cross(e, q))
    return tuple(pi + w * c for pi, c in zip(p, peq))


def ldsun(p, e, em):
    """Deflection of starlight by the Sun.

    p is the observer-to-star direction, e the Sun-to-observer direction
    (unit vectors) and em the Sun-observer distance (au).
    """
    em2 = max(em * em, 1.0)
    dlim = 1e-6 / em2
    return ld(1.0, p, p, e, em, dlim)


def pmpx(rc, dc, pr, pd, px, rv, pmt, pob):
    """Apply proper motion and parallax, giving the BCRS coordinate direction.

    rc, dc are the catalog RA, Dec (radians), pr, pd the proper motions
    (radians/year, pr being dRA/dt), px the parallax (arcsec), rv the radial
    velocity (km/s, positive receding), pmt the proper motion time interval
    (Julian years) and pob the SSB-to-observer vector (au).
    """
    vf = DAYSEC * DJM / DAU  # km/s to au/year
    aulty = AULT / DAYSEC / DJY  # light time for 1 au, Julian years

    sr, cr = math.sin(rc), math.cos(rc)
    sd, cd = math.sin(dc), math.cos(dc)
    x = cr * cd
    y = sr * cd
    z = sd
    p = (x, y, z)

    # Proper motion time interval including Roemer effect.
    dt = pmt + _dot(p, pob) * aulty

    # Space motion (radians per year).
    pxr = px * DAS2R
    w = vf * rv * pxr
    pdz = pd * z
    pm = (
        -pr * y - pdz * cr + w * x,
        pr * x - pdz * sr + w * y,
        pd * cd + w * z,
    )

    moved = tuple(pi + dt * mi - pxr * oi for pi, mi, oi in zip(p, pm, pob))
    return _unit(moved)