"""Atmospheric refraction constants."""

import math


def refco(phpa, tc, rh, wl):
    """Refraction constants (A, B) for the model dZ = A tan Z + B tan^3 Z.

    phpa is pressure (hPa), tc temperature (deg C), rh relative humidity
    (0-1) and wl wavelength (micrometres); wl above 100 selects radio.
    """
    optic = wl <= 100.0

    t = min(max(tc, -150.0), 200.0)
    p = min(max(phpa, 0.0), 10000.0)
    r = min(max(rh, 0.0), 1.0)
    w = min(max(wl, 0.1), 1e6)

    # Water vapour pressure at the observer.
    if p > 0.0:
        ps = math.pow(10.0, (0.7859 + 0.03477 * t) / (1.0 + 0.00412 * t)) * (
            1.0 + p * (4.5e-6 + 6e-10 * t * t)
        )
        pw = r * ps / (1.0 - (1.0 - r) * ps / p)
    else:
        pw = 0.0

    # Refractive index minus 1 at the observer.
    tk = t + 273.15
    if optic:
        wlsq = w * w
        gamma = (
            (77.53484e-6 + (4.39108e-7 + 3.666e-9 / wlsq) / wlsq) * p
            - 11.2684e-6 * pw
        ) / tk
    else:
        gamma = (77.6890e-6 * p - (6.3938e-6 - 0.375463 / tk) * pw) / tk

    # Formula for beta from Stone, with empirical adjustments.
    beta = 4.4474e-6 * tk
    if not optic:
        beta -= 0.0074 * pw * beta

    # Refraction constants from Green.
    refa = gamma * (1.0 - beta)
    refb = -gamma * (beta - gamma / 2.0)
    return refa, refb