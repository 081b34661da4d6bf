# skyplace

Fundamental astrometry routines in pure Python. The package depends only
on the standard library.

Angles are in radians throughout. Julian Dates are given in two parts,
which you may split in any way that suits you (for example JD day and
fraction, or 2400000.5 plus an MJD).

## Modules

- `skyplace.consts`: angle, time, physical and calendar constants
  (`DJ00`, `DJM0`, `DAU`, `CMPS`, `SRS`, `DAS2R`, `WGS84`, `MTAB`, ...).
- `skyplace.calendar`
  - `cal2jd(iy, im, id)`: Gregorian date to `(2400000.5, MJD)`.
  - `jd2cal(dj1, dj2)`: two-part Julian Date to
    `(year, month, day, fraction_of_day)`.
  - `epb(dj1, dj2)`: Julian Date to Besselian epoch.
  - `CalendarError` (a `ValueError`) is raised for an unacceptable date.
    Its `status` attribute is -1 for a bad year (or a Julian Date out of
    range in `jd2cal`), -2 for a bad month and -3 for a bad day.
- `skyplace.geodetic`
  - `Ellipsoid`: an `IntEnum` of `WGS84` (1), `GRS80` (2) and `WGS72` (3).
  - `eform(n)`: equatorial radius (m) and flattening of an ellipsoid.
  - `gd2gce(a, f, elong, phi, height)`: geodetic to geocentric `(x, y, z)`
    in metres for the ellipsoid given by `a` and `f`.
  - `gd2gc(n, elong, phi, height)`: the same for a nominated ellipsoid.
  - `GeodeticError` (a `ValueError`) has `status` -1 for an unknown
    ellipsoid (or illegal parameters in `gd2gce`) and -2 for an illegal
    case in `gd2gc`.
- `skyplace.refraction`
  - `refco(phpa, tc, rh, wl)`: refraction constants `(A, B)` for the model
    dZ = A tan Z + B tan³ Z from pressure (hPa), temperature (°C),
    relative humidity (0–1) and wavelength (µm). Wavelengths above 100 µm
    select the radio case. Inputs are clamped to safe ranges; zero
    pressure gives zeros.
- `skyplace.context`
  - `Astrom`: a dataclass holding the star-independent astrometry
    parameters (`pmt`, `eb`, `eh`, `em`, `v`, `bm1`, `bpn`, `along`, `phi`,
    `xpl`, `ypl`, `sphi`, `cphi`, `diurab`, `eral`, `refa`, `refb`). Every
    field defaults to zero.
  - `LdBody`: a dataclass with a body's mass `bm`, deflection limiter `dl`
    and barycentric position/velocity `pv`.
  - `apcs(date1, date2, pv, ebpv, ehp, astrom=None)`: fills in `pmt`, `eb`,
    `eh`, `em`, `v`, `bm1` and sets `bpn` to the identity. Here `pv` is the
    observer's geocentric position/velocity (m, m/s), `ebpv` the Earth's
    barycentric position/velocity (au, au/day) and `ehp` the Earth's
    heliocentric position (au). The other fields are left as they were.
    The function returns the `Astrom`, and makes a new one if you pass none.
  - `apcg(date1, date2, ebpv, ehp, astrom=None)`: the same for a
    geocentric observer, where the geocentric position and velocity are zero.
- `skyplace.light`
  - `pmpx(rc, dc, pr, pd, px, rv, pmt, pob)`: proper motion and parallax,
    giving the BCRS coordinate direction as a unit vector.
  - `ld(bm, p, q, e, em, dlim)`: light deflection by one body.
  - `ldsun(p, e, em)`: light deflection by the Sun.
  - `ab(pnat, v, s, bm1)`: stellar aberration.
- `skyplace.transforms`
  - `atccq(rc, dc, pr, pd, px, rv, astrom)`: ICRS catalog entry to ICRS
    astrometric `(ra, dec)`.
  - `atciq(rc, dc, pr, pd, px, rv, astrom)`: ICRS to CIRS `(ri, di)`.
    This applies proper motion and parallax, deflection by the Sun,
    aberration and the `bpn` matrix.
  - `atioq(ri, di, astrom)`: CIRS to observed
    `(azimuth, zenith_distance, hour_angle, declination, right_ascension)`.
    It uses the `eral`, `xpl`, `ypl`, `sphi`, `cphi`, `diurab`, `refa` and
    `refb` fields of `astrom`.

## Install

    pip install .

## Examples

```python
from skyplace.calendar import cal2jd, jd2cal, epb

djm0, djm = cal2jd(2003, 6, 1)                   # (2400000.5, 52791.0)
iy, im, iday, fd = jd2cal(2400000.5, 50123.9999)  # (1996, 2, 10, ~0.9999)
epoch = epb(2415019.8135, 30103.18648)
```

```python
from skyplace.geodetic import Ellipsoid, gd2gc
from skyplace.refraction import refco

xyz = gd2gc(Ellipsoid.WGS84, 3.1, -0.5, 2500.0)   # metres
refa, refb = refco(800.0, 10.0, 0.9, 0.4)
```

```python
import math
from skyplace.context import apcg
from skyplace.transforms import atciq, atioq

ebpv = [[0.901310875, -0.417402664, -0.180982288],
        [0.00742727954, 0.0140507459, 0.00609045792]]
ehp = [0.903358544, -0.415395237, -0.180084014]
astrom = apcg(2456165.5, 0.401182685, ebpv, ehp)
ri, di = atciq(2.71, 0.174, 1e-5, 5e-6, 0.1, 55.0, astrom)

# The observed-place step reads site fields, which you set yourself.
astrom.eral = 2.6
astrom.sphi, astrom.cphi = math.sin(0.33), math.cos(0.33)
astrom.refa, astrom.refb = refa, refb
aob, zob, hob, dob, rob = atioq(ri, di, astrom)
```

## What the package does not do

- It computes no Earth ephemeris. You supply the Earth's barycentric and
  heliocentric vectors to `apcs` and `apcg`.
- It has no precession-nutation, Earth-rotation or time-scale models (UTC,
  TAI, TT, UT1). `apcs` and `apcg` set `bpn` to the identity. You must set
  `bpn`, and the site and Earth-rotation fields that `atioq` uses, on the
  `Astrom` yourself.
- It does not convert geocentric coordinates back to geodetic.
- It offers no command-line program. It is a library only.

## Tests

    pip install .[test]
    pytest