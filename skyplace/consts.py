"""Angle, time, physical and calendar constants used throughout the package."""

import math
import sys

# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------

DPI = math.pi
D2PI = math.tau

DR2D = 57.29577951308232  # degrees per radian
DD2R = 0.017453292519943295  # radians per degree
DR2AS = 206264.80624709636  # arcseconds per radian
DAS2R = 4.84813681109536e-06  # radians per arcsecond
DS2R = 7.27220521664304e-05  # radians per second of time
DMAS2R = DAS2R * 1e-3  # radians per milliarcsecond

TURNAS = 360.0 * 3600.0  # arcseconds in a full turn

# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

DAYSEC = 24.0 * 3600.0  # SI seconds in a day
DJY = 365.25  # days in a Julian year
DJC = 100.0 * DJY  # days in a Julian century
DJM = 1000.0 * DJY  # days in a Julian millennium
DTY = 365.242198781  # tropical year at B1900, in days

DJ00 = 2_451_545.0  # J2000.0 as a Julian Date
DJM0 = 2_400_000.5  # Julian Date at which MJD is zero
DJM00 = DJ00 - DJM0  # J2000.0 as a Modified Julian Date
DJM77 = 43_144.0  # 1977 January 1.0 as a Modified Julian Date
D1900 = 36_524.68648  # days from B1900.0 (JD 2415019.81352) to J2000.0

TTMTAI = 32.184  # TT - TAI, seconds

# ---------------------------------------------------------------------------
# Physical quantities
# ---------------------------------------------------------------------------

DAU = 149_597_870_700.0  # astronomical unit in metres (IAU 2012)
CMPS = 299_792_458.0  # speed of light, m/s
AULT = DAU / CMPS  # seconds for light to travel 1 au
DC = DAYSEC / AULT  # speed of light in au per day

ELG = 6.969290134e-10  # 1 - d(TT)/d(TCG)
ELB = 1.550519768e-8  # 1 - d(TDB)/d(TCB)
TDB0 = -6.55e-5  # TDB offset in seconds at TAI 1977 January 1.0

SRS = 1.97412574336e-8  # Schwarzschild radius of the Sun, au

# ---------------------------------------------------------------------------
# Reference ellipsoid identifiers
# ---------------------------------------------------------------------------

WGS84, GRS80, WGS72 = 1, 2, 3

# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

IYMIN = -4799  # earliest supported Gregorian year (4800 BC)

# Days in each month of a common (non-leap) year, January first.
MTAB = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# ---------------------------------------------------------------------------
# Numerics
# ---------------------------------------------------------------------------

EPSILON = sys.float_info.epsilon  # spacing of doubles just above 1.0