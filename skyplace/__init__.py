"""Astrometry routines: calendars, geodetic coordinates, refraction, light effects and quick star-place transformations."""

__version__ = "0.1.0"