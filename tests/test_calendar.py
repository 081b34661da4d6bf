import pytest

from skyplace.calendar import CalendarError, cal2jd, epb, jd2cal
from skyplace.consts import D1900, DJ00, DJM0


def test_cal2jd_known_date():
    djm0, djm = cal2jd(2003, 6, 1)
    assert djm0 == DJM0
    assert djm == 52791.0


def test_cal2jd_leap_day_accepted():
    _, leap = cal2jd(2000, 2, 29)
    _, next_day = cal2jd(2000, 3, 1)
    assert next_day - leap == 1.0


@pytest.mark.parametrize(
    "args, status",
    [
        ((-4800, 1, 1), -1),
        ((2000, 0, 1), -2),
        ((2000, 13, 1), -2),
        ((2001, 2, 29), -3),
        ((1900, 2, 29), -3),
        ((2000, 4, 31), -3),
        ((2000, 1, 0), -3),
    ],
)
def test_cal2jd_errors(args, status):
    with pytest.raises(CalendarError) as info:
        cal2jd(*args)
    assert info.value.status == status


def test_cal2jd_consecutive_days():
    _, a = cal2jd(1999, 12, 31)
    _, b = cal2jd(2000, 1, 1)
    assert b - a == 1.0


def test_jd2cal_known_date():
    iy, im, id_, fd = jd2cal(2400000.5, 50123.9999)
    assert (iy, im, id_) == (1996, 2, 10)
    assert fd == pytest.approx(0.9999, abs=1e-7)


@pytest.mark.parametrize(
    "date",
    [(2003, 6, 1), (2000, 2, 29), (1858, 11, 17), (-4712, 1, 1), (2100, 12, 31)],
)
def test_round_trip(date):
    dj1, dj2 = cal2jd(*date)
    iy, im, id_, fd = jd2cal(dj1, dj2)
    assert (iy, im, id_) == date
    assert fd == 0.0


def test_jd2cal_split_independent():
    a = jd2cal(2451545.0, 0.25)
    b = jd2cal(2400000.5, 51544.75)
    assert a[:3] == b[:3]
    assert a[3] == pytest.approx(b[3], abs=1e-9)


def test_jd2cal_fraction_in_range():
    for frac in (0.0, 0.1, 0.49999, 0.5, 0.99999):
        _, _, _, fd = jd2cal(2451545.0, frac)
        assert 0.0 <= fd < 1.0


@pytest.mark.parametrize("dj", [-1e10, 2e9])
def test_jd2cal_out_of_range(dj):
    with pytest.raises(CalendarError) as info:
        jd2cal(dj, 0.0)
    assert info.value.status == -1


def test_epb_known_value():
    assert epb(2415019.8135, 30103.18648) == pytest.approx(1982.418424159278580, abs=1e-12)


def test_epb_b1900():
    assert epb(DJ00, -D1900) == 1900.0


def test_epb_increasing():
    assert epb(DJ00, 1.0) > epb(DJ00, 0.0)