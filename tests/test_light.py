import math

import pytest

from skyplace.light import ab, ld, ldsun, pmpx


def _norm(p):
    return math.sqrt(sum(c * c for c in p))


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _unit(p):
    n = _norm(p)
    return tuple(c / n for c in p)


PNAT = _unit((-0.763219685467, -0.608694539830, -0.216764085806))
VEL = (2.1044018893653786e-5, -8.9108923304429319e-5, -3.8633714797716569e-5)


def test_ab_zero_velocity_leaves_direction():
    out = ab(PNAT, (0.0, 0.0, 0.0), 1.0, 1.0)
    assert out == pytest.approx(PNAT, abs=1e-15)


def test_ab_result_is_unit_vector():
    bm1 = math.sqrt(1.0 - _dot(VEL, VEL))
    out = ab(PNAT, VEL, 0.9998, bm1)
    assert _norm(out) == pytest.approx(1.0, abs=1e-14)


def test_ab_shifts_towards_velocity():
    bm1 = math.sqrt(1.0 - _dot(VEL, VEL))
    out = ab(PNAT, VEL, 0.9998, bm1)
    vhat = _unit(VEL)
    assert _dot(out, vhat) > _dot(PNAT, vhat)
    # Aberration is of order |v|, i.e. tens of microradians.
    shift = _norm(tuple(a - b for a, b in zip(out, PNAT)))
    assert 0.0 < shift < 2e-4


def test_ld_zero_mass_no_deflection():
    p = _unit((0.3, 0.4, 0.5))
    q = _unit((0.2, 0.4, 0.6))
    e = _unit((0.9, -0.1, 0.1))
    assert ld(0.0, p, q, e, 1.0, 1e-6) == pytest.approx(p, abs=0.0)


def test_ld_deflection_is_perpendicular_to_p():
    p = _unit((-0.7632, -0.6087, -0.2168))
    q = _unit((-0.7632, -0.6087, -0.2169))
    e = _unit((0.7644, 0.5927, 0.2569))
    p1 = ld(0.00028574, p, q, e, 8.91276983, 3e-10)
    assert _dot(p1, p) == pytest.approx(1.0, abs=1e-15)
    assert p1 != pytest.approx(p, abs=1e-20)


def test_ld_parallel_body_and_observer_gives_no_deflection():
    p = _unit((1.0, 2.0, 3.0))
    q = (0.0, 0.0, 1.0)
    e = (0.0, 0.0, 1.0)
    assert ld(1.0, p, q, e, 1.0, 1e-6) == pytest.approx(p, abs=1e-17)


@pytest.mark.parametrize("em", [0.3, 0.5, 1.0])
def test_ldsun_limiter_clamped_near_sun(em):
    p = _unit((-0.76, -0.61, -0.22))
    e = _unit((-0.97, -0.21, -0.09))
    assert ldsun(p, e, em) == pytest.approx(ld(1.0, p, p, e, em, 1e-6), abs=0.0)


def test_ldsun_limiter_shrinks_for_distant_observer():
    p = _unit((-0.76, -0.61, -0.22))
    e = _unit((-0.97, -0.21, -0.09))
    em = 2.0
    assert ldsun(p, e, em) == pytest.approx(
        ld(1.0, p, p, e, em, 1e-6 / (em * em)), abs=0.0
    )


def test_ldsun_deflection_small_and_nearly_unit():
    p = _unit((-0.76, -0.61, -0.22))
    e = _unit((-0.97, -0.21, -0.09))
    p1 = ldsun(p, e, 1.4)
    assert _norm(p1) == pytest.approx(1.0, abs=1e-12)
    diff = _norm(tuple(a - b for a, b in zip(p1, p)))
    assert 0.0 < diff < 1e-6


def test_pmpx_reference_values():
    pco = pmpx(1.234, 0.789, 1e-5, -2e-5, 1e-2, 10.0, 8.75, (0.9, 0.4, 0.1))
    assert pco[0] == pytest.approx(0.2328137623960308438, abs=1e-12)
    assert pco[1] == pytest.approx(0.6651097085397855328, abs=1e-12)
    assert pco[2] == pytest.approx(0.7095257765896359837, abs=1e-12)


def test_pmpx_no_motion_gives_catalog_direction():
    rc, dc = 1.234, 0.789
    pco = pmpx(rc, dc, 0.0, 0.0, 0.0, 0.0, 10.0, (0.9, 0.4, 0.1))
    expected = (
        math.cos(rc) * math.cos(dc),
        math.sin(rc) * math.cos(dc),
        math.sin(dc),
    )
    assert pco == pytest.approx(expected, abs=1e-15)


def test_pmpx_parallax_with_observer_at_barycentre_is_null():
    rc, dc = 2.0, -0.4
    pco = pmpx(rc, dc, 0.0, 0.0, 0.5, 0.0, 0.0, (0.0, 0.0, 0.0))
    expected = (
        math.cos(rc) * math.cos(dc),
        math.sin(rc) * math.cos(dc),
        math.sin(dc),
    )
    assert pco == pytest.approx(expected, abs=1e-15)


def test_pmpx_dec_proper_motion_moves_north():
    rc, dc = 0.5, 0.1
    pco = pmpx(rc, dc, 0.0, 1e-6, 0.0, 0.0, 100.0, (0.0, 0.0, 0.0))
    assert _norm(pco) == pytest.approx(1.0, abs=1e-15)
    assert math.asin(pco[2]) == pytest.approx(dc + 1e-4, abs=1e-9)
    assert math.atan2(pco[1], pco[0]) == pytest.approx(rc, abs=1e-12)