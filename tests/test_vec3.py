import json
import math

import pytest

from bedrockdefs.vec3 import Vec3

NAN = float("nan")


def test_default_is_zero():
    assert Vec3() == Vec3.ZERO


def test_add_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(-4.0, 0.5, 10.0)
    assert (a + b) - b == a
    assert a + Vec3.ZERO == a
    assert a - a == Vec3.ZERO


def test_add_is_commutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(7.0, -8.0, 9.5)
    assert a + b == b + a


def test_augmented_add_rebinds():
    a = Vec3(1.0, 1.0, 1.0)
    original = a
    a += Vec3(2.0, 3.0, 4.0)
    assert a == Vec3(3.0, 4.0, 5.0)
    assert original == Vec3(1.0, 1.0, 1.0)


def test_scalar_multiply():
    a = Vec3(1.0, -2.0, 0.5)
    assert a * 2 == Vec3(2.0, -4.0, 1.0)
    assert 2 * a == a * 2
    b = a
    b *= 0
    assert b == Vec3.ZERO


def test_scalar_multiply_scales_length():
    a = Vec3(3.0, 4.0, 12.0)
    assert (a * 3.0).length() == pytest.approx(a.length() * 3.0)


def test_multiply_by_vector_rejected():
    with pytest.raises(TypeError):
        Vec3(1.0, 1.0, 1.0) * Vec3(1.0, 1.0, 1.0)


def test_equality_with_nan():
    v = Vec3(NAN, 0.0, 0.0)
    assert v.is_nan()
    assert (v == v) is False
    assert (Vec3(1.0, 2.0, 3.0) + Vec3.ZERO == Vec3(1.0, 2.0, 3.0)) is True


def test_length_matches_hypot():
    v = Vec3(2.0, -3.0, 6.0)
    assert v.length() == pytest.approx(math.hypot(2.0, -3.0, 6.0))


@pytest.mark.parametrize("v", [Vec3(1.0, 2.0, 3.0), Vec3(-0.01, 0.0, 0.0), Vec3(100.0, -5.0, 0.2)])
def test_normalized_unit_length(v):
    assert v.normalized().length() == pytest.approx(1.0)


def test_normalized_short_vector_is_zero():
    assert Vec3(0.00005, 0.0, 0.0).normalized() == Vec3.ZERO
    assert Vec3.ZERO.normalized() == Vec3.ZERO


@pytest.mark.parametrize("x, y, z", [(1.0, 5.0, 3.0), (-1.0, -5.0, -3.0), (9.0, 9.0, 0.0)])
def test_max_component(x, y, z):
    m = Vec3(x, y, z).max_component()
    assert m in (x, y, z)
    assert all(m >= c for c in (x, y, z))


def test_is_near():
    a = Vec3(1.0, 2.0, 3.0)
    assert a.is_near(Vec3(1.05, 1.95, 3.0), 0.1)
    assert not a.is_near(Vec3(1.0, 2.0, 3.2), 0.1)
    assert not a.is_near(a, 0.0)


def test_is_nan():
    assert Vec3(0.0, NAN, 0.0).is_nan()
    assert not Vec3(1.0, 2.0, 3.0).is_nan()


def test_str_format():
    assert str(Vec3(1.0, -2.5, 0.0)) == "Vec3(1, -2.5, 0)"


def test_to_json_format():
    assert Vec3(1.0, 2.0, 3.5).to_json() == "[1, 2, 3.5]"


def test_to_json_parses_back():
    v = Vec3(-4.25, 8.0, 0.125)
    assert json.loads(v.to_json()) == [v.x, v.y, v.z]


def test_from_xz():
    src = Vec3(4.0, 99.0, -6.0)
    r = Vec3.from_xz(src, 12.0)
    assert (r.x, r.y, r.z) == (src.x, 12.0, src.z)


@pytest.mark.parametrize("pitch, yaw", [(0.0, 0.0), (30.0, 45.0), (-60.0, 190.0), (89.0, -120.0)])
def test_direction_from_rotation_is_unit(pitch, yaw):
    assert Vec3.direction_from_rotation(pitch, yaw).length() == pytest.approx(1.0)


def test_direction_from_rotation_vec_matches():
    assert Vec3.direction_from_rotation_vec(Vec3(20.0, 75.0, 5.0)) == Vec3.direction_from_rotation(20.0, 75.0)


def test_direction_pitch_sign():
    # Positive pitch looks down, negative pitch looks up.
    assert Vec3.direction_from_rotation(45.0, 0.0).y < 0
    assert Vec3.direction_from_rotation(-45.0, 0.0).y > 0


@pytest.mark.parametrize("pitch", [-80.0, -30.0, 0.0, 15.0, 70.0])
def test_pitch_round_trip(pitch):
    direction = Vec3.direction_from_rotation(pitch, 33.0)
    rot = Vec3.rotation_from_direction(direction)
    assert rot.x == pytest.approx(pitch, abs=1e-4)
    assert rot.z == 0.0


def test_rotation_from_direction_ignores_length():
    d = Vec3(1.0, 2.0, -3.0)
    a = Vec3.rotation_from_direction(d)
    b = Vec3.rotation_from_direction(d * 5.0)
    assert a.x == pytest.approx(b.x, abs=1e-9)
    assert a.y == pytest.approx(b.y, abs=1e-9)
    assert a.z == b.z == 0.0


def test_clamp_within_bounds():
    low = Vec3(-1.0, -1.0, -1.0)
    high = Vec3(1.0, 1.0, 1.0)
    r = Vec3.clamp(Vec3(-5.0, 0.5, 7.0), low, high)
    assert r == Vec3(low.x, 0.5, high.z)


def test_clamp_identity_inside():
    v = Vec3(0.2, -0.3, 0.4)
    assert Vec3.clamp(v, Vec3(-1.0, -1.0, -1.0), Vec3(1.0, 1.0, 1.0)) == v


def test_floor_and_ceil_bracket():
    v = Vec3(1.5, -2.5, 3.0)
    f = Vec3.floor(v)
    c = Vec3.ceil(v)
    for lo, val, hi in zip(f, v, c):
        assert lo <= val <= hi
        assert lo == int(lo) and hi == int(hi)
        assert hi - lo <= 1.0


def test_floor_offset():
    v = Vec3(0.6, -0.6, 2.4)
    assert Vec3.floor(v, 0.5) == Vec3.floor(v + Vec3(0.5, 0.5, 0.5))


def test_floor_keeps_nan_and_inf():
    r = Vec3.floor(Vec3(NAN, math.inf, -math.inf))
    assert math.isnan(r.x)
    assert r.y == math.inf and r.z == -math.inf


def test_abs():
    v = Vec3(-1.0, 2.0, -3.5)
    r = Vec3.abs(v)
    assert all(c >= 0 for c in r)
    assert r == Vec3.abs(v * -1.0)


def test_xz():
    r = Vec3.xz(Vec3(3.0, 8.0, -2.0))
    assert r == Vec3(3.0, 0.0, -2.0)


def test_distance_to_line_point_on_line():
    a = Vec3(0.0, 0.0, 0.0)
    b = Vec3(1.0, 1.0, 1.0)
    p = Vec3(5.0, 5.0, 5.0)
    assert Vec3.distance_to_line_squared(p, a, b) == pytest.approx(0.0, abs=1e-12)


def test_distance_to_line_perpendicular():
    a = Vec3(0.0, 0.0, 0.0)
    b = Vec3(10.0, 0.0, 0.0)
    p = Vec3(4.0, 3.0, 0.0)
    assert Vec3.distance_to_line_squared(p, a, b) == pytest.approx(9.0)


def test_distance_to_line_translation_invariant():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, -1.0, 2.0)
    p = Vec3(0.5, 7.0, -2.0)
    shift = Vec3(10.0, -3.0, 5.0)
    d1 = Vec3.distance_to_line_squared(p, a, b)
    d2 = Vec3.distance_to_line_squared(p + shift, a + shift, b + shift)
    assert d1 == pytest.approx(d2)


def test_distance_to_degenerate_line_is_plain_distance():
    a = Vec3(1.0, 1.0, 1.0)
    p = Vec3(3.0, 4.0, 1.0)
    assert Vec3.distance_to_line_squared(p, a, a) == pytest.approx((p - a).length())


def test_is_immutable():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.z = 0.0
    assert v.z == 3.0
    assert v.to_json() == "[1, 2, 3]"