import math

import pytest

from mclab.position import Position


def test_default_is_origin():
    assert Position() == Position(0, 0, 0)
    assert Position().r() == 0.0


def test_radius_of_right_triangle():
    assert math.isclose(Position(3, 4, 0).r(), 5.0)


def test_phi_diagonal():
    assert math.isclose(Position(1, 1, 0).phi(), math.pi / 4)


def test_phi_on_y_axis():
    assert math.isclose(Position(0, 2, 0).phi(), math.pi / 2)
    assert math.isclose(Position(0, -2, 0).phi(), -math.pi / 2)


def test_theta_on_z_axis():
    assert Position(0, 0, 2).theta() == 0.0


def test_theta_of_origin_is_nan():
    assert str(Position().theta()) == "nan"


def test_rho_not_larger_than_r():
    p = Position(1.5, -2.0, 7.0)
    assert p.rho() <= p.r()
    assert math.isclose(Position(1.5, -2.0, 0).rho(), Position(1.5, -2.0, 0).r())


def test_distance_from_origin_is_radius():
    p = Position(2.0, -3.0, 6.0)
    assert math.isclose(p.distance(Position()), p.r())


def test_distance_symmetric():
    p, q = Position(1, 2, 3), Position(-4, 0.5, 2)
    assert p.distance(q) == q.distance(p)
    assert p.distance(p) == 0.0


def test_add_identity_and_halving():
    p = Position(1.0, -2.0, 3.5)
    assert p + Position() == p
    assert (p + p) / 2 == p


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Position(1, 2, 3) + 5


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        Position(1, 2, 3) / 0


def test_immutable():
    p = Position(1, 2, 3)
    with pytest.raises(AttributeError):
        p.x = 5
    assert p.x == 1
    assert p == Position(1, 2, 3)