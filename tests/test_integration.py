import math

import pytest

from mclab.functions import Cosine, Line
from mclab.integration import importance_sampling, mean_integral
from mclab.rng import Random


def make_rng():
    return Random((0, 0, 0, 1), 2892, 2587)


def test_mean_integral_of_constant():
    assert mean_integral(lambda x: 3.0, 0.0, 2.0, 100, make_rng()) == 6.0


def test_mean_integral_of_cosine_converges():
    f = Cosine(math.pi / 2, math.pi / 2, 0.0, 0.0)
    assert mean_integral(f, 0.0, 1.0, 10000, make_rng()) == pytest.approx(1.0, abs=0.05)


def test_mean_integral_is_reproducible():
    f = Cosine(math.pi / 2, math.pi / 2, 0.0, 0.0)
    first = mean_integral(f, 0.0, 1.0, 500, make_rng())
    second = mean_integral(f, 0.0, 1.0, 500, make_rng())
    assert first == second


def test_mean_integral_draws_one_number_per_point():
    rng = make_rng()
    twin = make_rng()
    mean_integral(lambda x: x, 0.0, 1.0, 37, rng)
    for _ in range(37):
        twin.rannyu()
    assert rng.state() == twin.state()


@pytest.mark.parametrize("points", [0, -5])
def test_mean_integral_rejects_bad_points(points):
    with pytest.raises(ValueError):
        mean_integral(lambda x: x, 0.0, 1.0, points, make_rng())


def test_importance_sampling_with_equal_function_and_pdf():
    pdf = Line(-2.0, 2.0)
    assert importance_sampling(pdf, pdf, 0.0, 1.0, 200, make_rng()) == pytest.approx(1.0)


def test_importance_sampling_draws_one_number_per_point():
    rng = make_rng()
    twin = make_rng()
    pdf = Line(-2.0, 2.0)
    importance_sampling(Cosine(1.0, 1.0, 0.0, 0.0), pdf, 0.0, 1.0, 25, rng)
    for _ in range(25):
        twin.rannyu()
    assert rng.state() == twin.state()


def test_importance_sampling_rejects_bad_points():
    pdf = Line(-2.0, 2.0)
    with pytest.raises(ValueError):
        importance_sampling(pdf, pdf, 0.0, 1.0, 0, make_rng())