import pytest

from mclab.randomwalk import distances_by_step, walk_continuum, walk_lattice
from mclab.rng import Random


def make_rng():
    return Random((0, 0, 0, 1), 2892, 2587)


@pytest.mark.parametrize("walker", [walk_lattice, walk_continuum])
def test_walk_length_and_start(walker):
    distances = walker(50, make_rng())
    assert len(distances) == 50
    assert distances[0] == 0.0


@pytest.mark.parametrize("walker", [walk_lattice, walk_continuum])
def test_walk_steps_are_at_most_unit(walker):
    distances = walker(80, make_rng())
    for before, after in zip(distances, distances[1:]):
        assert abs(after - before) <= 1.0 + 1e-12


def test_lattice_distances_have_integer_squares():
    for d in walk_lattice(60, make_rng()):
        assert d * d == pytest.approx(round(d * d), abs=1e-9)


def test_lattice_first_step_is_unit():
    assert walk_lattice(5, make_rng())[1] == pytest.approx(1.0)


def test_continuum_first_step_is_unit():
    assert walk_continuum(5, make_rng())[1] == pytest.approx(1.0)


@pytest.mark.parametrize("walker", [walk_lattice, walk_continuum])
def test_walk_is_reproducible(walker):
    first = walker(30, make_rng())
    second = walker(30, make_rng())
    assert len(first) == 30
    assert first[0] == 0.0
    assert second == first


@pytest.mark.parametrize("walker", [walk_lattice, walk_continuum])
def test_empty_walk(walker):
    assert walker(0, make_rng()) == []


def test_distances_by_step_transposes():
    assert distances_by_step([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_distances_by_step_rejects_unequal_walks():
    with pytest.raises(ValueError):
        distances_by_step([[1, 2, 3], [4, 5]])