import pytest

from mclab.stats import (
    BlockResult,
    block_stat,
    block_stat_pi,
    correlation,
    get_max,
    get_min,
    mean,
    median,
    needle_crosses,
    progressive_error,
    sample_std_dev,
    sigma,
    std_dev,
    variance,
    write_progressive,
    write_values,
)

DATA = [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0]


def test_mean_of_constant():
    assert mean([7.0] * 5) == 7.0


def test_mean_empty_raises():
    with pytest.raises(ValueError):
        mean([])


def test_median_odd_picks_middle():
    assert median([9.0, 1.0, 5.0]) == 5.0


def test_median_even_averages_central_pair():
    values = sorted(DATA)
    assert median(DATA) == (values[3] + values[4]) / 2


def test_median_does_not_modify_input():
    data = list(DATA)
    median(data)
    assert data == DATA


def test_variance_of_constant_is_zero():
    assert variance([2.5] * 10) == 0.0


def test_std_dev_squares_to_variance():
    assert std_dev(DATA) ** 2 == pytest.approx(variance(DATA))


def test_sigma_matches_std_dev():
    assert sigma(DATA) == pytest.approx(std_dev(DATA))


def test_sample_std_dev_relation():
    n = len(DATA)
    assert sample_std_dev(DATA) ** 2 * (n - 1) == pytest.approx(variance(DATA) * n)


def test_sample_std_dev_needs_two_values():
    with pytest.raises(ValueError):
        sample_std_dev([1.0])


def test_correlation_linear():
    x = [float(i) for i in range(50)]
    assert correlation(x, [2 * v + 1 for v in x]) == pytest.approx(1.0)
    assert correlation(x, [-v for v in x]) == pytest.approx(-1.0)


def test_get_max_never_below_zero():
    assert get_max([-3.0, -1.0]) == 0.0
    assert get_max(DATA) == max(DATA)


def test_get_min_never_above_zero():
    assert get_min([3.0, 1.0]) == 0.0
    assert get_min([-3.0, 1.0]) == -3.0


def test_progressive_error_first_block_is_zero():
    assert progressive_error([5.0], [30.0], 0) == 0.0


def test_block_stat_shapes_and_final_mean():
    result = block_stat(DATA, 4)
    assert isinstance(result, BlockResult)
    assert len(result.averages) == len(result.errors) == 4
    assert result.averages == [mean(DATA[i : i + 2]) for i in range(0, 8, 2)]
    assert result.progressive[-1] == pytest.approx(mean(DATA))
    assert result.progressive[0] == result.averages[0]
    assert result.errors[0] == 0.0
    assert all(e >= 0 for e in result.errors[1:])


def test_block_stat_squared_averages():
    result = block_stat(DATA, 2)
    assert result.squared_averages == [a**2 for a in result.averages]


def test_block_stat_too_many_blocks():
    with pytest.raises(ValueError):
        block_stat([1.0, 2.0], 3)


@pytest.mark.parametrize(
    "x2, expected", [(1.2, True), (0.7, False), (-0.1, True)]
)
def test_needle_crosses(x2, expected):
    assert needle_crosses(0.5, x2, 0.0) is expected


def test_block_stat_pi_all_hits():
    n = 6
    result = block_stat_pi(3, 0.5, 2, [0.5] * n, [2.0] * n, [0.1] * n)
    assert result.averages == [1.0, 1.0, 1.0]
    assert result.errors == [0.0, 0.0, 0.0]


def test_block_stat_pi_no_hits_is_infinite():
    result = block_stat_pi(1, 0.5, 2, [0.5, 0.5], [0.6, 0.6], [0.1, 0.1])
    assert result.averages[0] == float("inf")


def test_block_stat_pi_short_input():
    with pytest.raises(IndexError):
        block_stat_pi(2, 0.5, 2, [0.5], [2.0], [0.1])


def test_write_progressive(tmp_path):
    path = tmp_path / "out.dat"
    write_progressive(path, [0.5, 0.25], [0.0, 0.125], 2)
    assert path.read_text() == "0 0.5 0\n1 0.25 0.125\n"


def test_write_progressive_size_too_large(tmp_path):
    with pytest.raises(IndexError):
        write_progressive(tmp_path / "out.dat", [0.5], [0.0], 2)


def test_write_values(tmp_path):
    path = tmp_path / "v.dat"
    write_values(path, [0.5, 1e-05, 3.0])
    assert path.read_text() == "0.5\n1e-05\n3\n"