# mclab

Monte Carlo simulation exercises in plain Python, with no third-party
dependencies.

## What is inside

- `mclab.rng`: the `Random` class, a 48-bit linear congruential generator
  (RANNYU) whose state is four 12-bit seeds plus two primes. Besides
  `rannyu()` (uniform in [0, 1)) and `uniform(low, high)` it offers
  `gauss`, `exp`, `lorentz`, `choice`, `randint`, `sample_linear_pdf`,
  `gbm_direct` and `gbm_step`. `state()` returns the current seeds and
  `save_seed(path)` writes them to a file. `read_primes`, `read_seed` and
  `from_files` build a generator from a `Primes` file and a `seed.in` file.
- `mclab.stats`: `mean`, `median`, `variance`, `sigma`, `correlation`,
  `std_dev`, `sample_std_dev`, `get_max`, `get_min`, and the blocking method:
  `block_stat(data, n_blocks)` returns a `BlockResult` with the fields
  `averages`, `squared_averages`, `progressive`, `progressive_squared` and
  `errors`. `block_stat_pi` does the same for Buffon-needle estimates of pi.
  `write_progressive` and `write_values` write results as text files.
- `mclab.functions`: `Parabola`, `Cosine` and `Line` (callable, with a
  readable `str()`), and `CallOption` / `PutOption`, Black–Scholes prices
  evaluated at a time `t` in [0, 1] (other times raise `ValueError`).
- `mclab.integration`: `mean_integral` and `importance_sampling`.
- `mclab.position`: the immutable `Position` point with `r`, `phi`, `theta`,
  `rho`, `distance`, addition and division by a number.
- `mclab.randomwalk`: `walk_lattice` and `walk_continuum`, each returning the
  distances from the origin along one walk, and `distances_by_step`.
- `mclab.lesson1` and `mclab.lesson23`: the complete exercises (uniform mean
  and variance, chi-squared test, partial sums of uniform, exponential and
  Lorentzian draws, Buffon's needle, integration, random walks, option
  pricing). `run_lesson1`, `run_lesson2` and `run_lesson3` write their data
  files into a directory and return the paths written.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Seeding

A generator can be built directly or from two files:

- `Primes`: its first two integers are the generator increment.
- `seed.in`: a line `RANDOMSEED s1 s2 s3 s4`; the last such line wins.

```python
from mclab.rng import Random, from_files

rng = from_files("Primes", "seed.in")
rng = Random([0, 0, 0, 1], 2892, 2587)   # or give the values directly
print(rng.rannyu())          # uniform in [0, 1)
print(rng.gauss(0.0, 1.0))   # normal deviate
rng.save_seed("seed.out")    # store the current state
```

## Blocking statistics

```python
from mclab.rng import Random
from mclab.stats import block_stat

rng = Random([0, 0, 0, 1], 2892, 2587)
result = block_stat([rng.rannyu() for _ in range(10_000)], 100)
print(result.progressive[-1], result.errors[-1])
```

## Command line

```
mclab
```

Options:

- `--primes PATH` (default `Primes`) and `--seed PATH` (default `seed.in`):
  the seeding files.
- `--outdir DIR` (default `.`): where the data files go.
- `--seed-out PATH` (default `seed.out`): where the final generator state is
  written.
- `--lesson {1,2,3,all}` (default `all`): which exercises to run.

Lesson 1 writes `Out1.dat`, `Out2.dat`, `Out3.dat`, `Unif`, `Exp`, `Lor` and
`Pi.dat`; lesson 2 writes `Media.dat`, `ImpSampling.dat`, `RWZ3.dat` and
`RWR3.dat`; lesson 3 writes `CallOptionPrice_1.dat`, `PutOptionPrice_1.dat`,
`CallOptionPrice_2.dat` and `PutOptionPrice_2.dat`. The path of each file is
printed as it is written. If the seeding files cannot be read, the command
prints a `PROBLEM:` message and exits with status 1.

The full exercises use large sample sizes and can take a long time in pure
Python.

## What it does not do

The package only produces data files; it does not plot them or analyse them
further.