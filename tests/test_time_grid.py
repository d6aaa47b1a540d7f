import numpy as np
import pytest

from dsystrace.time_grid import TimeGrid, compute_step_count


@pytest.mark.parametrize(
    "dt, tmax",
    [(0.1, 0.2), (0.1, 1.0), (0.25, 1.0), (0.1, 0.3), (0.01, 5.0), (1.0, 0.0), (0.5, 0.4), (3.0, 10.0)],
)
def test_grid_length_and_values(dt, tmax):
    grid = TimeGrid(dt, tmax)

    assert grid.step_count == int(tmax / dt) + 1
    assert len(grid.times) == grid.step_count
    assert grid.times[0] == 0.0
    for i in range(grid.step_count):
        assert grid.times[i] == i * dt
    assert np.all(np.diff(grid.times) > 0)


def test_degenerate_end_time_gives_single_point():
    grid = TimeGrid(0.5, 0.2)
    assert grid.step_count == 1
    np.testing.assert_array_equal(grid.times, [0.0])
    assert grid.capacity == 2


def test_step_count_follows_floating_point_division():
    # 0.3 / 0.1 evaluates just below 3
    assert compute_step_count(0.1, 0.3) == 3
    assert compute_step_count(0.1, 0.2) == 3


@pytest.mark.parametrize("dt, tmax", [(0.0, 1.0), (-0.1, 1.0), (0.1, -1.0), (float("nan"), 1.0), (0.1, float("inf"))])
def test_invalid_parameters_raise(dt, tmax):
    with pytest.raises(ValueError):
        TimeGrid(dt, tmax)


def test_failed_reconfigure_keeps_previous_grid():
    grid = TimeGrid(0.1, 1.0)
    with pytest.raises(ValueError):
        grid.configure(-1.0, 2.0)
    assert grid.dt == 0.1
    assert grid.step_count == 11


def test_reconfigure_recomputes_everything():
    grid = TimeGrid(0.1, 1.0)
    grid.configure(0.5, 2.0)
    assert grid.step_count == 5
    np.testing.assert_array_equal(grid.times, [0.0, 0.5, 1.0, 1.5, 2.0])


def test_unconfigured_grid():
    grid = TimeGrid()
    assert not grid.ready
    assert len(grid) == 0
    assert "unconfigured" in repr(grid)
