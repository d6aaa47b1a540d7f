import matplotlib.pyplot as plt
import numpy as np
import pytest

from dsystrace import TrajectorySystem, export_json, load_json, plot_trajectories


def _system():
    system = TrajectorySystem(
        0.1, 1.0, [1.0, 0.5, 0.2], [0.0, 0.0, 0.0],
        lambda t, x, y: -y, lambda t, x, y: x,
    )
    system.march_ab()
    return system


def test_one_line_per_particle():
    fig, ax = plot_trajectories(_system())
    assert len(ax.lines) == 3
    assert ax.get_title().startswith("Trajectories")
    plt.close(fig)


def test_selected_particles_and_save(tmp_path):
    path = tmp_path / "paths.png"
    fig, ax = plot_trajectories(_system(), particles=[1], title="one", save_path=str(path))
    assert len(ax.lines) == 1
    assert ax.get_title() == "one"
    assert path.exists()
    plt.close(fig)


def test_plot_from_loaded_data(tmp_path):
    system = _system()
    data = load_json(export_json(tmp_path / "t.json", system.times, system.store.x, system.store.y))
    fig, ax = plot_trajectories(data)
    np.testing.assert_array_equal(ax.lines[0].get_xdata(), system.positions[:, 0, 0])
    plt.close(fig)


def test_plot_raw_array_and_bad_input():
    fig, ax = plot_trajectories(np.zeros((4, 2, 2)), bounds=((-1, 1), (-1, 1)))
    assert ax.get_xlim() == (-1.0, 1.0)
    plt.close(fig)

    with pytest.raises(ValueError):
        plot_trajectories(np.zeros((4, 2, 3)))
    with pytest.raises(IndexError):
        plot_trajectories(_system(), particles=[5])
