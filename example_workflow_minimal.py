#!/usr/bin/env python3
"""
Minimal dsystrace Example

Demonstrates the core dsystrace workflow:
1. Define an analytic velocity field u(t, x, y), v(t, x, y)
2. Configure the time grid and initial positions
3. March with Explicit Euler and Adams-Bashforth
4. Print, export and plot the trajectories
"""

import math
from pathlib import Path

import dsystrace as ds


def u(t, x, y):
    """Solid-body rotation, x component."""
    return -y


def v(t, x, y):
    """Solid-body rotation, y component, with a slow oscillating drift."""
    return x + 0.1 * math.sin(t)


def main():
    print("dsystrace Minimal Example")
    print("=" * 30)

    output_dir = Path("output_minimal")
    output_dir.mkdir(exist_ok=True)

    system = ds.TrajectorySystem(
        dt=0.05,
        tmax=2.0 * math.pi,
        x0=[1.0, 0.5, 0.25],
        y0=[0.0, 0.0, 0.0],
        u=u,
        v=v,
    )
    print(f"Configured: {system.summary()}")

    ds.configure(verbose=True)

    system.march_ee()
    system.export_data(output_dir / "trajectories_ee.json")
    ds.plot_trajectories(system, title="Explicit Euler", save_path=str(output_dir / "ee.png"))

    system.march_ab()
    system.export_data(output_dir / "trajectories_ab.json")
    ds.plot_trajectories(system, title="Adams-Bashforth 2", save_path=str(output_dir / "ab.png"))

    print("\nParticle 0 (Adams-Bashforth):")
    system.print_trajectory(0)

    # Euler spirals outward on a rotation, AB2 drifts much less
    data_ee = ds.load_json(output_dir / "trajectories_ee.json")
    data_ab = ds.load_json(output_dir / "trajectories_ab.json")
    r_ee = math.hypot(data_ee.x[0, -1], data_ee.y[0, -1])
    r_ab = math.hypot(data_ab.x[0, -1], data_ab.y[0, -1])
    print(f"\nFinal radius of particle 0: EE {r_ee:.4f}, AB2 {r_ab:.4f}")
    print(f"Output written to {output_dir}/")


if __name__ == "__main__":
    main()
