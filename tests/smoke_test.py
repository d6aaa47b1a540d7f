#!/usr/bin/env python3
"""
dsystrace Smoke Test

Quick import and basic functionality test to ensure the package is working.
Runs under pytest or directly: python tests/smoke_test.py
"""

import sys
import traceback
from pathlib import Path

# Add project root to path for direct runs
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_core_imports():
    """Core dsystrace modules import successfully."""
    import dsystrace as ds
    from dsystrace.integrators import euler_step, ab2_step  # noqa: F401
    from dsystrace.io import export_json, load_json  # noqa: F401
    from dsystrace.visualization import plot_trajectories  # noqa: F401

    assert ds.__version__
    assert callable(ds.TrajectorySystem)


def test_basic_functionality(tmp_path=None):
    """Configure, march with both schemes, export."""
    import tempfile
    import dsystrace as ds

    system = ds.TrajectorySystem(0.1, 1.0, [0.0, 1.0], [0.0, 0.0],
                                 lambda t, x, y: 0.1, lambda t, x, y: 0.0)
    assert system.state is ds.ConfigState.FULLY_CONFIGURED

    system.march_ee()
    system.march_ab()

    out_dir = Path(tmp_path) if tmp_path is not None else Path(tempfile.mkdtemp())
    data = ds.load_json(system.export_data(out_dir / "smoke.json"))
    assert data.x.shape == (2, system.step_count + 1)


def main():
    """Run all smoke tests."""
    print("dsystrace Smoke Test")
    print("=" * 50)

    tests = [
        ("Core Imports", test_core_imports),
        ("Basic Functionality", test_basic_functionality),
    ]

    passed = 0
    for name, test_func in tests:
        print(f"\nRunning: {name}")
        try:
            test_func()
            passed += 1
            print(f"{name}: PASSED")
        except Exception as e:
            print(f"{name}: FAILED - {e}")
            traceback.print_exc()

    print(f"\nResults: {passed}/{len(tests)} tests passed")
    return 0 if passed == len(tests) else 1


if __name__ == "__main__":
    sys.exit(main())
