# dsystrace/utils/logging.py
"""
Logging utilities: timers, memory monitoring, and progress tracking.

Lightweight console reporting used by the march methods. Messages go
to stdout through print, the same channel as trajectory printing.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Protocol
import time

import psutil


class ProgressCallback(Protocol):
    """Protocol for progress callbacks used during marching."""
    def __call__(self, step: int, total: int) -> None:
        """Called after each completed time step."""
        ...


class Timer:
    """
    Simple timer for performance monitoring.

    Can be used as a context manager or manually started/stopped.
    Tracks wall time and, optionally, resident memory.
    """

    def __init__(self, name: str = "Timer", track_memory: bool = False):
        self.name = name
        self.track_memory = track_memory
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.start_memory: Optional[Dict[str, Any]] = None
        self.end_memory: Optional[Dict[str, Any]] = None

    def start(self) -> None:
        """Start the timer."""
        self.start_time = time.perf_counter()
        self.end_time = None
        if self.track_memory:
            self.start_memory = memory_info()

    def stop(self) -> float:
        """Stop the timer and return elapsed time in seconds."""
        if self.start_time is None:
            raise RuntimeError("Timer not started")
        self.end_time = time.perf_counter()
        if self.track_memory:
            self.end_memory = memory_info()
        return self.elapsed

    @property
    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.perf_counter()
        return end - self.start_time

    @property
    def memory_delta(self) -> Optional[Dict[str, float]]:
        """Get memory usage delta (if tracking enabled)."""
        if not self.track_memory or self.start_memory is None or self.end_memory is None:
            return None
        return {
            key: self.end_memory[key] - self.start_memory[key]
            for key in self.start_memory
            if key in self.end_memory
        }

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
        if exc_type is None:
            self.report()

    def report(self) -> None:
        """Print a timing report."""
        print(f"{self.name}: {self.elapsed:.6f}s")
        delta = self.memory_delta
        if delta is not None and "rss_mb" in delta:
            print(f"  Memory delta: {delta['rss_mb']:.1f} MB")


def memory_info() -> Dict[str, float]:
    """
    Get current memory usage information.

    Returns
    -------
    dict
        Memory info with keys 'rss_mb', 'vms_mb', 'available_mb', 'percent_used'
    """
    mem = psutil.Process().memory_info()
    vm = psutil.virtual_memory()
    return {
        "rss_mb": mem.rss / 1024 / 1024,
        "vms_mb": mem.vms / 1024 / 1024,
        "available_mb": vm.available / 1024 / 1024,
        "percent_used": vm.percent,
    }


def create_progress_callback(
    name: str = "Progress",
    update_every: int = 100,
    show_rate: bool = True,
) -> ProgressCallback:
    """
    Create a progress callback for long-running marches.

    Parameters
    ----------
    name : str
        Name to show in progress messages
    update_every : int
        Update frequency (every N steps)
    show_rate : bool
        Whether to show processing rate

    Returns
    -------
    ProgressCallback
        Function that can be called with (step, total)
    """
    start_time = time.perf_counter()

    def callback(step: int, total: int) -> None:
        if step % update_every != 0 and step != total:
            return

        elapsed = time.perf_counter() - start_time
        percent = 100.0 * step / max(1, total)

        msg = f"{name}: {step}/{total} ({percent:.1f}%)"

        if show_rate and elapsed > 0:
            msg += f", {step / elapsed:.1f} steps/s"

        print(f"\r{msg}", end="", flush=True)

        if step == total:
            print()  # newline when done

    return callback
