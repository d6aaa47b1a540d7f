# dsystrace/utils/config.py
"""
Global package configuration.

Provides centralized settings for buffer data types, memory limits,
console formatting, export formatting and progress reporting.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Dict, Any
import warnings
import psutil


@dataclass
class PackageConfig:
    """
    Global configuration for the dsystrace package.

    Controls trajectory buffer precision, memory warnings, console and
    export formatting, and progress reporting.
    """
    # Data type settings
    dtype: str = "float64"              # 'float32' | 'float64'

    # Memory management
    memory_limit_gb: float = 0.0        # Warn above this buffer size, 0 = auto

    # Progress and monitoring
    show_progress: bool = False         # Print progress during marching
    progress_update_every: int = 100    # Steps between progress updates
    verbose: bool = False               # Time march calls

    # Output formatting
    export_indent: int = 4              # JSON indentation
    print_width: int = 6                # Column width for print_trajectory
    print_precision: int = 2            # Decimal places for print_trajectory

    # Environment settings
    _system_memory_gb: float = field(init=False, default=8.0)

    def __post_init__(self):
        self._detect_system_resources()
        self._validate_config()

    def _detect_system_resources(self):
        """Detect available system memory."""
        self._system_memory_gb = psutil.virtual_memory().total / (1024**3)

    def _validate_config(self):
        """Validate configuration settings."""
        if self.dtype not in ["float32", "float64"]:
            raise ValueError(f"dtype must be 'float32' or 'float64', got '{self.dtype}'")

        if self.print_width <= 0:
            raise ValueError(f"print_width must be positive, got {self.print_width}")
        if self.print_precision < 0:
            raise ValueError(f"print_precision must be non-negative, got {self.print_precision}")
        if self.export_indent < 0:
            raise ValueError(f"export_indent must be non-negative, got {self.export_indent}")
        if self.progress_update_every <= 0:
            raise ValueError("progress_update_every must be positive")

        # Auto-adjust memory limit if needed
        if self.memory_limit_gb <= 0:
            self.memory_limit_gb = max(self._system_memory_gb * 0.5, 1.0)

        if self.memory_limit_gb > self._system_memory_gb * 0.8:
            warnings.warn(
                f"Memory limit {self.memory_limit_gb}GB exceeds 80% of system memory "
                f"{self._system_memory_gb:.1f}GB"
            )

    # ---------- Utility methods ----------

    def itemsize(self) -> int:
        """Bytes per stored coordinate."""
        return 8 if self.dtype == "float64" else 4

    def check_buffer_size(self, n_bytes: int) -> bool:
        """
        Warn if a trajectory buffer would exceed the memory limit.

        Returns True when the buffer fits.
        """
        limit = self.memory_limit_gb * (1024**3)
        if n_bytes > limit:
            warnings.warn(
                f"Trajectory buffers need {n_bytes / (1024**3):.2f}GB, "
                f"above the {self.memory_limit_gb:.2f}GB memory limit"
            )
            return False
        return True

    def get_system_info(self) -> Dict[str, Any]:
        """Get system resource information."""
        return {
            "system_memory_gb": self._system_memory_gb,
            "current_config": {
                "dtype": self.dtype,
                "memory_limit_gb": self.memory_limit_gb,
                "show_progress": self.show_progress,
                "verbose": self.verbose,
            }
        }


# Global configuration instance
_global_config = PackageConfig()


def get_config() -> PackageConfig:
    """Get global package configuration."""
    return _global_config


def configure(**kwargs) -> None:
    """
    Configure package settings.

    Parameters
    ----------
    **kwargs : dict
        Configuration parameters to update
    """
    global _global_config

    settable = {f.name for f in fields(PackageConfig) if f.init}
    known = {}
    for key, value in kwargs.items():
        if key in settable:
            known[key] = value
        else:
            warnings.warn(f"Unknown configuration parameter: {key}")

    # validated in __post_init__ before it replaces the current config
    _global_config = replace(_global_config, **known)


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _global_config
    _global_config = PackageConfig()
