# dsystrace/utils/__init__.py
"""
Utilities for dsystrace.

Contains:
- config: global package configuration
- logging: timers, memory monitoring, progress tracking
"""

from .config import (
    PackageConfig,
    get_config,
    configure,
    reset_config,
)

from .logging import (
    Timer,
    memory_info,
    create_progress_callback,
    ProgressCallback,
)

__all__ = [
    # config
    "PackageConfig",
    "get_config",
    "configure",
    "reset_config",
    # logging
    "Timer",
    "memory_info",
    "create_progress_callback",
    "ProgressCallback",
]
