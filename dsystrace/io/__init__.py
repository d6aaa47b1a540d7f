"""
I/O for dsystrace trajectory data.
"""

from .json_io import (
    TrajectoryData,
    build_document,
    export_json,
    load_json,
)

__all__ = [
    "TrajectoryData",
    "build_document",
    "export_json",
    "load_json",
]
