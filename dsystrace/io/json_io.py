# dsystrace/io/json_io.py
"""
JSON export and import of trajectory data.

Document layout:

    {"t": [...],
     "parts": [{"x": [...], "y": [...]}, ...]}

Floats are written with full double precision, so loading an exported file
restores the arrays exactly.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union
import json
import numpy as np

PathLike = Union[str, Path]


@dataclass
class TrajectoryData:
    """
    Trajectory data read back from an exported document.

    Attributes
    ----------
    times : np.ndarray
        Time grid, shape (T,)
    x, y : np.ndarray
        Positions, shape (N, L) where L is the per-particle buffer length
    metadata : dict
        Source path and counts
    """
    times: np.ndarray
    x: np.ndarray
    y: np.ndarray
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def num_particles(self) -> int:
        return self.x.shape[0]

    @property
    def step_count(self) -> int:
        return self.times.shape[0]

    @property
    def positions(self) -> np.ndarray:
        """Positions on the time grid, shape (T, N, 2)."""
        T = self.step_count
        return np.stack([self.x[:, :T].T, self.y[:, :T].T], axis=-1)


def build_document(times: np.ndarray, x: np.ndarray, y: np.ndarray) -> Dict[str, Any]:
    """Build the export document; particle order follows the row order of x and y."""
    return {
        "t": np.asarray(times, dtype=np.float64).tolist(),
        "parts": [
            {
                "x": np.asarray(x[n], dtype=np.float64).tolist(),
                "y": np.asarray(y[n], dtype=np.float64).tolist(),
            }
            for n in range(x.shape[0])
        ],
    }


def export_json(
    path: PathLike,
    times: np.ndarray,
    x: np.ndarray,
    y: np.ndarray,
    indent: int = 4,
) -> Path:
    """
    Write trajectory data to a JSON file.

    The document is encoded in full before the file is opened, so encoding
    errors never leave a partial file behind.

    Parameters
    ----------
    path : str or Path
        Output file, created or overwritten
    times : np.ndarray
        Time grid, shape (T,)
    x, y : np.ndarray
        Position buffers, shape (N, L)
    indent : int
        JSON indentation

    Returns
    -------
    Path
        The written path

    Raises
    ------
    OSError
        If the file cannot be opened or written
    """
    x = np.asarray(x)
    y = np.asarray(y)
    if x.shape != y.shape:
        raise ValueError(f"x and y shapes differ: {x.shape} vs {y.shape}")

    text = json.dumps(build_document(times, x, y), indent=indent) + "\n"

    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def _as_float_rows(rows: Sequence[Sequence[float]], key: str) -> np.ndarray:
    lengths = {len(r) for r in rows}
    if len(lengths) > 1:
        raise ValueError(f"Particle '{key}' arrays have differing lengths: {sorted(lengths)}")
    if not rows:
        return np.zeros((0, 0), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)


def load_json(path: PathLike) -> TrajectoryData:
    """
    Read a document written by export_json.

    Raises
    ------
    OSError
        If the file cannot be read
    ValueError
        If the document does not have the expected layout
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        doc = json.load(f)

    if not isinstance(doc, dict) or "t" not in doc or "parts" not in doc:
        raise ValueError(f"{path} is not a trajectory document (expected keys 't' and 'parts')")

    parts: List[Dict[str, Any]] = doc["parts"]
    try:
        xs = [p["x"] for p in parts]
        ys = [p["y"] for p in parts]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed particle entry in {path}: {e}") from e

    times = np.asarray(doc["t"], dtype=np.float64)
    x = _as_float_rows(xs, "x")
    y = _as_float_rows(ys, "y")
    if x.shape != y.shape:
        raise ValueError(f"Particle x/y lengths differ in {path}: {x.shape} vs {y.shape}")

    return TrajectoryData(
        times=times,
        x=x,
        y=y,
        metadata={"source": str(path), "num_particles": x.shape[0]},
    )
