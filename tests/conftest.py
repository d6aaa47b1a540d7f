import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from dsystrace.utils.config import reset_config


@pytest.fixture(autouse=True)
def _fresh_config():
    """Each test starts from the default package configuration."""
    reset_config()
    yield
    reset_config()
