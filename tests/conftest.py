import os
import sys

import numpy as np
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.forecast import samples_from


def _make_series(vals, start=0.0, step=60.0):
    ts = [start + i * step for i in range(len(vals))]
    return samples_from(ts, [float(v) for v in vals])


@pytest.fixture
def make_series():
    """Build evenly spaced samples (one minute apart by default) from raw values."""
    return _make_series


@pytest.fixture
def drift_series():
    return _make_series([10, 12, 11, 13, 12, 14, 13, 15, 14, 16])


@pytest.fixture
def noisy_seasonal_series():
    rng = np.random.default_rng(7)
    t = np.arange(48)
    vals = 100 + 0.5 * t + 10 * np.sin(2 * np.pi * t / 12) + rng.normal(0, 2, size=48)
    return _make_series(vals.tolist())
