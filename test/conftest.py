import logging

import numpy as np
import pandas as pd
import pytest


def _make_frame(n_rows, seed, index=None):
    rng = np.random.RandomState(seed)
    return pd.DataFrame({
        'sample': ['s%d' % idx for idx in range(n_rows)],
        'x1': rng.normal(size=n_rows),
        'x2': rng.normal(size=n_rows),
        'y': rng.normal(size=n_rows),
        'x3': rng.normal(size=n_rows),
        'x4': rng.normal(size=n_rows),
    }, index=index)


@pytest.fixture
def train_df():
    return _make_frame(100, seed=1)


@pytest.fixture
def test_df():
    return _make_frame(20, seed=2, index=pd.RangeIndex(500, 520))


@pytest.fixture
def low_rank_df():
    """Four columns spanning only three independent directions."""
    rng = np.random.RandomState(3)
    base = rng.normal(size=(50, 3))
    return pd.DataFrame({'a': base[:, 0], 'b': base[:, 1], 'c': base[:, 2],
                         'd': base[:, 0] + base[:, 1] - base[:, 2]})


class StubProjector(object):
    """Projector returning `n_components` constant columns."""

    def __init__(self, columns, n_components, kernel='radial-basis'):
        self.columns = list(columns)
        self.n_components = n_components
        self.kernel = kernel

    def original_columns(self):
        return list(self.columns)

    def project(self, data):
        return np.tile(np.arange(1, self.n_components + 1, dtype=float), (data.shape[0], 1))


@pytest.fixture
def stub_projector():
    return StubProjector


@pytest.fixture
def reset_logging():
    yield
    logger = logging.getLogger('recipekit')
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
