import os

import pytest


def pytest_configure(config):
    """Force the non-interactive Agg backend before any test imports pyplot.

    Plot tests create figures on headless CI machines; an interactive backend
    would fail to initialize there (or pop up windows locally).
    """
    os.environ.setdefault('MPLBACKEND', 'Agg')
    import matplotlib
    matplotlib.use('Agg')


@pytest.fixture(autouse=True)
def _close_figures():
    """Close every pyplot figure a test leaves open."""
    yield
    import matplotlib.pyplot as plt
    plt.close('all')
