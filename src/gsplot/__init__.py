"""gsplot: draw signals living on graph vertices with matplotlib."""
from gsplot.plotting import *  # noqa: F401,F403
from gsplot.plotting import __all__  # noqa: F401

__version__ = '0.1.0'
