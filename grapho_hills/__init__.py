"""
Grapho Hills - Shortest paths over elevation grids modelled as directed graphs.
"""

__version__ = '0.1.0'

# Import main submodules for easy access
from . import core
from . import io
from . import processing
from . import pipeline
from .pipeline_config import (
    HillClimbError, HeightMapParseError, UnknownElevationSymbol,
    NoStartCoordinate, NoEndCoordinate, PathSearchError, NoPathFound,
)
