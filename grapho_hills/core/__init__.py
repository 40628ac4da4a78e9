"""
Core functionality for Grapho Hills.

This module contains the fundamental data structures that form the
basis of the package: coordinates, decoded heights, height maps and
climb graphs.
"""

from .data_model import *
from .graph import *
