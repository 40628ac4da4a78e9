"""
Processing functions for Grapho Hills.

This module turns raw puzzle text into height maps.
"""

from .terrain import *
