"""
Input functions for Grapho Hills.
"""

from .loaders import *
