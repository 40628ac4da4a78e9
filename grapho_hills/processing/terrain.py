"""
Functions for processing height map text.

This module turns the raw puzzle text into a HeightMap, decoding every
symbol and locating the start and end markers.
"""

import logging
import warnings

from ..core.data_model import Coordinate, CellRole, HeightMap, HeightTranslator
from ..pipeline_config import DuplicateMarker, NoEndCoordinate, NoStartCoordinate

__all__ = ['iter_rows', 'parse_height_map']

logger = logging.getLogger('grapho_hills.processing')


def iter_rows(text):
    """
    Yield the non-blank rows of a height map text, stripped of surrounding
    whitespace.
    """
    for line in text.splitlines():
        line = line.strip()
        if line:
            yield line


def parse_height_map(text, translator=None):
    """
    Parse a height map from text.

    Parameters
    ----------
    text : str
        Height map, one row per line. Blank lines are skipped and each
        line is stripped of surrounding whitespace.
    translator : HeightTranslator, optional
        Symbol translator. A new default translator is used if omitted.

    Returns
    -------
    HeightMap
        The decoded height map

    Raises
    ------
    UnknownElevationSymbol
        On the first symbol that cannot be decoded
    NoStartCoordinate
        If no start marker appears in the text
    NoEndCoordinate
        If no end marker appears in the text
    DuplicateMarker
        If a start or end marker appears more than once
    """
    translator = translator or HeightTranslator()

    heights = {}
    start = None
    end = None
    widths = set()

    for row, line in enumerate(iter_rows(text)):
        widths.add(len(line))
        for col, symbol in enumerate(line):
            coord = Coordinate(row, col)
            height = translator.translate(symbol)
            heights[coord] = height

            if height.role is CellRole.START:
                if start is not None:
                    raise DuplicateMarker(symbol, start, coord)
                start = coord
            elif height.role is CellRole.END:
                if end is not None:
                    raise DuplicateMarker(symbol, end, coord)
                end = coord

    if start is None:
        raise NoStartCoordinate()
    if end is None:
        raise NoEndCoordinate()

    if len(widths) > 1:
        warnings.warn(f"Height map rows have unequal lengths: {sorted(widths)}")

    height_map = HeightMap(heights, start, end)
    logger.debug(f"Parsed height map {height_map.shape}: start={start}, end={end}")
    return height_map
