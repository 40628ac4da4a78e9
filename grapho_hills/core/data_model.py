"""
Core data models for elevation grids.

This module defines the value types used throughout the package for
representing a hill-climbing height map: grid coordinates, cell roles,
decoded heights and the immutable height map itself.
"""

import string
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

import numpy as np

from ..pipeline_config import HEIGHT_MAP_CONFIG, InvalidMarkerCoordinate, UnknownElevationSymbol

__all__ = ['Coordinate', 'CellRole', 'Height', 'HeightTranslator', 'HeightMap',
           'ELEVATION_TABLE', 'MIN_ELEVATION', 'MAX_ELEVATION', 'translate_symbol']


class Coordinate(NamedTuple):
    """
    Position of a cell in the grid, as (row, column).
    """

    row: int
    col: int

    def __str__(self):
        return f"[{self.row},{self.col}]"


class CellRole(Enum):
    """
    Role of a grid cell. The set of roles is closed.
    """

    START = "start"
    END = "end"
    PLAIN = "plain"


class Height(NamedTuple):
    """
    Decoded grid symbol: elevation value and cell role.
    """

    elevation: int
    role: CellRole = CellRole.PLAIN

    def __str__(self):
        if self.role is CellRole.START:
            return f"Start({self.elevation})"
        if self.role is CellRole.END:
            return f"End({self.elevation})"
        return str(self.elevation)


def _build_elevation_table(lowest, highest):
    letters = string.ascii_lowercase
    first, last = letters.index(lowest), letters.index(highest)
    return MappingProxyType(
        {letter: i for i, letter in enumerate(letters[first:last + 1])}
    )


# Read-only symbol -> elevation table, built once at import.
ELEVATION_TABLE: Mapping[str, int] = _build_elevation_table(
    HEIGHT_MAP_CONFIG['lowest_symbol'], HEIGHT_MAP_CONFIG['highest_symbol']
)

MIN_ELEVATION = ELEVATION_TABLE[HEIGHT_MAP_CONFIG['lowest_symbol']]
MAX_ELEVATION = ELEVATION_TABLE[HEIGHT_MAP_CONFIG['highest_symbol']]


class HeightTranslator:
    """
    Translate single grid symbols into heights.
    """

    def __init__(self, table=None, start_symbol=None, end_symbol=None):
        """
        Initialize a HeightTranslator.

        Parameters
        ----------
        table : Mapping[str, int], optional
            Symbol to elevation table. Defaults to the shared ``ELEVATION_TABLE``.
        start_symbol : str, optional
            Symbol marking the start cell
        end_symbol : str, optional
            Symbol marking the end cell
        """
        self.table = table if table is not None else ELEVATION_TABLE
        self.start_symbol = start_symbol or HEIGHT_MAP_CONFIG['start_symbol']
        self.end_symbol = end_symbol or HEIGHT_MAP_CONFIG['end_symbol']

    def translate(self, symbol):
        """
        Translate a symbol into a Height.

        Parameters
        ----------
        symbol : str
            A single character from the grid

        Returns
        -------
        Height
            The decoded elevation and role

        Raises
        ------
        UnknownElevationSymbol
            If the symbol is neither a marker nor a known elevation letter
        """
        if symbol == self.start_symbol:
            return Height(self._lookup(HEIGHT_MAP_CONFIG['lowest_symbol'], symbol), CellRole.START)
        if symbol == self.end_symbol:
            return Height(self._lookup(HEIGHT_MAP_CONFIG['highest_symbol'], symbol), CellRole.END)
        return Height(self._lookup(symbol, symbol), CellRole.PLAIN)

    def _lookup(self, letter, symbol):
        try:
            return self.table[letter]
        except KeyError:
            raise UnknownElevationSymbol(symbol) from None

    def __repr__(self):
        return f"HeightTranslator(start={self.start_symbol!r}, end={self.end_symbol!r})"


_DEFAULT_TRANSLATOR = HeightTranslator()


def translate_symbol(symbol):
    """Translate a symbol with the shared default translator."""
    return _DEFAULT_TRANSLATOR.translate(symbol)


class HeightMap:
    """
    Immutable mapping from grid coordinates to decoded heights.

    A HeightMap always holds exactly one start and one end coordinate.
    Instances compare equal when their cells and markers are equal.
    """

    __slots__ = ('_heights', 'start', 'end', 'n_rows', 'n_cols')

    def __init__(self, heights: Dict[Coordinate, Height], start: Coordinate, end: Coordinate):
        """
        Initialize a HeightMap.

        Parameters
        ----------
        heights : dict
            Mapping of Coordinate to Height
        start : Coordinate
            Coordinate of the start cell
        end : Coordinate
            Coordinate of the end cell

        Raises
        ------
        InvalidMarkerCoordinate
            If start or end does not hold the matching marker
        """
        if start not in heights or heights[start].role is not CellRole.START:
            raise InvalidMarkerCoordinate('start', start)
        if end not in heights or heights[end].role is not CellRole.END:
            raise InvalidMarkerCoordinate('end', end)

        object.__setattr__(self, '_heights', MappingProxyType(dict(heights)))
        object.__setattr__(self, 'start', start)
        object.__setattr__(self, 'end', end)
        object.__setattr__(self, 'n_rows', max(c.row for c in heights) + 1)
        object.__setattr__(self, 'n_cols', max(c.col for c in heights) + 1)

    def __setattr__(self, name, value):
        raise AttributeError("HeightMap is immutable")

    @property
    def heights(self) -> Mapping[Coordinate, Height]:
        return self._heights

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_rows, self.n_cols

    def __contains__(self, coord):
        return coord in self._heights

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._heights)

    def __len__(self):
        return len(self._heights)

    def __getitem__(self, coord) -> Height:
        return self._heights[coord]

    def get(self, coord, default=None) -> Optional[Height]:
        return self._heights.get(coord, default)

    def items(self):
        return self._heights.items()

    def elevation(self, coord):
        return self._heights[coord].elevation

    def role(self, coord):
        return self._heights[coord].role

    def lowest_points(self) -> List[Coordinate]:
        """
        Get every coordinate at the minimum elevation, start included.

        Returns
        -------
        list of Coordinate
            Coordinates in reading order
        """
        return sorted(c for c, h in self._heights.items() if h.elevation == MIN_ELEVATION)

    def to_array(self, fill_value=-1):
        """
        Convert the height map to a 2D elevation array.

        Parameters
        ----------
        fill_value : int, optional
            Value for positions missing from a ragged grid

        Returns
        -------
        numpy.ndarray
            Integer array of shape (n_rows, n_cols)
        """
        dem = np.full(self.shape, fill_value, dtype=int)
        for coord, height in self._heights.items():
            dem[coord.row, coord.col] = height.elevation
        return dem

    def __eq__(self, other):
        if not isinstance(other, HeightMap):
            return NotImplemented
        return (self.start == other.start and self.end == other.end
                and dict(self._heights) == dict(other._heights))

    def __hash__(self):
        return hash((self.start, self.end, frozenset(self._heights.items())))

    def __repr__(self):
        return (f"HeightMap(shape={self.shape}, start={self.start}, "
                f"end={self.end})")
