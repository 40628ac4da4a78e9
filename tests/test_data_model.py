import pytest

from grapho_hills.core.data_model import (
    ELEVATION_TABLE, CellRole, Coordinate, Height, HeightMap, HeightTranslator,
    translate_symbol,
)
from grapho_hills.pipeline_config import (
    HeightMapParseError, HillClimbError, InvalidMarkerCoordinate, UnknownElevationSymbol,
)


@pytest.mark.parametrize("symbol, expected", [
    ('S', Height(0, CellRole.START)),
    ('E', Height(25, CellRole.END)),
    ('a', Height(0, CellRole.PLAIN)),
    ('m', Height(12, CellRole.PLAIN)),
    ('z', Height(25, CellRole.PLAIN)),
])
def test_translate_symbol(symbol, expected):
    assert translate_symbol(symbol) == expected


@pytest.mark.parametrize("symbol", ['A', '?', '1', ' ', 'é'])
def test_translate_unknown_symbol(symbol):
    with pytest.raises(UnknownElevationSymbol) as excinfo:
        translate_symbol(symbol)
    assert excinfo.value.symbol == symbol
    assert isinstance(excinfo.value, HillClimbError)


def test_elevation_table_is_read_only():
    assert len(ELEVATION_TABLE) == 26
    with pytest.raises(TypeError):
        ELEVATION_TABLE['a'] = 5
    assert ELEVATION_TABLE['a'] == 0


def test_translator_with_custom_markers():
    translator = HeightTranslator(start_symbol='<', end_symbol='>')
    assert translator.translate('<') == Height(0, CellRole.START)
    assert translator.translate('>') == Height(25, CellRole.END)
    with pytest.raises(UnknownElevationSymbol):
        translator.translate('S')


def test_height_map_requires_markers():
    heights = {
        Coordinate(0, 0): Height(0, CellRole.START),
        Coordinate(0, 1): Height(25, CellRole.END),
    }
    with pytest.raises(InvalidMarkerCoordinate) as excinfo:
        HeightMap(heights, Coordinate(0, 1), Coordinate(0, 1))
    assert excinfo.value.marker == 'start'
    assert isinstance(excinfo.value, HeightMapParseError)

    with pytest.raises(InvalidMarkerCoordinate) as excinfo:
        HeightMap(heights, Coordinate(0, 0), Coordinate(0, 0))
    assert excinfo.value.marker == 'end'

    with pytest.raises(InvalidMarkerCoordinate):
        HeightMap(heights, Coordinate(3, 3), Coordinate(0, 1))


def test_height_map_is_immutable(canonical_map):
    with pytest.raises(AttributeError):
        canonical_map.start = Coordinate(1, 1)
    with pytest.raises(TypeError):
        canonical_map.heights[Coordinate(0, 0)] = Height(3)


def test_height_map_accessors(canonical_map):
    assert canonical_map.shape == (5, 8)
    assert len(canonical_map) == 40
    assert canonical_map.elevation(Coordinate(0, 2)) == 1
    assert canonical_map.role(canonical_map.start) is CellRole.START
    assert canonical_map.role(canonical_map.end) is CellRole.END
    assert Coordinate(5, 0) not in canonical_map
    assert canonical_map.get(Coordinate(5, 0)) is None


def test_lowest_points_include_start(canonical_map):
    lowest = canonical_map.lowest_points()
    assert len(lowest) == 6
    assert canonical_map.start in lowest
    assert all(canonical_map.elevation(c) == 0 for c in lowest)


def test_to_array(canonical_map):
    dem = canonical_map.to_array()
    assert dem.shape == (5, 8)
    assert dem[0, 0] == 0
    assert dem[2, 5] == 25
    assert dem.min() == 0


def test_coordinate_str():
    assert str(Coordinate(2, 5)) == "[2,5]"
    assert str(Height(0, CellRole.START)) == "Start(0)"
    assert str(Height(7)) == "7"
