"""
Configuração do pipeline do projeto Grapho Hills.

Este módulo define as configurações para uma execução completa que integra:
1. Decodificação dos símbolos do mapa de alturas
2. Construção do grafo de escalada
3. Busca de caminhos mínimos (direta e reversa)
"""

# Símbolos do mapa de alturas
HEIGHT_MAP_CONFIG = {
    'start_symbol': 'S',
    'end_symbol': 'E',
    'lowest_symbol': 'a',   # elevação do marcador de início
    'highest_symbol': 'z',  # elevação do marcador de fim
}

# Construção do grafo de escalada
GRAPH_CONFIG = {
    'max_climb': 1,
    # cima, baixo, esquerda, direita como deslocamentos (linha, coluna)
    'directions': ((-1, 0), (1, 0), (0, -1), (0, 1)),
}

# Busca de caminhos
SOLVER_CONFIG = {
    'modes': ['forward', 'reverse'],
    'target_elevation': 0,
}

# Pipeline completo
PIPELINE_CONFIG = {
    'steps': [
        {'name': 'load_data', 'enabled': True, 'params': {
            'data_directory': 'data',
            'day': 12,
        }},
        {'name': 'parse_height_map', 'enabled': True, 'params': None},
        {'name': 'create_graph', 'enabled': True, 'params': {
            'max_climb': GRAPH_CONFIG['max_climb'],
        }},
        {'name': 'solve_forward', 'enabled': True, 'params': None},
        {'name': 'solve_reverse', 'enabled': True, 'params': {
            'target_elevation': SOLVER_CONFIG['target_elevation'],
        }},
    ],

    # Configurações gerais
    'stop_on_error': True,
    'logger': {
        'level': 'INFO',
        'console': True
    },
}


# Classes de erros personalizadas para o pipeline
class HillClimbError(Exception):
    """Erro base da leitura do mapa de alturas e da busca de caminhos."""
    pass


class HeightMapParseError(HillClimbError):
    """Erro na leitura do mapa de alturas."""
    pass


class UnknownElevationSymbol(HeightMapParseError):
    """Símbolo do mapa que não corresponde a nenhuma elevação."""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Unknown height: {symbol!r}")


class NoStartCoordinate(HeightMapParseError):
    """O mapa de alturas não tem marcador de início."""

    def __init__(self):
        super().__init__("No start coordinate.")


class NoEndCoordinate(HeightMapParseError):
    """O mapa de alturas não tem marcador de fim."""

    def __init__(self):
        super().__init__("No end coordinate.")


class DuplicateMarker(HeightMapParseError):
    """O mapa de alturas tem mais de um marcador de início ou de fim."""

    def __init__(self, symbol, first, second):
        self.symbol = symbol
        self.first = first
        self.second = second
        super().__init__(f"Duplicate marker {symbol!r} at {second} (first seen at {first}).")


class InvalidMarkerCoordinate(HeightMapParseError):
    """A coordenada de início ou de fim não aponta para a célula marcada."""

    def __init__(self, marker, coord):
        self.marker = marker
        self.coord = coord
        super().__init__(f"{marker.capitalize()} coordinate {coord} is not a {marker} cell.")


class PathSearchError(HillClimbError):
    """Erro na busca sobre o grafo de escalada."""
    pass


class NoPathFound(PathSearchError):
    """Nenhum alvo é alcançável no modo de busca indicado."""

    def __init__(self, mode, source=None, target=None):
        self.mode = mode
        self.source = source
        self.target = target
        detail = f" from {source}" if source is not None else ""
        if target is not None:
            detail += f" to {target}"
        super().__init__(f"No paths found ({mode} search{detail}).")


class PipelineConfigError(HillClimbError):
    """Erro na configuração do pipeline."""
    pass
