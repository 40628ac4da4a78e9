"""
Construção de grafos de escalada a partir de mapas de alturas.

Este módulo fornece a classe que transforma um mapa de alturas decodificado
em um grafo direcionado cujas arestas são os passos permitidos pela regra
de escalada.
"""

import logging
from typing import Iterator, Optional, Sequence, Tuple

import networkx as nx

from ..core.data_model import Coordinate, HeightMap
from ..core.graph import ClimbGraph
from ..pipeline_config import GRAPH_CONFIG

logger = logging.getLogger('grapho_hills.pipeline.graph_builder')


class GraphBuilder:
    """Classe para construir grafos de escalada a partir de mapas de alturas."""

    def __init__(self, max_climb: int = GRAPH_CONFIG['max_climb'],
                 directions: Sequence[Tuple[int, int]] = GRAPH_CONFIG['directions']):
        """
        Inicializa um novo construtor de grafos.

        Args:
            max_climb: Maior ganho de elevação permitido em um único passo
            directions: Deslocamentos (linha, coluna) dos vizinhos de uma célula
        """
        self.max_climb = max_climb
        self.directions = tuple(directions)

    def neighbors(self, height_map: HeightMap, coord: Coordinate) -> Iterator[Coordinate]:
        """
        Percorre os vizinhos de uma célula que estão dentro da grade.

        Args:
            height_map: Mapa de alturas que contém a célula
            coord: Coordenada da célula

        Returns:
            Iterador sobre as coordenadas vizinhas
        """
        for d_row, d_col in self.directions:
            neighbor = Coordinate(coord.row + d_row, coord.col + d_col)
            if neighbor in height_map:
                yield neighbor

    def can_climb(self, source_elevation: int, target_elevation: int) -> bool:
        return target_elevation <= source_elevation + self.max_climb

    def create_climb_graph(self, height_map: HeightMap,
                           max_climb: Optional[int] = None) -> ClimbGraph:
        """
        Cria o grafo de escalada de um mapa de alturas.

        Cada célula vira um nó. Uma aresta liga a célula a cada vizinho no
        máximo `max_climb` mais alto. A célula de fim do mapa não tem arestas
        de saída.

        Args:
            height_map: Mapa de alturas decodificado
            max_climb: Substitui o limite de escalada do construtor neste grafo

        Returns:
            ClimbGraph congelado
        """
        if max_climb is not None and max_climb != self.max_climb:
            return GraphBuilder(max_climb, self.directions).create_climb_graph(height_map)

        G = nx.DiGraph()

        # Adiciona cada célula como um nó
        for coord, height in height_map.items():
            G.add_node(coord, elevation=height.elevation, role=height.role)

        # Conecta cada célula aos vizinhos para onde pode subir ou descer
        for coord, height in height_map.items():
            if coord == height_map.end:
                continue
            for neighbor in self.neighbors(height_map, coord):
                if self.can_climb(height.elevation, height_map.elevation(neighbor)):
                    G.add_edge(coord, neighbor)

        nx.freeze(G)
        logger.debug(f"Grafo de escalada criado: {G.number_of_nodes()} nós, {G.number_of_edges()} arestas")

        return ClimbGraph(G, height_map)
