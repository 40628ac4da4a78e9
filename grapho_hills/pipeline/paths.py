"""
Busca de caminhos mínimos em grafos de escalada.

Todas as arestas de um grafo de escalada custam um passo, então os caminhos
mínimos são obtidos por busca em largura. Há dois modos:

- forward: da célula de início até a célula de fim;
- reverse: da célula de fim, sobre o grafo invertido, até a célula mais
  próxima que satisfaz um predicado (por padrão, qualquer célula mais baixa).
  Uma única travessia responde "caminho mínimo de qualquer célula mais baixa
  até o fim".
"""

import logging
from typing import Callable, Dict, List, Optional

import networkx as nx

from ..core.data_model import Coordinate
from ..core.graph import ClimbGraph
from ..pipeline_config import NoPathFound, SOLVER_CONFIG

logger = logging.getLogger('grapho_hills.pipeline.paths')

FORWARD = 'forward'
REVERSE = 'reverse'


def elevation_target(elevation: int) -> Callable[[ClimbGraph, Coordinate], bool]:
    """
    Cria um predicado que seleciona células de uma dada elevação.

    Args:
        elevation: Elevação das células alvo

    Returns:
        Predicado que recebe (climb_graph, node)
    """
    def is_target(climb_graph, node):
        return climb_graph.elevation(node) == elevation
    return is_target


class PathSolver:
    """Classe para consultas de caminho mínimo por busca em largura."""

    def forward(self, climb_graph: ClimbGraph) -> int:
        """
        Encontra o menor número de passos do início até o fim.

        Args:
            climb_graph: Grafo de escalada no sentido direto

        Returns:
            Número de arestas do caminho mínimo

        Raises:
            NoPathFound: Se a célula de fim é inalcançável
        """
        try:
            distance = nx.shortest_path_length(climb_graph.graph, climb_graph.start, climb_graph.end)
        except (nx.NetworkXNoPath, nx.NodeNotFound) as e:
            raise NoPathFound(FORWARD, climb_graph.start, climb_graph.end) from e

        logger.debug(f"Distância direta {climb_graph.start} -> {climb_graph.end}: {distance}")
        return distance

    def forward_path(self, climb_graph: ClimbGraph) -> List[Coordinate]:
        """
        Encontra uma rota mínima do início até o fim.

        Args:
            climb_graph: Grafo de escalada no sentido direto

        Returns:
            Coordenadas ao longo da rota, incluindo início e fim

        Raises:
            NoPathFound: Se a célula de fim é inalcançável
        """
        try:
            return nx.shortest_path(climb_graph.graph, climb_graph.start, climb_graph.end)
        except (nx.NetworkXNoPath, nx.NodeNotFound) as e:
            raise NoPathFound(FORWARD, climb_graph.start, climb_graph.end) from e

    def distances_from(self, climb_graph: ClimbGraph, source: Coordinate) -> Dict[Coordinate, int]:
        """
        Calcula o número de passos de uma origem até cada célula alcançável.

        Args:
            climb_graph: Grafo a percorrer
            source: Célula de origem

        Returns:
            Mapeamento coordenada alcançável -> distância, incluindo a origem
        """
        return nx.single_source_shortest_path_length(climb_graph.graph, source)

    def reverse(self, climb_graph: ClimbGraph,
                target: Optional[Callable[[ClimbGraph, Coordinate], bool]] = None) -> int:
        """
        Encontra o menor número de passos de qualquer célula alvo até o fim.

        A busca parte uma única vez da célula de fim sobre o grafo invertido
        e guarda a menor distância entre as células alvo alcançadas.

        Args:
            climb_graph: Grafo de escalada no sentido direto
            target: Predicado que seleciona as células alvo. Por padrão,
                células na elevação alvo configurada.

        Returns:
            Número de arestas do caminho mínimo a partir do alvo mais próximo

        Raises:
            NoPathFound: Se nenhuma célula alvo alcança a célula de fim
        """
        if target is None:
            target = elevation_target(SOLVER_CONFIG['target_elevation'])

        reversed_graph = climb_graph.reversed()
        try:
            distances = self.distances_from(reversed_graph, reversed_graph.end)
        except nx.NodeNotFound as e:
            raise NoPathFound(REVERSE, climb_graph.end) from e

        candidates = [d for node, d in distances.items() if target(reversed_graph, node)]
        if not candidates:
            raise NoPathFound(REVERSE, climb_graph.end)

        distance = min(candidates)
        logger.debug(f"Distância reversa a partir de {climb_graph.end}: {distance} "
                     f"({len(candidates)} alvos alcançados)")
        return distance

    def solve(self, climb_graph: ClimbGraph, mode: str = FORWARD) -> int:
        """
        Executa a busca no modo indicado.

        Args:
            climb_graph: Grafo de escalada no sentido direto
            mode: 'forward' ou 'reverse'

        Returns:
            Distância mínima
        """
        if mode == FORWARD:
            return self.forward(climb_graph)
        if mode == REVERSE:
            return self.reverse(climb_graph)
        raise ValueError(f"Modo de busca desconhecido: {mode}")
