"""
Módulo de pipeline para construção de grafos de escalada e busca de caminhos.

Este módulo fornece os componentes para construir grafos de escalada a partir
de mapas de alturas, buscar caminhos mínimos sobre eles e encadear ambos em
um pipeline.
"""

from .graph_builder import GraphBuilder
from .paths import PathSolver, elevation_target
from .pipeline import Pipeline, PipelineConfig, PipelineStep

__all__ = ['GraphBuilder', 'PathSolver', 'elevation_target',
           'Pipeline', 'PipelineConfig', 'PipelineStep']
