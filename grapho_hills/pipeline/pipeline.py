"""
Pipeline para resolução de mapas de alturas.

Este módulo implementa uma classe de pipeline que integra os componentes do pacote:
1. Carregamento do texto de entrada
2. Leitura do mapa de alturas
3. Construção do grafo de escalada
4. Busca do caminho mínimo a partir do início (direta)
5. Busca do caminho mínimo a partir de qualquer célula mais baixa (reversa)

Os passos podem ser executados em sequência ou individualmente, compartilhando
um contexto comum.
"""

import os
import time
import logging
import json
from typing import Dict, List, Optional, Union, Any, Callable

from ..io.loaders import load_raw
from ..pipeline_config import PIPELINE_CONFIG, PipelineConfigError
from ..processing.terrain import parse_height_map
from .graph_builder import GraphBuilder
from .paths import PathSolver, elevation_target

LOGGER_NAME = 'grapho_hills.pipeline'


class PipelineStep:
    """Classe que representa um passo do pipeline."""

    def __init__(self, name: str, function: Callable, enabled: bool = True, params: Dict = None):
        """
        Inicializa um novo passo do pipeline.

        Args:
            name: Nome do passo
            function: Função a ser executada, chamada como function(context, **params)
            enabled: Se o passo está habilitado
            params: Parâmetros nomeados para a função
        """
        self.name = name
        self.function = function
        self.enabled = enabled
        self.params = params or {}
        self.result = None
        self.execution_time = 0
        self.status = "pending"
        self.error = None

    def execute(self, pipeline_context: Dict) -> Any:
        """
        Executa o passo do pipeline.

        Args:
            pipeline_context: Contexto do pipeline

        Returns:
            Resultado da função
        """
        if not self.enabled:
            self.status = "skipped"
            return None

        try:
            self.status = "running"
            start_time = time.time()

            self.result = self.function(pipeline_context, **self.params)

            self.execution_time = time.time() - start_time
            self.status = "completed"
            return self.result

        except Exception as e:
            self.status = "failed"
            self.error = e
            logging.getLogger(LOGGER_NAME).error(f"Erro no passo '{self.name}': {e}")
            raise


class PipelineConfig:
    """Classe para configuração do pipeline."""

    def __init__(self, config_dict: Dict = None, config_file: str = None):
        """
        Inicializa uma nova configuração de pipeline.

        Args:
            config_dict: Dicionário de configuração, aplicado sobre o conteúdo do arquivo
            config_file: Caminho para um arquivo de configuração JSON
        """
        self.config = {}

        if config_file:
            if not os.path.exists(config_file):
                raise PipelineConfigError(f"Arquivo de configuração não encontrado: {config_file}")
            with open(config_file, 'r') as f:
                try:
                    self.config = json.load(f)
                except json.JSONDecodeError as e:
                    raise PipelineConfigError(f"Arquivo de configuração inválido {config_file}: {e}") from e

        if config_dict:
            self.config.update(config_dict)

    def get_step_config(self, step_name: str) -> Dict:
        """
        Obtém os parâmetros de um passo.

        Args:
            step_name: Nome do passo

        Returns:
            Parâmetros do passo
        """
        for step in self.config.get('steps', []):
            if step['name'] == step_name:
                return step.get('params') or {}

        return {}

    def is_step_enabled(self, step_name: str) -> bool:
        """
        Verifica se um passo está habilitado.

        Args:
            step_name: Nome do passo

        Returns:
            True se o passo está habilitado ou não configurado
        """
        for step in self.config.get('steps', []):
            if step['name'] == step_name:
                return step.get('enabled', True)

        return True

    def get_global_config(self) -> Dict:
        """
        Obtém as configurações globais do pipeline.

        Returns:
            Configuração sem a lista de passos
        """
        config = self.config.copy()
        config.pop('steps', None)
        return config


class Pipeline:
    """Pipeline para leitura, construção do grafo e busca de caminhos em um mapa de alturas."""

    STEP_NAMES = ['load_data', 'parse_height_map', 'create_graph',
                  'solve_forward', 'solve_reverse']

    def __init__(self, config: Union[Dict, PipelineConfig, str] = None):
        """
        Inicializa um novo pipeline.

        Args:
            config: Configuração do pipeline (dicionário, PipelineConfig ou caminho
                para um arquivo JSON). Por padrão, PIPELINE_CONFIG.
        """
        self.graph_builder = GraphBuilder()
        self.path_solver = PathSolver()

        self.context = {
            'raw_text': None,     # Texto de entrada
            'height_map': None,   # HeightMap decodificado
            'climb_graph': None,  # ClimbGraph do mapa de alturas
            'results': {},        # Distâncias por modo de busca
        }

        if isinstance(config, dict):
            self.config = PipelineConfig(config_dict=config)
        elif isinstance(config, PipelineConfig):
            self.config = config
        elif isinstance(config, str):
            self.config = PipelineConfig(config_file=config)
        else:
            self.config = PipelineConfig(config_dict=PIPELINE_CONFIG)

        self.logger = self._setup_logger()

        self.steps = []
        self._setup_steps()

    @classmethod
    def from_text(cls, text: str, config: Union[Dict, PipelineConfig, str] = None) -> 'Pipeline':
        """
        Cria um pipeline cujo texto de entrada já é conhecido.

        O passo load_data é desabilitado.

        Args:
            text: Texto do mapa de alturas
            config: Configuração do pipeline

        Returns:
            Pipeline pronto para execução
        """
        pipeline = cls(config)
        pipeline.context['raw_text'] = text
        pipeline.get_step('load_data').enabled = False
        return pipeline

    def _setup_logger(self) -> logging.Logger:
        """
        Configura o logger do pipeline.

        O nível é aplicado apenas ao logger, a cada novo pipeline; o handler
        de console fica em NOTSET.

        Returns:
            Logger configurado
        """
        settings = self.config.get_global_config().get('logger', {})
        level = getattr(logging, str(settings.get('level', 'INFO')).upper(), logging.INFO)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(level)

        # Handler de console, adicionado uma única vez
        if settings.get('console', True) and not logger.handlers:
            console_handler = logging.StreamHandler()

            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            console_handler.setFormatter(formatter)

            logger.addHandler(console_handler)

        return logger

    def _setup_steps(self):
        """Configura os passos do pipeline."""
        functions = {
            'load_data': self._load_data,
            'parse_height_map': self._parse_height_map,
            'create_graph': self._create_graph,
            'solve_forward': self._solve_forward,
            'solve_reverse': self._solve_reverse,
        }
        self.steps = [
            PipelineStep(name, functions[name],
                         enabled=self.config.is_step_enabled(name),
                         params=self.config.get_step_config(name))
            for name in self.STEP_NAMES
        ]

    def get_step(self, step_name: str) -> Optional[PipelineStep]:
        for step in self.steps:
            if step.name == step_name:
                return step
        return None

    def run(self) -> Dict:
        """
        Executa todos os passos habilitados do pipeline.

        Returns:
            Contexto do pipeline com os resultados
        """
        self.logger.info("Iniciando pipeline")
        start_time = time.time()

        for step in self.steps:
            if step.enabled:
                self.logger.info(f"Executando passo: {step.name}")
                try:
                    step.execute(self.context)
                    self.logger.info(f"Passo {step.name} concluído em {step.execution_time:.2f}s")
                except Exception:
                    if self.config.config.get('stop_on_error', True):
                        raise
            else:
                self.logger.info(f"Passo {step.name} desabilitado")

        total_time = time.time() - start_time
        self.logger.info(f"Pipeline concluído em {total_time:.2f}s")

        return self.context

    def run_step(self, step_name: str) -> Any:
        """
        Executa um passo específico do pipeline.

        Args:
            step_name: Nome do passo

        Returns:
            Resultado do passo
        """
        step = self.get_step(step_name)
        if step is not None and step.enabled:
            self.logger.info(f"Executando passo: {step.name}")
            result = step.execute(self.context)
            self.logger.info(f"Passo {step.name} concluído em {step.execution_time:.2f}s")
            return result

        self.logger.warning(f"Passo {step_name} não encontrado ou desabilitado")
        return None

    def run_steps(self, step_names: List[str]) -> Dict:
        """
        Executa uma sequência de passos do pipeline.

        Args:
            step_names: Nomes dos passos, em ordem

        Returns:
            Contexto do pipeline com os resultados
        """
        self.logger.info(f"Iniciando execução de passos: {', '.join(step_names)}")
        start_time = time.time()

        for step_name in step_names:
            self.run_step(step_name)

        total_time = time.time() - start_time
        self.logger.info(f"Execução concluída em {total_time:.2f}s")

        return self.context

    def _load_data(self, context: Dict, data_directory: str = 'data', day: int = 12,
                   suffix: Optional[str] = None) -> str:
        """
        Carrega o texto de entrada.

        Args:
            context: Contexto do pipeline
            data_directory: Diretório com as entradas
            day: Número do dia
            suffix: Variante da entrada

        Returns:
            Texto bruto de entrada
        """
        text = load_raw(data_directory, day, suffix)
        context['raw_text'] = text
        self.logger.info(f"Entrada carregada de {data_directory}: {len(text)} caracteres")
        return text

    def _parse_height_map(self, context: Dict):
        if context['raw_text'] is None:
            raise PipelineConfigError("Nenhum texto de entrada disponível; habilite load_data ou use from_text()")

        height_map = parse_height_map(context['raw_text'])
        context['height_map'] = height_map
        self.logger.info(f"Mapa de alturas lido: {height_map.n_rows}x{height_map.n_cols}, "
                         f"início={height_map.start}, fim={height_map.end}")
        return height_map

    def _create_graph(self, context: Dict, max_climb: Optional[int] = None):
        if context['height_map'] is None:
            raise PipelineConfigError("Nenhum mapa de alturas disponível; execute parse_height_map antes")

        climb_graph = self.graph_builder.create_climb_graph(context['height_map'], max_climb=max_climb)
        context['climb_graph'] = climb_graph
        self.logger.info(f"Grafo de escalada criado: {climb_graph.number_of_nodes()} nós, "
                         f"{climb_graph.number_of_edges()} arestas")
        return climb_graph

    def _solve_forward(self, context: Dict) -> int:
        distance = self.path_solver.forward(self._require_graph(context))
        context['results']['forward'] = distance
        self.logger.info(f"Distância direta: {distance}")
        return distance

    def _solve_reverse(self, context: Dict, target_elevation: Optional[int] = None) -> int:
        target = elevation_target(target_elevation) if target_elevation is not None else None
        distance = self.path_solver.reverse(self._require_graph(context), target)
        context['results']['reverse'] = distance
        self.logger.info(f"Distância reversa: {distance}")
        return distance

    @staticmethod
    def _require_graph(context: Dict):
        if context['climb_graph'] is None:
            raise PipelineConfigError("Nenhum grafo de escalada disponível; execute create_graph antes")
        return context['climb_graph']
