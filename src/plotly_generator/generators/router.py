"""
GeneratorRouter - picks the generator for a payload's chart type.

Uses a registry so new chart types can be added without touching the router.
"""

from typing import Dict, List, Type

from src.plotly_generator.generators.bar_generator import BarGenerator
from src.plotly_generator.generators.base import BaseChartGenerator
from src.plotly_generator.generators.line_generator import LineGenerator
from src.plotly_generator.generators.pie_generator import DoughnutGenerator, PieGenerator
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class GeneratorRouter:
    """
    Registry of chart type -> generator class.

    Example:
        >>> router = GeneratorRouter()
        >>> type(router.get_generator("doughnut")).__name__
        'DoughnutGenerator'
    """

    def __init__(self):
        self._registry: Dict[str, Type[BaseChartGenerator]] = {}
        self._register_default_generators()
        logger.debug(f"GeneratorRouter initialized with {len(self._registry)} generators")

    def _register_default_generators(self) -> None:
        self.register("bar", BarGenerator)
        self.register("line", LineGenerator)
        self.register("pie", PieGenerator)
        self.register("doughnut", DoughnutGenerator)

    def register(self, chart_type: str, generator_class: Type[BaseChartGenerator]) -> None:
        """
        Register a generator for ``chart_type``.

        Raises:
            TypeError: If the class does not inherit from BaseChartGenerator
        """
        if not issubclass(generator_class, BaseChartGenerator):
            raise TypeError(f"{generator_class.__name__} must inherit from BaseChartGenerator")

        self._registry[chart_type] = generator_class
        logger.debug(f"Generator registered: '{chart_type}' -> {generator_class.__name__}")

    def get_generator(self, chart_type: str) -> BaseChartGenerator:
        """
        Instantiate the generator for ``chart_type``.

        Raises:
            ValueError: If chart_type is not registered
        """
        if chart_type not in self._registry:
            raise ValueError(
                f"Chart type '{chart_type}' not supported. "
                f"Supported types: {self.get_supported_chart_types()}"
            )

        return self._registry[chart_type]()

    def get_supported_chart_types(self) -> List[str]:
        return list(self._registry.keys())
