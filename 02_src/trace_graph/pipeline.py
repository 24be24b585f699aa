"""Pipeline abstractions and sequential runner."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from .graph import TraceGraph

logger = logging.getLogger(__name__)


class PipelinePhase(ABC):
    phase_name: str

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    @staticmethod
    def require_graph(context: Dict[str, Any]) -> TraceGraph:
        graph = context.get("graph")
        if not isinstance(graph, TraceGraph):
            raise RuntimeError("No trace graph in pipeline context; run ingestion first.")
        return graph


class PipelineRunner:
    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        for phase in self.phases:
            logger.info("Running phase %s", phase.phase_name)
            phase_result = phase.run(current)
            if not isinstance(phase_result, dict):
                raise TypeError(f"Phase '{phase.phase_name}' must return dict context.")
            current.update(phase_result)
        return current
