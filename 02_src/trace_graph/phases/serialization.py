"""Serialization phase rendering the labeled graph."""

from typing import Any, Dict, Iterable

from ..pipeline import PipelinePhase
from ..serializers import SERIALIZERS


class SerializationPhase(PipelinePhase):
    phase_name = "serialization"

    def __init__(self, output_formats: Iterable[str] = ("dot", "pbtxt")) -> None:
        self._output_formats = tuple(output_formats)
        unknown = [fmt for fmt in self._output_formats if fmt not in SERIALIZERS]
        if unknown:
            raise ValueError(f"Unknown output formats: {', '.join(unknown)}")

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph = self.require_graph(context)
        outputs = {fmt: SERIALIZERS[fmt](graph) for fmt in self._output_formats}
        return {"outputs": outputs}
