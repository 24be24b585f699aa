"""Entry helpers wiring the default trace graph pipeline."""

from typing import Any, Dict, List

from .config import PipelineSettings
from .graph import TraceGraph
from .phases import (
    ElisionPhase,
    GraphAnalysisPhase,
    GraphIngestionPhase,
    SerializationPhase,
    ValidationPhase,
    ZeroDegreePruningPhase,
)
from .pipeline import PipelinePhase, PipelineRunner


def build_default_phases(settings: PipelineSettings) -> List[PipelinePhase]:
    phases: List[PipelinePhase] = [
        GraphIngestionPhase(),
        ElisionPhase(command_types=settings.elide_command_types),
    ]
    if settings.remove_unused_nodes:
        phases.append(ZeroDegreePruningPhase())
    phases.extend(
        [
            GraphAnalysisPhase(
                collapse_command_types=settings.collapse_command_types,
                join_frames=settings.join_frames,
                mark_unused_nodes=settings.mark_unused_nodes,
            ),
            ValidationPhase(),
            SerializationPhase(output_formats=settings.output_formats),
        ]
    )
    return phases


def run_pipeline(
    graph_input: Dict[str, Any] | None = None,
    graph: TraceGraph | None = None,
    settings: PipelineSettings | None = None,
    elide_node_ids: List[int] | None = None,
) -> Dict[str, Any]:
    """Build (or take) a graph, simplify and label it, and render the outputs.

    The returned context holds ``graph``, ``validation_report`` and
    ``outputs`` (format name -> bytes).
    """
    if settings is None:
        settings = PipelineSettings.from_env()
    initial_context: Dict[str, Any] = {
        "graph_input": graph_input or {},
        "elide_node_ids": list(elide_node_ids or []),
    }
    if graph is not None:
        initial_context["graph"] = graph
    runner = PipelineRunner(phases=build_default_phases(settings))
    return runner.run(initial_context)
