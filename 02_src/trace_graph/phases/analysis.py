"""Labeling analysis phase powered by a LangGraph workflow."""

from typing import Any, Dict

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..frames import join_nodes_by_frame, join_nodes_with_zero_degree
from ..graph import TraceGraph
from ..pipeline import PipelinePhase
from ..scc import collapse_by_command_type


class AnalysisState(TypedDict, total=False):
    graph: TraceGraph
    type_components: Dict[int, int]
    frame_count: int
    unused_count: int


class GraphAnalysisPhase(PipelinePhase):
    """Stamps command-type component, frame and unused tags onto node labels.

    Steps run in a fixed order so the tags compose the same way every time:
    the component suffix first, then the frame prefix, then the unused prefix.
    """

    phase_name = "analysis"

    def __init__(
        self,
        collapse_command_types: bool = True,
        join_frames: bool = True,
        mark_unused_nodes: bool = True,
    ) -> None:
        self._collapse_command_types = collapse_command_types
        self._join_frames = join_frames
        self._mark_unused_nodes = mark_unused_nodes

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph = self.require_graph(context)
        workflow = self._build_workflow()
        result_state = workflow.invoke(
            {"graph": graph, "type_components": {}, "frame_count": 0, "unused_count": 0}
        )
        return {
            "type_components": result_state.get("type_components", {}),
            "frame_count": result_state.get("frame_count", 0),
            "unused_count": result_state.get("unused_count", 0),
        }

    def _build_workflow(self):
        steps = []
        if self._collapse_command_types:
            steps.append(("collapse_command_types", self._collapse))
        if self._join_frames:
            steps.append(("join_frames", self._frames))
        if self._mark_unused_nodes:
            steps.append(("mark_unused", self._unused))

        graph = StateGraph(AnalysisState)
        previous = START
        for step_name, step in steps:
            graph.add_node(step_name, step)
            graph.add_edge(previous, step_name)
            previous = step_name
        if previous == START:
            graph.add_node("noop", self._noop)
            graph.add_edge(START, "noop")
            previous = "noop"
        graph.add_edge(previous, END)
        return graph.compile()

    @staticmethod
    def _collapse(state: AnalysisState) -> Dict[str, Any]:
        return {"type_components": collapse_by_command_type(state["graph"])}

    @staticmethod
    def _frames(state: AnalysisState) -> Dict[str, Any]:
        return {"frame_count": join_nodes_by_frame(state["graph"])}

    @staticmethod
    def _unused(state: AnalysisState) -> Dict[str, Any]:
        return {"unused_count": join_nodes_with_zero_degree(state["graph"])}

    @staticmethod
    def _noop(state: AnalysisState) -> Dict[str, Any]:
        return {"frame_count": state.get("frame_count", 0)}
