"""Pipeline phases for trace graph simplification, analysis and rendering."""

from .analysis import GraphAnalysisPhase
from .ingestion import GraphIngestionPhase, build_graph
from .serialization import SerializationPhase
from .simplification import ElisionPhase, ZeroDegreePruningPhase
from .validation import ValidationPhase

__all__ = [
    "GraphIngestionPhase",
    "ElisionPhase",
    "ZeroDegreePruningPhase",
    "GraphAnalysisPhase",
    "ValidationPhase",
    "SerializationPhase",
    "build_graph",
]
