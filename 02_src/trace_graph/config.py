"""Pipeline settings loaded from the environment or a .env file."""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from dotenv import load_dotenv

from .serializers import SERIALIZERS

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PipelineSettings:
    output_formats: Tuple[str, ...] = ("dot", "pbtxt")
    elide_command_types: FrozenSet[int] = field(default_factory=frozenset)
    remove_unused_nodes: bool = False
    mark_unused_nodes: bool = True
    collapse_command_types: bool = True
    join_frames: bool = True

    def __post_init__(self) -> None:
        unknown = [fmt for fmt in self.output_formats if fmt not in SERIALIZERS]
        if unknown:
            raise ValueError(f"Unknown output formats: {', '.join(unknown)}")

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        load_dotenv()
        return cls(
            output_formats=_read_formats("TRACE_GRAPH_OUTPUT_FORMATS", cls.output_formats),
            elide_command_types=_read_int_set("TRACE_GRAPH_ELIDE_COMMAND_TYPES"),
            remove_unused_nodes=_read_bool("TRACE_GRAPH_REMOVE_UNUSED", False),
            mark_unused_nodes=_read_bool("TRACE_GRAPH_MARK_UNUSED", True),
            collapse_command_types=_read_bool("TRACE_GRAPH_COLLAPSE_COMMAND_TYPES", True),
            join_frames=_read_bool("TRACE_GRAPH_JOIN_FRAMES", True),
        )


def _split(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _read_formats(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    formats = tuple(part.lower() for part in _split(raw))
    unknown = [fmt for fmt in formats if fmt not in SERIALIZERS]
    if unknown:
        raise ValueError(f"{name} contains unknown formats: {', '.join(unknown)}")
    return formats


def _read_int_set(name: str) -> FrozenSet[int]:
    values = set()
    for part in _split(os.getenv(name, "")):
        try:
            values.add(int(part))
        except ValueError as error:
            raise ValueError(f"{name} must be a comma separated list of integers, got {part!r}") from error
    return frozenset(values)


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
