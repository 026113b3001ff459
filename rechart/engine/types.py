"""Closed sets of chart and diagram types."""

from enum import Enum


class ChartType(str, Enum):
    """Supported chart types."""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    AREA = "area"
    SCATTER = "scatter"
    TREND = "trend"

    @classmethod
    def lookup(cls, value: str | None) -> "ChartType | None":
        """Return the matching member, or None for unknown identifiers."""
        try:
            return cls(value)
        except ValueError:
            return None


class DiagramType(str, Enum):
    """Supported Mermaid diagram types."""

    FLOWCHART = "flowchart"
    MINDMAP = "mindmap"
    ORGCHART = "orgchart"
    SEQUENCE = "sequence"
    NETWORK = "network"
    GANTT = "gantt"
    GITGRAPH = "gitgraph"
    JOURNEY = "journey"

    @classmethod
    def lookup(cls, value: str | None) -> "DiagramType | None":
        """Return the matching member, or None for unknown identifiers."""
        try:
            return cls(value)
        except ValueError:
            return None


def display_name(type_name: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return type_name[:1].upper() + type_name[1:]
