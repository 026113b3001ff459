"""Payload schema for charts and diagrams."""

from rechart.dsl.schema import CellValue, ChartConfig, ChartPayload, DiagramPayload

__all__ = [
    "CellValue",
    "ChartConfig",
    "ChartPayload",
    "DiagramPayload",
]
