"""Pydantic v2 models for the canonical chart and diagram payloads.

Every path through the pipeline (AI completion, CSV fallback, canned sample,
diagram template) ends in one of these two models. Field names on the wire
are camelCase to match what the browser renderers consume; Python code uses
the snake_case attribute names.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# A single cell of chart data after coercion
CellValue = Union[int, float, str]


class ChartConfig(BaseModel):
    """Axis configuration for a chart."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    x_key: str = Field(alias="xKey", description="Key used for the category / x axis")
    y_key: str = Field(alias="yKey", description="Key used for the measure / y axis")


class ChartPayload(BaseModel):
    """Chart-ready data plus presentation text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chart_data: list[dict[str, Any]] = Field(
        alias="chartData",
        description="Records to plot, one mapping per data point",
    )
    config: ChartConfig
    title: str = ""
    description: str = ""
    insights: str = ""

    @field_validator("title", "description", "insights", mode="before")
    @classmethod
    def _null_text_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)


class DiagramPayload(BaseModel):
    """Mermaid source for a process diagram plus presentation text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mermaid_code: str = Field(alias="mermaidCode", description="Mermaid diagram source")
    title: str = ""
    description: str = ""
    diagram_type: str = Field(alias="diagramType", description="Declared diagram type")

    @field_validator("title", "description", mode="before")
    @classmethod
    def _null_text_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("mermaid_code")
    @classmethod
    def _mermaid_code_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("mermaidCode must not be empty")
        return value

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)
