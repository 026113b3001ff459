"""Chart and diagram processing routes.

Both endpoints always answer 200 with a renderable payload for a well-formed
request body; AI unavailability or bad model output only changes where the
payload comes from.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from rechart.api.dependencies import ReconcilerDep
from rechart.dsl.schema import ChartPayload, DiagramPayload
from rechart.engine.diagram_templates import diagram_example

logger = logging.getLogger(__name__)

router = APIRouter()


class ProcessDataRequest(BaseModel):
    """Request to turn CSV or a description into chart data."""
    model_config = ConfigDict(populate_by_name=True)

    data: str = Field(..., description="CSV text or natural-language description")
    chart_type: str = Field(..., alias="chartType")
    is_csv: bool = Field(default=False, alias="isCSV")


class ProcessDataResponse(BaseModel):
    """Processed chart payload."""
    model_config = ConfigDict(populate_by_name=True)

    processed_data: ChartPayload = Field(alias="processedData")


class ProcessDiagramRequest(BaseModel):
    """Request to turn a description into a Mermaid diagram."""
    model_config = ConfigDict(populate_by_name=True)

    description: str = ""
    diagram_type: str = Field(..., alias="diagramType")


class ProcessDiagramResponse(BaseModel):
    """Processed diagram payload."""
    model_config = ConfigDict(populate_by_name=True)

    processed_data: DiagramPayload = Field(alias="processedData")


class DiagramExampleResponse(BaseModel):
    """Starter Mermaid text for a diagram type."""
    model_config = ConfigDict(populate_by_name=True)

    diagram_type: str = Field(alias="diagramType")
    mermaid_code: str = Field(alias="mermaidCode")


@router.post("/process-data", response_model=ProcessDataResponse)
def process_data(request: ProcessDataRequest, reconciler: ReconcilerDep):
    """Convert CSV text or a description into a chart payload."""
    result = reconciler.reconcile_chart(request.data, request.chart_type, request.is_csv)
    logger.info(
        f"Processed {request.chart_type} chart data from {result.source.value}"
        + (f" ({result.model})" if result.model else "")
    )
    return ProcessDataResponse(processed_data=result.payload)


@router.post("/process-diagram", response_model=ProcessDiagramResponse)
def process_diagram(request: ProcessDiagramRequest, reconciler: ReconcilerDep):
    """Convert a description into a diagram payload."""
    result = reconciler.reconcile_diagram(request.description, request.diagram_type)
    logger.info(
        f"Processed {request.diagram_type} diagram from {result.source.value}"
        + (f" ({result.model})" if result.model else "")
    )
    return ProcessDiagramResponse(processed_data=result.payload)


@router.get("/examples/diagrams/{diagram_type}", response_model=DiagramExampleResponse)
async def get_diagram_example(diagram_type: str):
    """Example Mermaid source shown when a diagram type is picked."""
    return DiagramExampleResponse(
        diagram_type=diagram_type,
        mermaid_code=diagram_example(diagram_type),
    )
