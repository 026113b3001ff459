"""Dashboard overview routes."""

from collections import Counter

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from rechart.api.dependencies import CurrentUserId
from rechart.api.routes.charts import ChartResponse
from rechart.db.base import get_db
from rechart.db.models import Chart, Diagram

router = APIRouter()

RECENT_CHART_COUNT = 5


class OverviewResponse(BaseModel):
    """Counts and recent activity for the caller."""
    model_config = ConfigDict(populate_by_name=True)

    total_charts: int = Field(alias="totalCharts")
    total_diagrams: int = Field(alias="totalDiagrams")
    recent_charts: list[ChartResponse] = Field(alias="recentCharts")
    chart_types: dict[str, int] = Field(alias="chartTypes")


@router.get("/overview", response_model=OverviewResponse)
async def get_overview(
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Totals, most recent charts and per-type chart counts."""
    charts = db.query(Chart).filter(
        Chart.user_id == user_id,
    ).order_by(Chart.updated_at.desc()).all()

    total_diagrams = db.query(Diagram).filter(Diagram.user_id == user_id).count()

    return OverviewResponse(
        total_charts=len(charts),
        total_diagrams=total_diagrams,
        recent_charts=[ChartResponse(**c.to_dict()) for c in charts[:RECENT_CHART_COUNT]],
        chart_types=dict(Counter(c.chart_type for c in charts)),
    )
