"""Saved chart routes."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy import or_
from sqlalchemy.orm import Session

from rechart.api.dependencies import CurrentUserId
from rechart.db.base import get_db
from rechart.db.models import Chart
from rechart.dsl.schema import ChartPayload

router = APIRouter()


class ChartCreate(BaseModel):
    """Request to save a chart."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    chart_type: str = Field(..., min_length=1, max_length=50)
    payload: ChartPayload


class ChartUpdate(BaseModel):
    """Request to update a saved chart."""
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    chart_type: str | None = None
    payload: ChartPayload | None = None


class ChartResponse(BaseModel):
    """Saved chart."""
    id: str
    user_id: str
    title: str
    description: str | None
    chart_type: str
    chart_data: list[dict[str, Any]]
    config: dict[str, Any]
    insights: str | None
    created_at: str
    updated_at: str


class ChartListResponse(BaseModel):
    """Saved chart list."""
    charts: list[ChartResponse]
    total: int
    limit: int
    offset: int


def _get_owned_chart(db: Session, chart_id: str, user_id: str) -> Chart:
    chart = db.query(Chart).filter(
        Chart.id == chart_id,
        Chart.user_id == user_id,
    ).first()

    if not chart:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chart not found",
        )
    return chart


@router.get("", response_model=ChartListResponse)
async def list_charts(
    user_id: CurrentUserId,
    chart_type: str | None = None,
    search: str | None = None,
    limit: int = 50,
    offset: int = 0,
    db: Session = Depends(get_db),
):
    """List the caller's charts, most recently updated first."""
    query = db.query(Chart).filter(Chart.user_id == user_id)

    if chart_type and chart_type != "all":
        query = query.filter(Chart.chart_type == chart_type)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Chart.title.ilike(pattern), Chart.description.ilike(pattern))
        )

    total = query.count()
    charts = query.order_by(Chart.updated_at.desc()).offset(offset).limit(limit).all()

    return ChartListResponse(
        charts=[ChartResponse(**c.to_dict()) for c in charts],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.post("", response_model=ChartResponse)
async def create_chart(
    request: ChartCreate,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Save a chart payload."""
    chart = Chart.from_payload(
        request.payload,
        user_id=user_id,
        chart_type=request.chart_type,
        title=request.title,
        description=request.description,
    )
    db.add(chart)
    db.commit()
    db.refresh(chart)

    return ChartResponse(**chart.to_dict())


@router.get("/{chart_id}", response_model=ChartResponse)
async def get_chart(
    chart_id: str,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Get a saved chart."""
    chart = _get_owned_chart(db, chart_id, user_id)
    return ChartResponse(**chart.to_dict())


@router.get("/{chart_id}/payload", response_model=ChartPayload)
async def get_chart_payload(
    chart_id: str,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Get a saved chart as a renderable payload."""
    chart = _get_owned_chart(db, chart_id, user_id)
    return chart.to_payload()


@router.put("/{chart_id}", response_model=ChartResponse)
async def update_chart(
    chart_id: str,
    request: ChartUpdate,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Update a saved chart."""
    chart = _get_owned_chart(db, chart_id, user_id)

    # Update fields
    if request.title is not None:
        chart.title = request.title
    if request.description is not None:
        chart.description = request.description or None
    if request.chart_type is not None:
        chart.chart_type = request.chart_type
    if request.payload is not None:
        chart.chart_data = [dict(row) for row in request.payload.chart_data]
        chart.config = request.payload.config.model_dump(by_alias=True)
        chart.insights = request.payload.insights or None

    db.commit()
    db.refresh(chart)

    return ChartResponse(**chart.to_dict())


@router.delete("/{chart_id}")
async def delete_chart(
    chart_id: str,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Delete a saved chart."""
    chart = _get_owned_chart(db, chart_id, user_id)
    db.delete(chart)
    db.commit()

    return {"message": "Chart deleted"}
