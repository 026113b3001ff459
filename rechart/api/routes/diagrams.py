"""Saved diagram routes."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy import or_
from sqlalchemy.orm import Session

from rechart.api.dependencies import CurrentUserId
from rechart.db.base import get_db
from rechart.db.models import Diagram
from rechart.dsl.schema import DiagramPayload

router = APIRouter()


class DiagramCreate(BaseModel):
    """Request to save a diagram."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    diagram_type: str = Field(..., min_length=1, max_length=50)
    payload: DiagramPayload


class DiagramUpdate(BaseModel):
    """Request to update a saved diagram."""
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    diagram_type: str | None = None
    payload: DiagramPayload | None = None


class DiagramResponse(BaseModel):
    """Saved diagram."""
    id: str
    user_id: str
    title: str
    description: str | None
    diagram_type: str
    mermaid_code: str
    diagram_data: dict[str, Any] | None
    created_at: str
    updated_at: str


class DiagramListResponse(BaseModel):
    """Saved diagram list."""
    diagrams: list[DiagramResponse]
    total: int
    limit: int
    offset: int


def _get_owned_diagram(db: Session, diagram_id: str, user_id: str) -> Diagram:
    diagram = db.query(Diagram).filter(
        Diagram.id == diagram_id,
        Diagram.user_id == user_id,
    ).first()

    if not diagram:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Diagram not found",
        )
    return diagram


@router.get("", response_model=DiagramListResponse)
async def list_diagrams(
    user_id: CurrentUserId,
    diagram_type: str | None = None,
    search: str | None = None,
    limit: int = 50,
    offset: int = 0,
    db: Session = Depends(get_db),
):
    """List the caller's diagrams, most recently updated first."""
    query = db.query(Diagram).filter(Diagram.user_id == user_id)

    if diagram_type and diagram_type != "all":
        query = query.filter(Diagram.diagram_type == diagram_type)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Diagram.title.ilike(pattern), Diagram.description.ilike(pattern))
        )

    total = query.count()
    diagrams = query.order_by(Diagram.updated_at.desc()).offset(offset).limit(limit).all()

    return DiagramListResponse(
        diagrams=[DiagramResponse(**d.to_dict()) for d in diagrams],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.post("", response_model=DiagramResponse)
async def create_diagram(
    request: DiagramCreate,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Save a diagram payload."""
    diagram = Diagram.from_payload(
        request.payload,
        user_id=user_id,
        diagram_type=request.diagram_type,
        title=request.title,
        description=request.description,
    )
    db.add(diagram)
    db.commit()
    db.refresh(diagram)

    return DiagramResponse(**diagram.to_dict())


@router.get("/{diagram_id}", response_model=DiagramResponse)
async def get_diagram(
    diagram_id: str,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Get a saved diagram."""
    diagram = _get_owned_diagram(db, diagram_id, user_id)
    return DiagramResponse(**diagram.to_dict())


@router.get("/{diagram_id}/payload", response_model=DiagramPayload)
async def get_diagram_payload(
    diagram_id: str,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Get a saved diagram as a renderable payload."""
    diagram = _get_owned_diagram(db, diagram_id, user_id)
    return diagram.to_payload()


@router.put("/{diagram_id}", response_model=DiagramResponse)
async def update_diagram(
    diagram_id: str,
    request: DiagramUpdate,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Update a saved diagram."""
    diagram = _get_owned_diagram(db, diagram_id, user_id)

    if request.title is not None:
        diagram.title = request.title
    if request.description is not None:
        diagram.description = request.description or None
    if request.diagram_type is not None:
        diagram.diagram_type = request.diagram_type
    if request.payload is not None:
        diagram.mermaid_code = request.payload.mermaid_code
        diagram.diagram_data = request.payload.to_wire()

    db.commit()
    db.refresh(diagram)

    return DiagramResponse(**diagram.to_dict())


@router.delete("/{diagram_id}")
async def delete_diagram(
    diagram_id: str,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
):
    """Delete a saved diagram."""
    diagram = _get_owned_diagram(db, diagram_id, user_id)
    db.delete(diagram)
    db.commit()

    return {"message": "Diagram deleted"}
