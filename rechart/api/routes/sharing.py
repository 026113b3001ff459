"""Share-link routes.

Creating a share link needs the owner's identity; reading one through its
token is public.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from rechart.api.config import Settings, get_settings
from rechart.api.dependencies import CurrentUserId
from rechart.db.base import get_db
from rechart.db.models import Chart, Diagram, SharedResource
from rechart.engine.sharing import (
    ResourceType,
    build_embed_code,
    build_share_url,
    generate_share_token,
)

router = APIRouter()

RESOURCE_MODELS = {
    ResourceType.CHART: Chart,
    ResourceType.DIAGRAM: Diagram,
}


class ShareCreate(BaseModel):
    """Request to share a chart or diagram."""
    resource_id: str
    resource_type: ResourceType
    allow_embed: bool = False


class ShareResponse(BaseModel):
    """Created share link."""
    share_token: str
    share_url: str
    embed_code: str
    allow_embed: bool


class SharedResourceResponse(BaseModel):
    """Publicly shared record."""
    model_config = ConfigDict(populate_by_name=True)

    resource: dict[str, Any]
    resource_type: ResourceType = Field(alias="resourceType")
    is_embed: bool = Field(alias="isEmbed")


@router.post("/share", response_model=ShareResponse)
async def create_share(
    request: ShareCreate,
    user_id: CurrentUserId,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Publish a chart or diagram under a new share token."""
    model = RESOURCE_MODELS[request.resource_type]
    resource = db.query(model).filter(
        model.id == request.resource_id,
        model.user_id == user_id,
    ).first()

    if not resource:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{request.resource_type.value.capitalize()} not found",
        )

    shared = SharedResource(
        resource_id=resource.id,
        resource_type=request.resource_type,
        user_id=user_id,
        share_token=generate_share_token(),
        is_public=True,
        allow_embed=request.allow_embed,
    )
    db.add(shared)
    db.commit()
    db.refresh(shared)

    share_url = build_share_url(settings.public_base_url, shared.share_token)

    return ShareResponse(
        share_token=shared.share_token,
        share_url=share_url,
        embed_code=build_embed_code(share_url),
        allow_embed=shared.allow_embed,
    )


@router.get("/shared/{token}", response_model=SharedResourceResponse)
async def get_shared_resource(
    token: str,
    embed: bool = False,
    db: Session = Depends(get_db),
):
    """Fetch a publicly shared chart or diagram by token."""
    shared = db.query(SharedResource).filter(
        SharedResource.share_token == token,
        SharedResource.is_public == True,
    ).first()

    if not shared:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resource not found",
        )

    if embed and not shared.allow_embed:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Embedding not allowed",
        )

    model = RESOURCE_MODELS[shared.resource_type]
    resource = db.query(model).filter(model.id == shared.resource_id).first()

    if not resource:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{shared.resource_type.value.capitalize()} not found",
        )

    return SharedResourceResponse(
        resource=resource.to_dict(),
        resource_type=shared.resource_type,
        is_embed=embed,
    )
