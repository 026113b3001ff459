"""Database models for rechart.

Users live with the authentication collaborator; records only carry the
owning user's id.
"""

from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum as SQLEnum,
    JSON,
    String,
    Text,
)

from rechart.db.base import Base
from rechart.dsl.schema import ChartConfig, ChartPayload, DiagramPayload
from rechart.engine.sharing import ResourceType, generate_share_token


def generate_uuid() -> str:
    """Generate a UUID string."""
    return str(uuid4())


class Chart(Base):
    """Saved chart."""

    __tablename__ = "charts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    chart_type = Column(String(50), nullable=False)

    # Payload body
    chart_data = Column(JSON, nullable=False)
    config = Column(JSON, nullable=False)
    insights = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Chart {self.id[:8]} ({self.chart_type})>"

    @classmethod
    def from_payload(
        cls,
        payload: ChartPayload,
        user_id: str,
        chart_type: str,
        title: str,
        description: str | None = None,
    ) -> "Chart":
        """Build a record from a payload.

        The saved title and description come from the save form, not the
        payload; insights are kept from the payload.
        """
        return cls(
            user_id=user_id,
            title=title,
            description=description or None,
            chart_type=chart_type,
            chart_data=[dict(row) for row in payload.chart_data],
            config=payload.config.model_dump(by_alias=True),
            insights=payload.insights or None,
        )

    def to_payload(self) -> ChartPayload:
        """Rebuild the payload this record was saved from."""
        return ChartPayload(
            chart_data=self.chart_data,
            config=ChartConfig.model_validate(self.config),
            title=self.title,
            description=self.description or "",
            insights=self.insights or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize as a flat record."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "chart_type": self.chart_type,
            "chart_data": self.chart_data,
            "config": self.config,
            "insights": self.insights,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class Diagram(Base):
    """Saved Mermaid diagram."""

    __tablename__ = "diagrams"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    diagram_type = Column(String(50), nullable=False)

    mermaid_code = Column(Text, nullable=False)
    diagram_data = Column(JSON, nullable=True)  # Full payload as rendered

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Diagram {self.id[:8]} ({self.diagram_type})>"

    @classmethod
    def from_payload(
        cls,
        payload: DiagramPayload,
        user_id: str,
        diagram_type: str,
        title: str,
        description: str | None = None,
    ) -> "Diagram":
        """Build a record from a payload."""
        return cls(
            user_id=user_id,
            title=title,
            description=description or None,
            diagram_type=diagram_type,
            mermaid_code=payload.mermaid_code,
            diagram_data=payload.to_wire(),
        )

    def to_payload(self) -> DiagramPayload:
        """Rebuild the payload this record was saved from."""
        return DiagramPayload(
            mermaid_code=self.mermaid_code,
            title=self.title,
            description=self.description or "",
            diagram_type=self.diagram_type,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize as a flat record."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "diagram_type": self.diagram_type,
            "mermaid_code": self.mermaid_code,
            "diagram_data": self.diagram_data,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class SharedResource(Base):
    """Public share link for one chart or diagram."""

    __tablename__ = "shared_resources"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    resource_id = Column(String(36), nullable=False, index=True)
    resource_type = Column(SQLEnum(ResourceType), nullable=False)
    user_id = Column(String(36), nullable=False, index=True)

    share_token = Column(String(64), unique=True, nullable=False, index=True, default=generate_share_token)
    is_public = Column(Boolean, default=True, nullable=False)
    allow_embed = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<SharedResource {self.resource_type} {self.resource_id[:8]}>"
