"""Share-link and export naming helpers."""

import re
import secrets
from enum import Enum


class ExportFormat(str, Enum):
    """File formats offered by the export collaborator."""

    PNG = "png"
    JPEG = "jpeg"
    PDF = "pdf"


class ResourceType(str, Enum):
    """Kinds of record that can be shared."""

    CHART = "chart"
    DIAGRAM = "diagram"


EMBED_WIDTH = 800
EMBED_HEIGHT = 600


def generate_share_token() -> str:
    """Generate an opaque, URL-safe share token."""
    return secrets.token_urlsafe(16)


def build_share_url(base_url: str, token: str) -> str:
    """Public URL for a share token."""
    return f"{base_url.rstrip('/')}/shared/{token}"


def build_embed_code(share_url: str) -> str:
    """HTML snippet embedding a shared resource."""
    return (
        f'<iframe src="{share_url}?embed=true" width="{EMBED_WIDTH}" '
        f'height="{EMBED_HEIGHT}" frameborder="0"></iframe>'
    )


def export_filename(title: str, export_format: ExportFormat | None = None) -> str:
    """File name for an exported chart or diagram.

    Every character outside a-z/0-9 becomes an underscore and the result is
    lowercased. The extension is appended when a format is given.
    """
    stem = re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower()
    if export_format is None:
        return stem
    return f"{stem}.{ExportFormat(export_format).value}"
