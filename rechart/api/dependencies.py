"""FastAPI dependencies for caller identity and the processing pipeline."""

from typing import Annotated, Generator

from fastapi import Depends, Header, HTTPException, status

from rechart.api.config import Settings, get_settings
from rechart.llm.client import LLMConfig
from rechart.llm.reconciler import Reconciler


async def get_current_user_id(
    x_user_id: str | None = Header(default=None),
) -> str:
    """Get the id of the caller.

    Authentication is handled upstream; the gateway forwards the verified
    user id in the X-User-ID header.

    Raises:
        HTTPException: If no user id was forwarded.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return x_user_id


def get_reconciler(
    settings: Settings = Depends(get_settings),
) -> Generator[Reconciler, None, None]:
    """Yield a reconciler for the current settings, closed after the request."""
    reconciler = Reconciler(LLMConfig.from_settings(settings))
    try:
        yield reconciler
    finally:
        reconciler.close()


# Type aliases for common dependencies
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
ReconcilerDep = Annotated[Reconciler, Depends(get_reconciler)]
