"""API routes for view definitions."""

import logging

from fastapi import APIRouter, HTTPException

from graphql_views.views.schemas import ViewDefinition, ViewSummary
from graphql_views.views.storage import get_view_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/views", tags=["views"])


@router.get("", response_model=list[ViewSummary])
async def list_views():
    """List all view definitions (summaries)."""
    return get_view_storage().list_summaries()


@router.get("/{view_id}", response_model=ViewDefinition)
async def get_view(view_id: str):
    """Get a full view definition."""
    storage = get_view_storage()
    view = storage.get(view_id)
    if view is None:
        raise HTTPException(
            status_code=404,
            detail=f"View '{view_id}' not found. Available: {storage.list_keys()}",
        )
    return view
