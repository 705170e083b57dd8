"""API routes for GraphQL field definitions derived from views.

Consumers building a GraphQL schema fetch the derived definitions here and
register one field per entry.
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from graphql_views import config
from graphql_views.deriver import get_view_field_deriver, reset_view_field_deriver
from graphql_views.entities.registry import get_entity_type_registry
from graphql_views.interfaces.registry import get_interface_registry
from graphql_views.views.storage import get_view_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fields", tags=["fields"])


@router.get("", response_model=dict[str, dict[str, Any]])
async def list_fields():
    """Derive field definitions for all GraphQL displays."""
    return get_view_field_deriver().derive_all(config.BASE_FIELD_DEFINITION)


@router.post("/rebuild")
async def rebuild_fields():
    """Reload every definition source and derive the fields from scratch."""
    get_entity_type_registry().reload()
    get_interface_registry().reload()
    get_view_storage().reload()
    reset_view_field_deriver()

    fields = get_view_field_deriver().derive_all(config.BASE_FIELD_DEFINITION)
    logger.info(f"Rebuilt {len(fields)} view fields")
    return {"status": "rebuilt", "fields": len(fields)}


@router.get("/{field_id}", response_model=dict[str, Any])
async def get_field(field_id: str):
    """Get one derived field definition by '<view id>-<display id>'."""
    field = get_view_field_deriver().derive_one(field_id, config.BASE_FIELD_DEFINITION)
    if field is None:
        raise HTTPException(status_code=404, detail=f"Field '{field_id}' not found")
    return field
