"""Menu API endpoints."""
import logging
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from typing import List

from order_assistant.core.dependencies import get_menu_catalog
from order_assistant.services.menu.base import MenuCategory
from order_assistant.services.menu.catalog import MenuCatalog

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuResponse(BaseModel):
    """Menu response model."""
    categories: List[MenuCategory]


@router.get("/api/menu", response_model=MenuResponse, response_model_exclude_none=True)
async def get_menu(
    request: Request,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    """Get the full menu."""
    logger.info(
        f"[MENU] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )
    return MenuResponse(categories=list(catalog.list_categories()))
