"""Order staging and history endpoints."""
import json
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from order_assistant.api.auth import require_customer
from order_assistant.core.config import settings
from order_assistant.core.dependencies import get_menu_catalog
from order_assistant.db.database import get_db
from order_assistant.db.models import StagedOrder
from order_assistant.services.menu.catalog import MenuCatalog
from order_assistant.services.ordering.models import CamelModel, StructuredOrder
from order_assistant.services.ordering.pricing import OrderSummary, summarize_order
from order_assistant.services.persistence.orders import OrderPersistenceService


router = APIRouter()
logger = logging.getLogger(__name__)


class DeliveryAddress(CamelModel):
    """Delivery details attached to a placed order."""
    name: Optional[str] = None
    email: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    phone: Optional[str] = None
    delivery_notes: Optional[str] = None


class PlaceOrderRequest(CamelModel):
    """Confirmed cart and where to deliver it."""
    order: StructuredOrder
    address: DeliveryAddress


class PlaceOrderResponse(CamelModel):
    ok: bool
    message: str
    order_id: int
    summary: OrderSummary


class StagedOrderItemResponse(CamelModel):
    menu_item_id: str
    name: str
    quantity: int
    unit_price: float
    notes: Optional[str] = None


class StagedOrderResponse(CamelModel):
    id: int
    status: str
    created_at: str
    subtotal: float
    taxes: float
    fees: float
    total: float
    delivery_address: dict
    items: List[StagedOrderItemResponse] = []

    @classmethod
    def from_record(cls, order: StagedOrder) -> "StagedOrderResponse":
        return cls(
            id=order.id,
            status=order.status,
            created_at=order.created_at.isoformat() if order.created_at else "",
            subtotal=order.subtotal,
            taxes=order.taxes,
            fees=order.fees,
            total=order.total,
            delivery_address=order.delivery_address or {},
            items=[
                StagedOrderItemResponse(
                    menu_item_id=item.menu_item_id,
                    name=item.name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    notes=item.notes,
                )
                for item in order.items
            ],
        )


@router.post("/api/place-order", response_model=PlaceOrderResponse)
async def place_order(
    body: PlaceOrderRequest,
    email: str = Depends(require_customer),
    catalog: MenuCatalog = Depends(get_menu_catalog),
    db: AsyncSession = Depends(get_db),
):
    """Stage a confirmed order. Nothing is sent to a kitchen system."""
    summary = summarize_order(body.order, catalog, settings.tax_rate)
    address = body.address.model_dump(mode="json", by_alias=True, exclude_none=True)

    try:
        staged = await OrderPersistenceService(db).stage_order(
            customer_email=email,
            order=body.order,
            summary=summary,
            delivery_address=address,
        )
    except Exception as e:
        logger.error(
            f"[PLACE ORDER] Error staging order - customer: {email}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error staging order: {str(e)}")

    payload = {
        "orderId": staged.id,
        "user": email,
        "order": summary.model_dump(mode="json", by_alias=True, exclude_none=True),
        "address": address,
    }
    logger.info(f"[PLACE ORDER] {settings.restaurant_name} order staged:\n{json.dumps(payload, indent=2)}")

    return PlaceOrderResponse(
        ok=True,
        message=f"Order staged. Wire this payload to {settings.restaurant_name}'s ordering endpoint when available.",
        order_id=staged.id,
        summary=summary,
    )


@router.get("/api/orders/history", response_model=List[StagedOrderResponse])
async def get_order_history(
    limit: int = 50,
    email: str = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
):
    """Get the signed-in customer's staged orders."""
    logger.info(f"[ORDERS HISTORY] Request received - customer: {email}, limit: {limit}")
    try:
        orders = await OrderPersistenceService(db).list_orders(email, limit=limit)
    except Exception as e:
        logger.error(
            f"[ORDERS HISTORY] Error fetching order history - "
            f"limit: {limit}, Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error fetching order history: {str(e)}")

    return [StagedOrderResponse.from_record(order) for order in orders]
