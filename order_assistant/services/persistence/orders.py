"""Order staging persistence service."""
from typing import Optional, Dict, Any, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from sqlalchemy.orm import selectinload

from order_assistant.db.models import StagedOrder, StagedOrderItem
from order_assistant.services.ordering.models import StructuredOrder
from order_assistant.services.ordering.pricing import OrderSummary


class OrderPersistenceService:
    """Service for persisting staged orders."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def stage_order(
        self,
        customer_email: str,
        order: StructuredOrder,
        summary: OrderSummary,
        delivery_address: Dict[str, Any],
    ) -> StagedOrder:
        """Persist a confirmed order with its resolved lines and totals."""
        staged = StagedOrder(
            customer_email=customer_email,
            status="staged",
            structured_order=order.model_dump(mode="json", by_alias=True, exclude_none=True),
            delivery_address=delivery_address,
            subtotal=summary.subtotal,
            taxes=summary.taxes,
            fees=summary.fees,
            total=summary.total,
            items=[
                StagedOrderItem(
                    menu_item_id=line.id,
                    name=line.name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    notes=line.notes,
                )
                for line in summary.lines
            ],
        )
        self.db.add(staged)
        await self.db.commit()
        return await self.get_order_by_id(staged.id)

    async def get_order_by_id(self, order_id: int) -> Optional[StagedOrder]:
        """Get staged order by ID with items."""
        result = await self.db.execute(
            select(StagedOrder)
            .where(StagedOrder.id == order_id)
            .options(selectinload(StagedOrder.items))
        )
        return result.scalar_one_or_none()

    async def list_orders(self, customer_email: str, limit: int = 50) -> List[StagedOrder]:
        """Get a customer's staged orders, newest first."""
        result = await self.db.execute(
            select(StagedOrder)
            .where(StagedOrder.customer_email == customer_email)
            .options(selectinload(StagedOrder.items))
            .order_by(desc(StagedOrder.created_at), desc(StagedOrder.id))
            .limit(limit)
        )
        return list(result.scalars().all())
