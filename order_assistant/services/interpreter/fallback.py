"""Deterministic keyword-matching order interpreter."""
import logging
from typing import List, Optional
from order_assistant.services.menu.base import MenuItem
from order_assistant.services.menu.catalog import MenuCatalog
from order_assistant.services.ordering.models import (
    InterpretationResult,
    StructuredOrder,
    StructuredOrderItem,
)
from order_assistant.services.ordering.pricing import compute_taxes, round_currency

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = (
    "I couldn't map that to the menu yet. Could you name the pie or slice you're after?"
)
NO_MATCH_QUESTION = "Which pizza from the menu should I grab for you?"


class KeywordOrderInterpreter:
    """Builds an order from catalog names or ids mentioned in the utterance."""

    def __init__(
        self,
        catalog: MenuCatalog,
        tax_rate: float,
        delivery_fee: Optional[float] = None,
    ):
        self.catalog = catalog
        self.tax_rate = tax_rate
        self.delivery_fee = delivery_fee

    def match_items(self, utterance: str) -> List[MenuItem]:
        """Catalog items whose name or id appears in the utterance."""
        normalized = utterance.lower()
        return [
            item
            for item in self.catalog.iter_items()
            if item.name.lower() in normalized or item.id in normalized
        ]

    def interpret(self, utterance: str, silent: bool = False) -> InterpretationResult:
        """
        Build a best-effort result without the model.

        Args:
            utterance: Latest customer message
            silent: Suppress the no-match message (used after invalid model output)

        Returns:
            Clarification request when nothing matches, otherwise an order
            with quantity 1 per matched item at catalog price
        """
        matched = self.match_items(utterance)
        logger.info(f"[FALLBACK] Matched {len(matched)} items: {[item.id for item in matched]}")

        if not matched:
            return InterpretationResult(
                assistant_message="" if silent else NO_MATCH_MESSAGE,
                requires_clarification=True,
                clarifications=[NO_MATCH_QUESTION],
            )

        items = [
            StructuredOrderItem(id=item.id, name=item.name, quantity=1, price=item.price)
            for item in matched
        ]
        subtotal = round_currency(sum(item.price * item.quantity for item in items))
        taxes = compute_taxes(subtotal, self.tax_rate)
        fees = self.delivery_fee
        total = round_currency(subtotal + taxes + (fees or 0.0))

        summary = ", ".join(f"{item.quantity} {item.name}" for item in items)
        return InterpretationResult(
            assistant_message=f"I matched that to {summary}. Let me know if that's right!",
            order=StructuredOrder(
                items=items,
                subtotal=subtotal,
                taxes=taxes,
                fees=fees,
                total=total,
            ),
        )
