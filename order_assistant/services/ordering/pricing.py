"""Order pricing and summary resolution."""
from typing import List, Optional

from order_assistant.services.menu.catalog import MenuCatalog
from order_assistant.services.ordering.models import CamelModel, StructuredOrder


def round_currency(amount: float) -> float:
    """Round a money amount to cents."""
    return round(amount, 2)


def compute_taxes(subtotal: float, tax_rate: float) -> float:
    """Flat sales tax on the subtotal, rounded to cents."""
    return round_currency(subtotal * tax_rate)


class LineSummary(CamelModel):
    """Order line resolved against the catalog."""

    id: str
    name: str
    description: str
    quantity: int
    unit_price: float
    line_total: float
    notes: Optional[str] = None


class OrderSummary(CamelModel):
    """Order with authoritative names and totals."""

    lines: List[LineSummary]
    subtotal: float
    taxes: float
    fees: float
    total: float
    special_instructions: Optional[str] = None


def summarize_order(
    order: StructuredOrder, catalog: MenuCatalog, tax_rate: float
) -> OrderSummary:
    """
    Resolve an order proposal into display lines and totals.

    Totals supplied on the order win; anything missing is computed from
    the lines. The subtotal + taxes + fees relation is not enforced when
    the order carries its own figures.
    """
    lines = []
    for item in order.items:
        menu_item = catalog.find_by_id(item.id)
        if item.price is not None:
            unit_price = item.price
        elif menu_item is not None:
            unit_price = menu_item.price
        else:
            unit_price = 0.0
        lines.append(
            LineSummary(
                id=item.id,
                name=menu_item.name if menu_item else item.name,
                description=menu_item.description if menu_item else "Custom item",
                quantity=item.quantity,
                unit_price=unit_price,
                line_total=round_currency(unit_price * item.quantity),
                notes=item.notes,
            )
        )

    subtotal = order.subtotal
    if subtotal is None:
        subtotal = round_currency(sum(line.unit_price * line.quantity for line in lines))
    taxes = order.taxes if order.taxes is not None else compute_taxes(subtotal, tax_rate)
    fees = order.fees if order.fees is not None else 0.0
    total = order.total
    if total is None:
        total = round_currency(subtotal + taxes + fees)

    return OrderSummary(
        lines=lines,
        subtotal=subtotal,
        taxes=taxes,
        fees=fees,
        total=total,
        special_instructions=order.special_instructions,
    )
