"""Interpreter prompt templates."""
from typing import Optional, Sequence
from order_assistant.core.config import settings
from order_assistant.services.ordering.models import (
    AddressContext,
    ConversationRole,
    ConversationTurn,
)

ADDRESS_NOT_PROVIDED = "Delivery address not provided yet."


def get_system_instruction() -> str:
    """Generate the fixed instruction block for the order model."""
    return f"""You are an ordering specialist for {settings.restaurant_name} ({settings.restaurant_website}). Translate the customer's natural language into the official menu items listed below. Respond ONLY with JSON following this TypeScript interface:

interface OrderResponse {{
  assistantMessage: string; // conversational response
  requiresClarification?: boolean;
  clarifications?: string[]; // specific questions to ask
  order?: {{
    items: Array<{{ id: string; name: string; quantity: number; price?: number; notes?: string }}>;
    subtotal?: number;
    taxes?: number;
    fees?: number;
    total?: number;
    specialInstructions?: string;
    confirmationPrompt?: string;
  }};
}}

Rules:
- Always choose the closest menu item.
- If quantity is missing, assume 1.
- Ask clarifying questions if the request is ambiguous or references unavailable items.
- Include a friendly assistantMessage summarizing the interpreted order.
- Total should include subtotal + taxes + fees when possible. If uncertain, omit it.
- Never invent menu items not listed.
- Mention when an item is unavailable."""


def render_address(address: Optional[AddressContext]) -> str:
    """Render known delivery details, or a placeholder when missing."""
    if address is None or not address.line1:
        return ADDRESS_NOT_PROVIDED
    recipient = f" for {address.name}" if address.name else ""
    return (
        f"Current delivery details{recipient}: {address.line1}, {address.city or ''}, "
        f"{address.state or ''} {address.postal_code or ''}."
    )


def render_history(history: Sequence[ConversationTurn]) -> str:
    """Render prior turns as Customer/Assistant lines."""
    return "\n".join(
        f"{'Customer' if turn.role == ConversationRole.CUSTOMER else 'Assistant'}: {turn.text}"
        for turn in history
    )


def build_prompt(
    menu_text: str,
    utterance: str,
    history: Sequence[ConversationTurn] = (),
    address: Optional[AddressContext] = None,
) -> str:
    """Assemble the single grounding context sent to the model."""
    return (
        f"{get_system_instruction()}\n\n"
        f"Menu:\n{menu_text}\n\n"
        f"{render_address(address)}\n\n"
        f"Previous conversation (if any):\n{render_history(history)}\n\n"
        f"Customer: {utterance}"
    )
