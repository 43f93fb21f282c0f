"""Order and conversation models."""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversationRole(str, Enum):
    """Author of a conversation turn."""

    CUSTOMER = "customer"
    ASSISTANT = "assistant"

    def __str__(self) -> str:
        return self.value


class ConversationTurn(CamelModel):
    """Single turn of the chat transcript."""

    role: ConversationRole
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AddressContext(CamelModel):
    """Delivery details known for the customer (prompt grounding only)."""

    name: Optional[str] = None
    line1: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None


class StructuredOrderItem(CamelModel):
    """Order line referencing a menu item."""

    id: str
    name: str
    quantity: int = Field(ge=1)
    price: Optional[float] = None
    notes: Optional[str] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def whole_number_quantity(cls, value):
        """Accept whole-number floats such as 2.0 from JSON output."""
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class StructuredOrder(CamelModel):
    """Normalized cart proposal."""

    items: List[StructuredOrderItem] = Field(min_length=1)
    subtotal: Optional[float] = None
    taxes: Optional[float] = None
    fees: Optional[float] = None
    total: Optional[float] = None
    special_instructions: Optional[str] = None
    confirmation_prompt: Optional[str] = None


class InterpretationResult(CamelModel):
    """Outcome of interpreting one customer utterance."""

    assistant_message: str
    requires_clarification: Optional[bool] = None
    clarifications: Optional[List[str]] = None
    order: Optional[StructuredOrder] = None
