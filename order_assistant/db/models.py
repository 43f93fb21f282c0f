"""Database models."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, JSON, Float
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class CustomerProfile(Base):
    """Delivery profile keyed by the customer's identity email."""

    __tablename__ = "customer_profiles"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address_line1 = Column(String, nullable=True)
    address_line2 = Column(String, nullable=True)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    postal_code = Column(String, nullable=True)
    delivery_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class StagedOrder(Base):
    """Confirmed order awaiting hand-off to fulfillment."""

    __tablename__ = "staged_orders"

    id = Column(Integer, primary_key=True, index=True)
    customer_email = Column(String, index=True, nullable=False)
    status = Column(String, default="staged", nullable=False)  # staged, cancelled
    structured_order = Column(JSON, nullable=False)
    delivery_address = Column(JSON, nullable=False)
    subtotal = Column(Float, nullable=False)
    taxes = Column(Float, nullable=False)
    fees = Column(Float, nullable=False, default=0.0)
    total = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    items = relationship("StagedOrderItem", back_populates="order", cascade="all, delete-orphan")


class StagedOrderItem(Base):
    """Line of a staged order."""

    __tablename__ = "staged_order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("staged_orders.id"), nullable=False)
    menu_item_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    quantity = Column(Integer, default=1, nullable=False)
    unit_price = Column(Float, nullable=False)
    notes = Column(Text, nullable=True)

    # Relationships
    order = relationship("StagedOrder", back_populates="items")
