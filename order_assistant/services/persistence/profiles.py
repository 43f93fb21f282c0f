"""Customer profile persistence service."""
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from order_assistant.db.models import CustomerProfile
from order_assistant.services.ordering.models import AddressContext


class ProfilePersistenceService:
    """Service for persisting delivery profiles."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_profile(self, email: str) -> Optional[CustomerProfile]:
        """Get profile by customer email."""
        result = await self.db.execute(
            select(CustomerProfile).where(CustomerProfile.email == email)
        )
        return result.scalar_one_or_none()

    async def upsert_profile(
        self,
        email: str,
        line1: str,
        city: str,
        state: str,
        postal_code: str,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
        line2: Optional[str] = None,
        delivery_notes: Optional[str] = None,
    ) -> CustomerProfile:
        """Create or replace the delivery details for a customer."""
        profile = await self.get_profile(email)
        if profile is None:
            profile = CustomerProfile(email=email)
            self.db.add(profile)

        profile.full_name = full_name
        profile.phone = phone
        profile.address_line1 = line1
        profile.address_line2 = line2
        profile.city = city
        profile.state = state
        profile.postal_code = postal_code
        profile.delivery_notes = delivery_notes
        profile.updated_at = datetime.utcnow()

        await self.db.commit()
        await self.db.refresh(profile)
        return profile


def profile_to_address_context(profile: Optional[CustomerProfile]) -> Optional[AddressContext]:
    """Build interpreter address context from a stored profile."""
    if profile is None:
        return None
    return AddressContext(
        name=profile.full_name,
        line1=profile.address_line1,
        city=profile.city,
        state=profile.state,
        postal_code=profile.postal_code,
    )
