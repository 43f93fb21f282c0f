"""Delivery profile endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from order_assistant.api.auth import require_customer
from order_assistant.db.database import get_db
from order_assistant.db.models import CustomerProfile
from order_assistant.services.ordering.models import CamelModel
from order_assistant.services.persistence.profiles import ProfilePersistenceService

router = APIRouter()
logger = logging.getLogger(__name__)


class ProfileUpdate(CamelModel):
    """Delivery address payload."""
    name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    line1: str = Field(min_length=1)
    line2: Optional[str] = None
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    postal_code: str = Field(min_length=1)
    delivery_notes: Optional[str] = None


class ProfileResponse(CamelModel):
    """Stored delivery profile."""
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    delivery_notes: Optional[str] = None
    updated_at: str

    @classmethod
    def from_record(cls, profile: CustomerProfile) -> "ProfileResponse":
        return cls(
            email=profile.email,
            name=profile.full_name,
            phone=profile.phone,
            line1=profile.address_line1,
            line2=profile.address_line2,
            city=profile.city,
            state=profile.state,
            postal_code=profile.postal_code,
            delivery_notes=profile.delivery_notes,
            updated_at=profile.updated_at.isoformat(),
        )


class ProfileEnvelope(CamelModel):
    profile: Optional[ProfileResponse] = None


@router.get("/api/profile", response_model=ProfileEnvelope)
async def get_profile(
    email: str = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
):
    """Get the signed-in customer's delivery profile."""
    try:
        profile = await ProfilePersistenceService(db).get_profile(email)
    except Exception as e:
        logger.error(
            f"[PROFILE] Error loading profile - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error loading profile: {str(e)}")

    return ProfileEnvelope(profile=ProfileResponse.from_record(profile) if profile else None)


@router.put("/api/profile", response_model=ProfileEnvelope)
async def update_profile(
    update: ProfileUpdate,
    email: str = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
):
    """Save the signed-in customer's delivery address."""
    logger.info(f"[PROFILE] Saving delivery address for {email}")
    try:
        profile = await ProfilePersistenceService(db).upsert_profile(
            email,
            line1=update.line1,
            city=update.city,
            state=update.state,
            postal_code=update.postal_code,
            full_name=update.name,
            phone=update.phone,
            line2=update.line2,
            delivery_notes=update.delivery_notes,
        )
    except Exception as e:
        logger.error(
            f"[PROFILE] Error saving profile - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error saving profile: {str(e)}")

    return ProfileEnvelope(profile=ProfileResponse.from_record(profile))
