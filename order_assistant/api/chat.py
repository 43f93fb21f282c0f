"""Order chat endpoint."""
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from order_assistant.api.auth import get_session, get_session_token
from order_assistant.core.dependencies import get_order_interpreter
from order_assistant.db.database import get_db
from order_assistant.services.interpreter.interpreter import OrderInterpreter
from order_assistant.services.ordering.models import AddressContext, ConversationTurn
from order_assistant.services.persistence.profiles import (
    ProfilePersistenceService,
    profile_to_address_context,
)

router = APIRouter()
logger = logging.getLogger(__name__)


class InterpretRequest(BaseModel):
    """Chat turn submitted by the customer."""
    message: str = Field(min_length=1)
    history: List[ConversationTurn] = []
    address: Optional[AddressContext] = None


@router.post("/api/interpret")
async def interpret_message(
    request: Request,
    body: InterpretRequest,
    interpreter: OrderInterpreter = Depends(get_order_interpreter),
    db: AsyncSession = Depends(get_db),
):
    """
    Interpret a chat message into an order proposal.

    Always answers with an InterpretationResult body; responds 503 when no
    model credential is configured so clients can tell degraded mode apart.
    """
    address = body.address
    if address is None:
        session = get_session(get_session_token(request))
        if session is not None:
            try:
                profile = await ProfilePersistenceService(db).get_profile(session["email"])
                address = profile_to_address_context(profile)
            except Exception as e:
                logger.error(f"[CHAT] Could not load saved address: {e}", exc_info=True)
                address = None

    outcome = await interpreter.interpret_with_status(body.message, body.history, address)
    logger.info(f"[CHAT] Interpretation source: {outcome.source.value}")

    return JSONResponse(
        content=outcome.result.model_dump(mode="json", by_alias=True, exclude_none=True),
        status_code=200 if outcome.model_configured else 503,
    )
