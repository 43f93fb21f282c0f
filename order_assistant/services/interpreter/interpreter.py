"""Order interpretation pipeline."""
import logging
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from order_assistant.services.interpreter.fallback import (
    NO_MATCH_MESSAGE,
    NO_MATCH_QUESTION,
    KeywordOrderInterpreter,
)
from order_assistant.services.interpreter.llm import (
    ModelNotConfiguredError,
    ModelOutputError,
    OrderModelClient,
)
from order_assistant.services.interpreter.parser import parse_model_output
from order_assistant.services.interpreter.prompt import build_prompt
from order_assistant.services.menu.catalog import MenuCatalog
from order_assistant.services.ordering.models import (
    AddressContext,
    ConversationTurn,
    InterpretationResult,
)

logger = logging.getLogger(__name__)


class InterpretationSource(str, Enum):
    """Which tier produced an interpretation."""

    MODEL = "model"
    FALLBACK_UNCONFIGURED = "fallback_unconfigured"
    FALLBACK_TRANSPORT_ERROR = "fallback_transport_error"
    FALLBACK_INVALID_OUTPUT = "fallback_invalid_output"

    def __str__(self) -> str:
        return self.value


class InterpretationOutcome(NamedTuple):
    """Interpretation result plus the tier that produced it."""

    result: InterpretationResult
    source: InterpretationSource

    @property
    def model_configured(self) -> bool:
        return self.source != InterpretationSource.FALLBACK_UNCONFIGURED


class OrderInterpreter:
    """Turns a customer utterance into a structured order proposal.

    The model is tried once; on any failure the keyword interpreter takes
    over, and it always produces a result. Nothing is raised to callers.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        model_client: Optional[OrderModelClient] = None,
        tax_rate: float = 0.08875,
        delivery_fee: Optional[float] = None,
    ):
        self.catalog = catalog
        self.model_client = model_client or OrderModelClient()
        self.fallback = KeywordOrderInterpreter(
            catalog, tax_rate=tax_rate, delivery_fee=delivery_fee
        )

    async def interpret(
        self,
        utterance: str,
        history: Sequence[ConversationTurn] = (),
        address: Optional[AddressContext] = None,
    ) -> InterpretationResult:
        """Interpret one utterance."""
        outcome = await self.interpret_with_status(utterance, history, address)
        return outcome.result

    async def interpret_with_status(
        self,
        utterance: str,
        history: Sequence[ConversationTurn] = (),
        address: Optional[AddressContext] = None,
    ) -> InterpretationOutcome:
        """Interpret one utterance and report which tier answered."""
        logger.info(
            f"[INTERPRETER] Utterance: '{utterance}' - history turns: {len(history)}, "
            f"address known: {bool(address and address.line1)}"
        )

        try:
            prompt = build_prompt(self.catalog.render_for_prompt(), utterance, history, address)
            logger.debug(f"[INTERPRETER] Prompt length: {len(prompt)} chars")
            raw_text = await self.model_client.generate(prompt)
            logger.debug(f"[INTERPRETER] Raw model output: {raw_text}")
            result = parse_model_output(raw_text)
        except ModelNotConfiguredError:
            logger.warning("[INTERPRETER] No model credential configured, using keyword fallback")
            return InterpretationOutcome(
                self._fallback(utterance, silent=False),
                InterpretationSource.FALLBACK_UNCONFIGURED,
            )
        except ModelOutputError as e:
            logger.error(f"[INTERPRETER] {e} - raw output: {e.raw_text!r}")
            return InterpretationOutcome(
                self._fallback(utterance, silent=True),
                InterpretationSource.FALLBACK_INVALID_OUTPUT,
            )
        except Exception as e:
            logger.error(
                f"[INTERPRETER] Model call failed - Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            return InterpretationOutcome(
                self._fallback(utterance, silent=False),
                InterpretationSource.FALLBACK_TRANSPORT_ERROR,
            )

        logger.info(
            f"[INTERPRETER] Model result - clarification: {bool(result.requires_clarification)}, "
            f"items: {len(result.order.items) if result.order else 0}"
        )
        return InterpretationOutcome(result, InterpretationSource.MODEL)

    def _fallback(self, utterance: str, silent: bool) -> InterpretationResult:
        try:
            return self.fallback.interpret(utterance, silent=silent)
        except Exception as e:
            logger.error(
                f"[INTERPRETER] Keyword fallback failed - Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            return InterpretationResult(
                assistant_message="" if silent else NO_MATCH_MESSAGE,
                requires_clarification=True,
                clarifications=[NO_MATCH_QUESTION],
            )
