"""FastAPI dependencies."""
from functools import lru_cache

from order_assistant.core.config import settings
from order_assistant.services.menu.catalog import MenuCatalog
from order_assistant.services.menu.in_memory_menu import InMemoryMenuProvider
from order_assistant.services.interpreter.interpreter import OrderInterpreter
from order_assistant.services.interpreter.llm import OrderModelClient


@lru_cache
def get_menu_catalog() -> MenuCatalog:
    """Get the process-wide menu catalog (loaded once, read-only)."""
    return MenuCatalog(InMemoryMenuProvider(menu_file=settings.menu_file))


@lru_cache
def get_order_model_client() -> OrderModelClient:
    """Get the generative model client built from settings."""
    return OrderModelClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        max_output_tokens=settings.llm_max_output_tokens,
        timeout=settings.llm_timeout_seconds,
    )


def get_order_interpreter() -> OrderInterpreter:
    """Get an order interpreter wired to the shared catalog and model client."""
    return OrderInterpreter(
        catalog=get_menu_catalog(),
        model_client=get_order_model_client(),
        tax_rate=settings.tax_rate,
        delivery_fee=settings.fallback_delivery_fee,
    )
