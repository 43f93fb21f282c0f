"""Application configuration."""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenAI (optional: without a key the interpreter runs in fallback mode)
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.3
    llm_max_output_tokens: int = 1024
    llm_timeout_seconds: float = 20.0

    # Database
    database_url: str = "sqlite+aiosqlite:///./order_assistant.db"

    # Restaurant
    restaurant_name: str = "Outta Sight Pizza"
    restaurant_website: str = "thatsouttasight.com"
    menu_file: Optional[str] = None

    # Pricing
    tax_rate: float = 0.08875
    fallback_delivery_fee: Optional[float] = None

    # Sessions
    session_ttl_hours: int = 24

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
