"""
Centralized configuration for the Campaign Generator
All environment variables and settings are defined here
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Provides centralized configuration with validation and defaults.
    """

    # ======================
    # Anthropic Configuration
    # ======================
    ANTHROPIC_API_KEY: str = Field(default="", description="Anthropic API key")
    ANTHROPIC_MODEL: str = Field(
        default="claude-sonnet-4-20250514",
        description="Claude model used for campaign generation"
    )
    MAX_TOKENS: int = Field(
        default=4000,
        description="Visible output budget (the thinking budget is added on top)"
    )
    THINKING_BUDGET_TOKENS: int = Field(
        default=2048,
        ge=1024,
        description="Extended thinking budget in tokens"
    )
    WEB_SEARCH_MAX_USES: int = Field(
        default=1,
        ge=1,
        description="Max web searches Claude may run per request"
    )
    ANTHROPIC_TEMPERATURE: Optional[float] = Field(
        default=None,
        description="Sampling temperature (unset = provider default; must be 1 with thinking)"
    )
    ANTHROPIC_TIMEOUT: float = Field(
        default=90.0,
        description="Per-attempt timeout for the Anthropic call in seconds"
    )
    ANTHROPIC_MAX_ATTEMPTS: int = Field(
        default=2,
        ge=1,
        description="Total attempts for transient Anthropic failures (2 = one retry)"
    )
    MAX_CONTINUATIONS: int = Field(
        default=2,
        ge=0,
        description="How many times a paused server-tool turn is resumed"
    )
    RELAY_TIMEOUT: float = Field(
        default=240.0,
        description="Hard deadline for one generation request in seconds"
    )

    # ======================
    # Email Configuration
    # ======================
    RESEND_API_KEY: str = Field(
        default="",
        description="Resend API key (empty disables report emails)"
    )
    RESEND_FROM: str = Field(
        default="VeoGrowth <campaigns@veogrowth.com>",
        description="Sender used for report emails"
    )
    STRATEGY_CALL_URL: str = Field(
        default="https://calendly.com/veogrowth/strategy",
        description="Booking link shown on the results page and in emails"
    )

    # ======================
    # Server Configuration
    # ======================
    API_HOST: str = Field(default="0.0.0.0", description="Bind address for uvicorn")
    API_PORT: int = Field(default=8000, description="Port for uvicorn")
    API_WORKERS: int = Field(
        default=2,
        description="Number of Uvicorn workers for API"
    )

    # ======================
    # Logging Configuration
    # ======================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @property
    def request_max_tokens(self) -> int:
        """Total max_tokens sent to Anthropic: output budget plus thinking budget"""
        return self.MAX_TOKENS + self.THINKING_BUDGET_TOKENS

    @property
    def email_enabled(self) -> bool:
        """Report emails are only sent when a Resend key is configured"""
        return bool(self.RESEND_API_KEY)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Allow extra env vars in .env file


# Global settings instance
settings = Settings()


# ======================
# Convenience Functions
# ======================

def get_anthropic_api_key() -> str:
    """Get Anthropic API key"""
    return settings.ANTHROPIC_API_KEY


def get_anthropic_model() -> str:
    """Get Anthropic model name"""
    return settings.ANTHROPIC_MODEL
