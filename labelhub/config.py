"""
Configuration management for the LabelHub QR print service.
Loads environment variables with validation.
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # =============================================================================
    # Public URLs
    # =============================================================================
    public_base_url: str = "https://cardhub-qr.vercel.app"

    # =============================================================================
    # Print Jobs
    # =============================================================================
    print_job_ttl_seconds: int = 30 * 60  # Jobs expire 30 minutes after submission
    print_job_sweep_on_put: bool = True

    # =============================================================================
    # QR Code Generation
    # =============================================================================
    qr_default_size: int = 200
    qr_min_size: int = 100
    qr_max_size: int = 1000
    qr_margin: int = 1  # Quiet zone in modules
    qr_cache_max_age_seconds: int = 86400
    batch_qr_max_urls: int = 50

    # =============================================================================
    # Deployment Configuration
    # =============================================================================
    port: int = 8001
    log_level: Literal["debug", "info", "warning", "error"] = "info"
    environment: Literal["development", "staging", "production"] = "development"

    # =============================================================================
    # Computed Properties
    # =============================================================================
    @property
    def print_job_ttl_ms(self) -> int:
        """Print job time-to-live in milliseconds."""
        return self.print_job_ttl_seconds * 1000

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


# Global settings instance
settings = Settings()
