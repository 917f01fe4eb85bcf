"""Configuration management for the Items API.

Centralizes all environment variable access for better testability and maintainability.
"""

import os
from typing import Optional


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Supabase configuration
    @staticmethod
    def supabase_url() -> Optional[str]:
        """Get Supabase project URL from environment."""
        return os.environ.get("SUPABASE_URL")

    @staticmethod
    def supabase_service_role_key() -> Optional[str]:
        """Get Supabase service role key from environment."""
        return os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

    @staticmethod
    def items_table() -> str:
        """Get the table holding item rows."""
        return os.environ.get("ITEMS_TABLE", "items")

    # Batch processing
    @staticmethod
    def batch_max_workers() -> int:
        """Size of the shared worker pool used by bulk processing (at least 1)."""
        return max(1, _int_env("BATCH_MAX_WORKERS", 10))

    @staticmethod
    def batch_timeout_seconds() -> float:
        """Upper bound the /process route waits for a whole batch."""
        return _float_env("BATCH_TIMEOUT_SECONDS", 60.0)

    @staticmethod
    def item_processing_delay_seconds() -> float:
        """Simulated per-item work time spent inside each unit of work."""
        return max(0.0, _float_env("ITEM_PROCESSING_DELAY_SECONDS", 0.0))

    # Logging
    @staticmethod
    def log_level() -> str:
        return os.environ.get("LOG_LEVEL", "INFO").upper()

    # Helper methods
    @staticmethod
    def is_configured() -> bool:
        """Check if all required configuration is present."""
        return all([
            Config.supabase_url(),
            Config.supabase_service_role_key(),
        ])

    @staticmethod
    def get_missing_config() -> list[str]:
        """Get list of missing required configuration keys."""
        missing = []
        if not Config.supabase_url():
            missing.append("SUPABASE_URL")
        if not Config.supabase_service_role_key():
            missing.append("SUPABASE_SERVICE_ROLE_KEY")
        return missing


# Singleton instance for easy access
config = Config()
