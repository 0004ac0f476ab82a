"""Configuration management for the item service.

Centralizes all environment variable access for better testability and maintainability.
"""

import os
from typing import Optional


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class Config:
    """Application configuration loaded from environment variables."""

    # Storage
    @staticmethod
    def storage_backend() -> str:
        """Get item storage backend name ('memory' or 'supabase')."""
        return os.environ.get("ITEM_STORAGE_BACKEND", "memory").strip().lower()

    @staticmethod
    def items_table() -> str:
        """Get the table name used by the Supabase item repository."""
        return os.environ.get("ITEMS_TABLE", "items")

    # Supabase configuration
    @staticmethod
    def supabase_url() -> Optional[str]:
        """Get Supabase project URL from environment."""
        return os.environ.get("SUPABASE_URL")

    @staticmethod
    def supabase_service_role_key() -> Optional[str]:
        """Get Supabase service role key from environment."""
        return os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

    # Worker pool
    @staticmethod
    def worker_pool_max_workers() -> int:
        """Number of worker threads processing item units."""
        return _int_env("WORKER_POOL_MAX_WORKERS", 20)

    @staticmethod
    def worker_pool_queue_capacity() -> int:
        """Units allowed to wait for a free worker before submission fails."""
        return _int_env("WORKER_POOL_QUEUE_CAPACITY", 500)

    @staticmethod
    def worker_pool_shutdown_timeout() -> int:
        """Seconds to wait for in-flight units when the pool shuts down."""
        return _int_env("WORKER_POOL_SHUTDOWN_TIMEOUT", 30)

    @staticmethod
    def worker_pool_thread_prefix() -> str:
        return os.environ.get("WORKER_POOL_THREAD_PREFIX", "item-worker")

    # Logging
    @staticmethod
    def log_level() -> str:
        return os.environ.get("LOG_LEVEL", "INFO").upper()

    # Helper methods
    @staticmethod
    def is_configured() -> bool:
        """Check if all required configuration for the selected backend is present."""
        return not Config.get_missing_config()

    @staticmethod
    def get_missing_config() -> list[str]:
        """Get list of missing required configuration keys."""
        missing = []
        if Config.storage_backend() == "supabase":
            if not Config.supabase_url():
                missing.append("SUPABASE_URL")
            if not Config.supabase_service_role_key():
                missing.append("SUPABASE_SERVICE_ROLE_KEY")
        return missing


# Singleton instance for easy access
config = Config()
