"""Unit tests for Config and the shared worker pool."""

from items_api.config import Config
from items_api.core.batch import get_worker_pool, shutdown_worker_pool


class TestConfig:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is set."""
        for name in ("BATCH_MAX_WORKERS", "BATCH_TIMEOUT_SECONDS", "ITEM_PROCESSING_DELAY_SECONDS", "ITEMS_TABLE"):
            monkeypatch.delenv(name, raising=False)

        assert Config.batch_max_workers() == 10
        assert Config.batch_timeout_seconds() == 60.0
        assert Config.item_processing_delay_seconds() == 0.0
        assert Config.items_table() == "items"

    def test_overrides(self, monkeypatch):
        """Test values are read from the environment on each call."""
        monkeypatch.setenv("BATCH_MAX_WORKERS", "4")
        monkeypatch.setenv("ITEM_PROCESSING_DELAY_SECONDS", "0.1")

        assert Config.batch_max_workers() == 4
        assert Config.item_processing_delay_seconds() == 0.1

    def test_worker_count_floor(self, monkeypatch):
        """Test the pool size never drops below one."""
        monkeypatch.setenv("BATCH_MAX_WORKERS", "0")

        assert Config.batch_max_workers() == 1

    def test_missing_supabase_config(self, monkeypatch):
        """Test missing Supabase settings are reported."""
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "key")

        assert Config.is_configured() is False
        assert Config.get_missing_config() == ["SUPABASE_URL"]


class TestWorkerPool:
    """Test the process-wide worker pool lifecycle."""

    def test_pool_is_shared(self):
        """Test repeated calls return the same pool."""
        assert get_worker_pool() is get_worker_pool()

    def test_pool_sized_from_config(self, monkeypatch):
        """Test a fresh pool picks up BATCH_MAX_WORKERS."""
        shutdown_worker_pool()
        monkeypatch.setenv("BATCH_MAX_WORKERS", "3")

        try:
            assert get_worker_pool()._max_workers == 3
        finally:
            shutdown_worker_pool()

    def test_shutdown_then_restart(self):
        """Test a shut-down pool is replaced on next use."""
        first = get_worker_pool()
        shutdown_worker_pool()

        second = get_worker_pool()

        assert second is not first
        assert second.submit(lambda: 42).result(timeout=5) == 42
