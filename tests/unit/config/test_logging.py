"""Tests for the structured logging helpers."""

import pytest
import structlog

from shopledger.api.middleware.logging import parse_ledger_path
from shopledger.config.logging import (
    app_context_processor,
    bind_ledger_context,
    clear_ledger_context,
)
from shopledger.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


class TestAppContext:
    def test_stamps_service_identity(self):
        settings = Settings(app_name="Corner Shop", app_version="2.1.0", environment="staging")
        processor = app_context_processor(settings)

        event = processor(None, "info", {"event": "sale_created"})

        assert event == {
            "event": "sale_created",
            "app": "Corner Shop",
            "version": "2.1.0",
            "environment": "staging",
        }

    def test_event_values_win(self):
        processor = app_context_processor(Settings())

        event = processor(None, "info", {"event": "x", "version": "override"})

        assert event["version"] == "override"


class TestLedgerContext:
    def test_bind_skips_missing_values(self):
        bind_ledger_context(request_id="ab12cd34", resource="sales", record_id=None)

        assert structlog.contextvars.get_contextvars() == {
            "request_id": "ab12cd34",
            "resource": "sales",
        }

    def test_clear_leaves_unrelated_keys(self):
        structlog.contextvars.bind_contextvars(job="nightly")
        bind_ledger_context(request_id="ab12cd34", resource="sales", record_id=5)

        clear_ledger_context()

        assert structlog.contextvars.get_contextvars() == {"job": "nightly"}


class TestParseLedgerPath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/api/sales/5", ("sales", 5)),
            ("/api/shop-closures", ("shop-closures", None)),
            ("/api/sales/analytics/weekly", ("sales", None)),
            ("/api/inventory/12/", ("inventory", 12)),
            ("/api/", (None, None)),
            ("/health", (None, None)),
        ],
    )
    def test_paths(self, path, expected):
        assert parse_ledger_path(path) == expected
