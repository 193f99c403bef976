# tests/unit/core/test_logger.py
from __future__ import annotations

import json
import logging

import pytest
from storefront.core.logger import JSONFormatter, configure_logging, ensure_request_id


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "storefront.test", logging.INFO, __file__, 1, "Address saved", None, None
    )
    record.user_id = "u1"
    record.address_id = "a1"
    record.request_id = "r1"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "Address saved"
    assert payload["level"] == "INFO"
    assert (payload["user_id"], payload["address_id"], payload["request_id"]) == ("u1", "a1", "r1")
    assert "product_id" not in payload


def test_configure_logging_sets_level_and_quiets_smtp(restore_root_logger):
    configure_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONFormatter)
    assert logging.getLogger("aiosmtplib").level == logging.INFO


def test_request_id_taken_from_header_and_cached(app):
    with app.test_request_context("/", headers={"X-Correlation-ID": "corr-9"}):
        assert ensure_request_id() == "corr-9"
        assert ensure_request_id() == "corr-9"


def test_request_id_generated_when_absent(app):
    with app.test_request_context("/"):
        first = ensure_request_id()
        assert first == ensure_request_id()
    assert len(first) == 36
