"""Unit tests for structured logging helpers."""

from __future__ import annotations

import logging

from wanikani.core.config import Configuration
from wanikani.resources import assignments
from wanikani.runtime.rest.request import build_request
from wanikani.runtime.rest.telemetry import (
    log_page_fetched,
    log_rate_limited,
    log_request_sent,
    log_response_classified,
)
from wanikani.runtime.rest.transport import RawResponse

LOGGER = "wanikani.runtime.rest.telemetry"


def test_request_sent_omits_headers(caplog):
    request = build_request(assignments(levels=[1]), Configuration(token="secret"))

    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        log_request_sent(request)

    (record,) = caplog.records
    assert record.message == "request_sent"
    assert record.method == "GET"
    assert record.url == "https://api.wanikani.com/v2/assignments?levels=1"
    assert record.has_body is False
    assert not hasattr(record, "headers")


def test_response_classified_levels(caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        log_response_classified(RawResponse(200, body=b"{}"), "success")
        log_response_classified(RawResponse(503), "status_error")

    assert [r.levelno for r in caplog.records] == [logging.DEBUG, logging.WARNING]
    assert caplog.records[0].body_bytes == 2
    assert caplog.records[1].outcome == "status_error"


def test_rate_limited_is_info(caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        log_rate_limited(limit=60, remaining=0, reset_epoch=1700000000.0, delay=4.56789)

    (record,) = caplog.records
    assert record.levelno == logging.INFO
    assert record.delay_seconds == 4.568


def test_page_fetched(caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        log_page_fetched(page_index=2, after_id=1000, has_next=False)

    (record,) = caplog.records
    assert (record.page_index, record.after_id, record.has_next) == (2, 1000, False)
