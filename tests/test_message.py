import logging

import pytest
from pydantic import ValidationError

from pushover_push.models.message import Message

REQUIRED = {"token": "T", "user": "U", "message": "Hello, world!"}


def test_required_fields_only():
    msg = Message(**REQUIRED)
    assert msg.token == "T"
    assert msg.priority is None
    assert msg.html is None


@pytest.mark.parametrize("missing", ["token", "user", "message"])
def test_missing_required_field(missing):
    values = {k: v for k, v in REQUIRED.items() if k != missing}
    with pytest.raises(ValidationError):
        Message(**values)


def test_message_is_frozen():
    msg = Message(**REQUIRED)
    with pytest.raises(ValidationError):
        msg.title = "changed"


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        Message(**REQUIRED, colour="red")


@pytest.mark.parametrize("priority", [-2, -1, 0, 1])
def test_non_emergency_priorities(priority):
    assert Message(**REQUIRED, priority=priority).priority == priority


@pytest.mark.parametrize("priority", [3, -3, "high"])
def test_invalid_priority(priority):
    with pytest.raises(ValidationError):
        Message(**REQUIRED, priority=priority)


def test_emergency_priority_requires_retry_and_expire():
    with pytest.raises(ValidationError, match="priority 2 requires both retry and expire"):
        Message(**REQUIRED, priority=2)
    with pytest.raises(ValidationError):
        Message(**REQUIRED, priority=2, retry=60)

    msg = Message(**REQUIRED, priority=2, retry=60, expire=3600, callback="https://example.com/ack")
    assert (msg.retry, msg.expire) == (60, 3600)


def test_retry_and_expire_travel_together():
    with pytest.raises(ValidationError, match="retry and expire must be set together"):
        Message(**REQUIRED, retry=60)


def test_retry_and_expire_need_emergency_priority():
    with pytest.raises(ValidationError, match="only accepted with priority 2"):
        Message(**REQUIRED, retry=60, expire=3600)
    with pytest.raises(ValidationError):
        Message(**REQUIRED, priority=1, retry=60, expire=3600)


def test_url_title_requires_url():
    with pytest.raises(ValidationError, match="url_title requires url"):
        Message(**REQUIRED, url_title="Docs")
    assert Message(**REQUIRED, url="https://example.com", url_title="Docs").url_title == "Docs"


def test_single_attachment_source():
    with pytest.raises(ValidationError, match="mutually exclusive"):
        Message(**REQUIRED, attachment=b"\x89PNG", attachment_base64="iVBORw0KGgo=")


def test_html_marker():
    assert Message(**REQUIRED, html=1).html == 1
    with pytest.raises(ValidationError):
        Message(**REQUIRED, html=2)


def test_meaningless_fields_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="pushover_push.models.message"):
        Message(**REQUIRED, callback="https://example.com/ack")
        Message(**REQUIRED, attachment_type="image/png")
    assert "callback is ignored" in caplog.text
    assert "attachment_type is ignored" in caplog.text
