"""Structured Logging: JSONFormatter output shape and extra fields."""

import json
import logging

from stargate.infrastructure.observability import JSONFormatter


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "stargate.services", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record("Validating duty")))
    assert out["level"] == "INFO"
    assert out["logger"] == "stargate.services"
    assert out["message"] == "Validating duty"
    assert "timestamp" in out


def test_json_formatter_surfaces_domain_extras():
    out = json.loads(JSONFormatter().format(
        _record("CreateAstronautDuty succeeded", person_name="Teal'c", person_id=3, duty_id=9),
    ))
    assert out["person_name"] == "Teal'c"
    assert out["person_id"] == 3
    assert out["duty_id"] == 9


def test_json_formatter_skips_missing_extras():
    out = json.loads(JSONFormatter().format(_record("hello")))
    assert "person_name" not in out
    assert "error_code" not in out
