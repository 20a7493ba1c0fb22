import json
import logging

import pytest

from bankcheck.config import load_config
from bankcheck.core.logging_config import JsonFormatter, setup_logging


def test_defaults(clean_env):
    cfg = load_config()
    assert cfg.env == "dev"
    assert cfg.log_level == "WARNING"
    assert cfg.log_json is False
    assert cfg.printable is True
    assert not cfg.debug


def test_from_env(clean_env):
    clean_env.setenv("BANKCHECK_ENV", "prod")
    clean_env.setenv("BANKCHECK_LOG_LEVEL", "debug")
    clean_env.setenv("BANKCHECK_LOG_JSON", "yes")
    clean_env.setenv("BANKCHECK_PRINTABLE", "off")
    cfg = load_config()
    assert cfg.env == "prod"
    assert cfg.log_level == "DEBUG"
    assert cfg.debug
    assert cfg.log_json is True
    assert cfg.printable is False


def test_config_is_frozen(clean_env):
    cfg = load_config()
    with pytest.raises(AttributeError):
        cfg.env = "prod"


def _record(**extra):
    rec = logging.LogRecord("bankcheck.test", logging.DEBUG, __file__, 1, "rejected %s", ("X",), None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_json_formatter():
    out = json.loads(JsonFormatter().format(_record(identifier_kind="IBAN")))
    assert out["level"] == "DEBUG"
    assert out["logger"] == "bankcheck.test"
    assert out["msg"] == "rejected X"
    assert out["identifier_kind"] == "IBAN"
    assert "ts" in out
    assert "exc" not in out


def test_json_timestamp_is_the_record_time():
    rec = _record(identifier_kind="BIC")
    rec.created = 0
    out = json.loads(JsonFormatter().format(rec))
    assert out["ts"] == "1970-01-01T00:00:00+00:00"
    assert out["identifier_kind"] == "BIC"


def test_json_formatter_without_extra():
    out = json.loads(JsonFormatter().format(_record()))
    assert "identifier_kind" not in out


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging(root_logger):
    setup_logging("INFO", json_output=True)
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)

    setup_logging()
    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1
    assert not isinstance(root_logger.handlers[0].formatter, JsonFormatter)


def test_rejections_are_logged_at_debug(caplog):
    from bankcheck.detection.iban import validate_iban

    with caplog.at_level(logging.DEBUG, logger="bankcheck"):
        assert not validate_iban("FR1520041010050500013M02606")
    rec = [r for r in caplog.records if r.name == "bankcheck.detection.base"]
    assert rec
    assert rec[0].identifier_kind == "IBAN"
