
import logging, sys, json
from datetime import datetime, timezone

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"

class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        kind = getattr(record, "identifier_kind", None)
        if kind:
            payload["identifier_kind"] = kind
        return json.dumps(payload, ensure_ascii=False)

def setup_logging(level="WARNING", json_output=False):
    logger = logging.getLogger()
    logger.setLevel(level)
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(JsonFormatter() if json_output else logging.Formatter(PLAIN_FORMAT, PLAIN_DATEFMT))
    logger.handlers = [h]
    return logger
