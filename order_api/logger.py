# logger.py

import json
import logging


class RequestIdFilter(logging.Filter):
    """ Give records logged without a request id the "N/A" placeholder. """
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "N/A"
        return True


class JSONFormatter(logging.Formatter):
    """ One JSON object per line; quotes in messages are escaped. """
    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "N/A"),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


# Named logger instance with its own structured JSON handler
logger = logging.getLogger("order_api_logger")
logger.setLevel(logging.INFO)
logger.propagate = False

_handler = logging.StreamHandler()
_handler.setFormatter(JSONFormatter(datefmt='%Y-%m-%dT%H:%M:%S'))
_handler.addFilter(RequestIdFilter())
logger.addHandler(_handler)


def set_log_level(level: str):
    """ Apply the configured level name, e.g. "DEBUG", to the order api logger. """
    logger.setLevel(level.upper())


def log_info(message: str, request_id: str = "N/A"):
    logger.info(message, extra={"request_id": request_id})

def log_error(message: str, request_id: str = "N/A"):
    logger.error(message, extra={"request_id": request_id})

def log_debug(message: str, request_id: str = "N/A"):
    logger.debug(message, extra={"request_id": request_id})

def log_warning(message: str, request_id: str = "N/A"):
    logger.warning(message, extra={"request_id": request_id})
