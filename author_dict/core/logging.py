"""Structured logging setup."""
import logging, sys, json
from typing import Optional

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED:
                continue
            base[k] = v
        return json.dumps(base, default=str)


def configure_logging(level: str = "INFO", json_format: bool = False, log_file: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_author_dict", False) for h in root.handlers):
        return
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    handler._author_dict = True
    root.addHandler(handler)
