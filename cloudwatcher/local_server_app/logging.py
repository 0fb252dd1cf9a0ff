import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional
from urllib.parse import urlsplit, urlunsplit


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)


def create_logger(name: str, ring_size: int) -> logging.Logger:
    logger = logging.getLogger(name)
    if any(isinstance(h, RingBufferHandler) for h in logger.handlers):
        return logger
    logger.setLevel(logging.INFO)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def redact_address(address: Optional[str]) -> Optional[str]:
    if not address:
        return address
    parts = urlsplit(address)
    if parts.password is None and parts.username is None:
        return address
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    return urlunsplit((parts.scheme, f"***@{host}", parts.path, parts.query, parts.fragment))


def redact(details: Optional[dict]) -> dict:
    if not details:
        return {}
    cleaned = {}
    for key, value in details.items():
        if key in {"address", "url"} and isinstance(value, str):
            cleaned[key] = redact_address(value)
        else:
            cleaned[key] = value
    return cleaned
