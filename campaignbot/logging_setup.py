from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_configured = False


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its ``logging`` number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(json_logs: bool = False, level: int | str = logging.INFO) -> None:
    """Attach a single stdout handler to the root logger.

    Only the first call has an effect, so the CLI callback and library users
    can both call it safely. An unknown level raises before the root logger
    is touched.
    """
    global _configured
    if _configured:
        return

    resolved = resolve_level(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        _JsonFormatter() if json_logs else logging.Formatter(fmt="%(levelname)s | %(name)s | %(message)s")
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(resolved)
    root.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger namespaced under ``campaignbot``."""
    return logging.getLogger(f"campaignbot.{name}")
