"""
Render debug logger for tracking markup renders and CDN URL construction.

Supports configurable log levels (NONE, INFO, DEBUG, TRACE) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis
"""

import json
import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv


class LogLevel(Enum):
    """Logging levels for render debug output."""

    NONE = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


class RenderLogger:
    """Centralized logger for image renders with configurable levels."""

    _instance: Optional["RenderLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()

        level_str = os.getenv("SRCSET_DEBUG_LEVEL", "NONE").upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        self.log_to_file = os.getenv("SRCSET_LOG_TO_FILE", "true").lower() == "true"
        self.log_dir = Path(os.getenv("SRCSET_LOG_DIR", "outputs"))

        self._initialized = True

    @classmethod
    def reset(cls):
        """Drop the singleton so the next instance re-reads the environment."""
        cls._instance = None

    def _should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _truncate_content(self, content: str, max_len: int = 120) -> str:
        """Truncate content for preview."""
        if len(content) <= max_len:
            return content
        return content[:max_len] + "... [truncated]"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "logs" / "render_calls.jsonl"

    def _write_to_file(self, log_entry: Dict[str, Any]):
        """Write log entry to JSON Lines file."""
        if not self.log_to_file:
            return

        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")

    def log_render(
        self,
        reference: str,
        mode: str,
        width_count: int,
        start_time: float,
        end_time: float,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Log a completed render."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        latency_ms = (end_time - start_time) * 1000

        print(
            f"[{timestamp}] 🖼️  Render: {self._truncate_content(reference)} | "
            f"{mode} | {width_count} widths | {latency_ms:.1f}ms"
        )

        self._write_to_file({
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "render",
            "reference": reference,
            "mode": mode,
            "width_count": width_count,
            "latency_ms": round(latency_ms, 3),
            "metadata": metadata or {},
        })

    def log_url(self, path: str, width: Optional[int], url: str):
        """Log a single CDN URL built for a width."""
        if not self._should_log(LogLevel.DEBUG):
            return

        width_label = "" if width is None else str(width)
        print(f"    {width_label:>5}w  {self._truncate_content(url)}")

        # Per-URL entries are only persisted at TRACE
        if self.level == LogLevel.TRACE:
            self._write_to_file({
                "timestamp": self._format_timestamp(),
                "level": "TRACE",
                "event": "url",
                "path": path,
                "width": width,
                "url": url,
            })

    def log_error(self, component: str, error: Exception):
        """Log a failure raised while rendering."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        print(f"[{timestamp}] ❌ Render Error: [{component}] {type(error).__name__}: {error}")

        self._write_to_file({
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "error",
            "component": component,
            "error_type": type(error).__name__,
            "error": str(error),
        })


def get_logger() -> RenderLogger:
    """Get the singleton logger instance."""
    return RenderLogger()


class LoggedCdnClient:
    """
    Wrapper around a CDN client to add debug logging.

    Intercepts create_url() calls and logs the URL built for each width.
    """

    def __init__(self, client: Any, component: str = "url_builder"):
        self.client = client
        self.component = component
        self.logger = get_logger()

    def __getattr__(self, name: str):
        """Delegate all other attributes to wrapped client."""
        return getattr(self.client, name)

    def create_url(self, path: str, params: Mapping[str, Any]) -> str:
        try:
            url = self.client.create_url(path, params)
        except Exception as e:
            self.logger.log_error(self.component, e)
            raise

        self.logger.log_url(path, params.get("w"), url)
        return url

