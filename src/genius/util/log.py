"""Structured logging with optional console and file sinks.

Loggers are tagged key/value emitters. Nothing is written until
``Log.configure`` enables a sink, so importing the library stays silent.
"""

import json
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from ..core.global_paths import GlobalPath


class LogLevel(str, Enum):
    """Log severity levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        if value is None:
            return cls.INFO
        text = value.strip().lower()
        if text == "warning":
            text = "warn"
        for level in cls:
            if level.value.lower() == text:
                return level
        raise ValueError(f"invalid log level: {value}")


class LogFormat(str, Enum):
    """Log output format."""

    KV = "kv"
    JSON = "json"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: str | None) -> "LogFormat":
        if value is None:
            return cls.KV
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"invalid log format: {value}") from None


LEVEL_PRIORITY = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
}


@dataclass
class LogConfig:
    """Global logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.KV
    console: bool = False
    file: bool = False
    log_file_path: Optional[str] = None
    _file_handle: Optional[TextIO] = None


_config = LogConfig()
_last_timestamp = time.time()


class Logger:
    """Tagged logger writing to the configured sinks."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = tags or {}

    def _should_log(self, level: LogLevel) -> bool:
        return LEVEL_PRIORITY[level] >= LEVEL_PRIORITY[_config.level]

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, Exception):
            return f"{type(value).__name__}: {value}"
        if isinstance(value, (dict, list, tuple, int, float, bool)) or value is None:
            return value
        return str(value)

    def _value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, (dict, list, tuple)):
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        text = str(value)
        if text == "" or any(ch.isspace() for ch in text) or "=" in text:
            return json.dumps(text, ensure_ascii=False)
        return text

    def _build_message(
        self,
        level: LogLevel,
        message: Any,
        extra: Optional[Dict[str, Any]] = None,
    ) -> str:
        global _last_timestamp

        now = time.time()
        delta_ms = int((now - _last_timestamp) * 1000)
        _last_timestamp = now

        merged = {**self.tags, **(extra or {})}
        data = {k: self._normalize(v) for k, v in merged.items() if v is not None}
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        text = self._normalize(message)

        if _config.format == LogFormat.JSON:
            payload = {"time": stamp, "delta_ms": delta_ms, "level": level.value.lower(), "msg": text, **data}
            return json.dumps(payload, ensure_ascii=False, separators=(",", ":")) + "\n"

        pairs = " ".join(f"{k}={self._value(v)}" for k, v in data.items())
        if _config.format == LogFormat.PRETTY:
            suffix = f" ({pairs})" if pairs else ""
            return f"{stamp} {level.value} {text or ''}{suffix} +{delta_ms}ms\n"

        parts = [
            stamp,
            f"+{delta_ms}ms",
            f"level={level.value.lower()}",
            f"msg={self._value(text)}",
            pairs,
        ]
        return " ".join(part for part in parts if part) + "\n"

    def _write(self, message: str) -> None:
        if _config.console:
            sys.stderr.write(message)
            sys.stderr.flush()
        if _config.file and _config._file_handle:
            _config._file_handle.write(message)
            _config._file_handle.flush()

    def _emit(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> None:
        if not (_config.console or _config.file):
            return
        if self._should_log(level):
            self._write(self._build_message(level, message, extra))

    def debug(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.DEBUG, message, extra)

    def info(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.INFO, message, extra)

    def warn(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.WARN, message, extra)

    def warning(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        """Compatibility alias for warn()."""
        self.warn(message, extra)

    def error(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.ERROR, message, extra)


class Log:
    """Global logging interface and factory."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Optional[Dict[str, Any]] = None) -> Logger:
        """Create or retrieve a logger.

        Loggers tagged with a ``service`` name are cached per service.
        """
        tags = tags or {}
        service = tags.get("service")
        if not isinstance(service, str) or not service:
            return Logger(tags=tags)

        logger = cls._loggers.get(service)
        if logger is None:
            logger = Logger(tags=tags)
            cls._loggers[service] = logger
        return logger

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
        file: bool | None = None,
        path: str | None = None,
    ) -> None:
        """Configure sinks and output format.

        Args:
            level: Minimum level to emit.
            format: Line format for every sink.
            console: Write to stderr.
            file: Write to ``path``, or ``genius.log`` in the user log directory.
            path: Explicit log file location.
        """
        if level is not None:
            _config.level = level
        if format is not None:
            _config.format = format
        if console is not None:
            _config.console = console
        if file is not None:
            _config.file = file

        cls.close()
        if not _config.file:
            _config.log_file_path = None
            return

        if path is None:
            log_path = GlobalPath.ensure(GlobalPath.log()) / "genius.log"
        else:
            log_path = Path(path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

        _config.log_file_path = str(log_path)
        _config._file_handle = log_path.open("a", encoding="utf-8")

    @classmethod
    def file(cls) -> str:
        """Get the current log file path."""
        return _config.log_file_path or ""

    @classmethod
    def reset(cls) -> None:
        """Close sinks and restore defaults."""
        cls.close()
        _config.level = LogLevel.INFO
        _config.format = LogFormat.KV
        _config.console = False
        _config.file = False
        _config.log_file_path = None

    @classmethod
    def close(cls) -> None:
        """Close the log file handle if open."""
        if _config._file_handle:
            _config._file_handle.close()
            _config._file_handle = None
