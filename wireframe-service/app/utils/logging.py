"""
Structured logging for the wireframe service.

Every entry is a JSON document carrying:
- Timestamp (ISO 8601)
- Correlation ID (traces an entire request)
- Generation ID (one wireframe/workflow generation call)
- Free-form context set with ``log_context``
- Service metadata

Entries are written through loguru, whose sinks are configured by
``app.core.logger.setup_logging``.
"""
import json
import traceback
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from contextvars import ContextVar
from functools import wraps
import socket
import os

from loguru import logger as loguru_logger
from app.config import settings

# Context variables for correlation tracking
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)
generation_id_var: ContextVar[Optional[str]] = ContextVar('generation_id', default=None)
extra_context_var: ContextVar[Dict[str, Any]] = ContextVar('extra_context', default={})


class StructuredLogger:
    """
    Structured logger with correlation tracking.

    Usage:
        logger = get_logger(__name__)
        logger.info("wireframe.parse.failed", extra={"length": 120})
    """

    def __init__(self, name: str):
        self.name = name
        self.hostname = socket.gethostname()
        self.service_name = settings.app_name
        self.service_version = settings.app_version
        self.environment = settings.environment
        self.instance_id = os.getenv("INSTANCE_ID", self.hostname)

    def _get_base_context(self) -> Dict[str, Any]:
        """Get base logging context"""
        return {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "service": {
                "name": self.service_name,
                "version": self.service_version,
                "environment": self.environment,
                "instance_id": self.instance_id,
            },
            "logger": {
                "name": self.name
            },
            "correlation": {
                "correlation_id": correlation_id_var.get(),
                "generation_id": generation_id_var.get(),
                **extra_context_var.get(),
            }
        }

    def _format_log(
        self,
        level: str,
        event: str,
        message: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> Dict[str, Any]:
        """Format log entry as JSON"""

        log_entry = self._get_base_context()

        log_entry.update({
            "level": level,
            "event": event,
            "message": message or event
        })

        if extra:
            log_entry["data"] = extra

        if exc_info:
            log_entry["error"] = {
                "type": type(exc_info).__name__,
                "message": str(exc_info),
                "stacktrace": "".join(
                    traceback.format_exception(type(exc_info), exc_info, exc_info.__traceback__)
                )
            }

        return log_entry

    def _emit(self, level: str, log_entry: Dict[str, Any]) -> None:
        loguru_logger.opt(depth=2).log(level, json.dumps(log_entry, default=str))

    def debug(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log debug message"""
        self._emit("DEBUG", self._format_log("DEBUG", event, message, extra))

    def info(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log info message"""
        self._emit("INFO", self._format_log("INFO", event, message, extra))

    def warning(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log warning message"""
        self._emit("WARNING", self._format_log("WARNING", event, message, extra))

    def error(
        self,
        event: str,
        message: str = None,
        extra: Dict = None,
        exc_info: BaseException = None,
        **kwargs
    ):
        """Log error message"""
        self._emit("ERROR", self._format_log("ERROR", event, message, extra, exc_info))

    def performance(
        self,
        event: str,
        duration_ms: float,
        extra: Dict = None
    ):
        """Log performance metric"""
        perf_data = {
            "performance": {
                "duration_ms": duration_ms,
                "duration_seconds": duration_ms / 1000
            }
        }

        if extra:
            perf_data.update(extra)

        log_entry = self._format_log("INFO", event, f"Performance: {duration_ms:.1f}ms", perf_data)
        self._emit("INFO", log_entry)


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger for module.

    Usage:
        logger = get_logger(__name__)
        logger.info("wireframe.generation.started", extra={"screens": 3})
    """
    return StructuredLogger(name)


class log_context:
    """
    Context manager for correlation tracking.

    Usage:
        with log_context(correlation_id="abc", generation_id="123", operation="wireframe"):
            logger.info("wireframe.generation.started")
    """

    def __init__(
        self,
        correlation_id: str = None,
        generation_id: str = None,
        **kwargs
    ):
        self.correlation_id = correlation_id
        self.generation_id = generation_id
        self.extra_context = kwargs

        self._tokens = []

    def __enter__(self):
        """Set context variables"""
        if self.correlation_id:
            self._tokens.append((correlation_id_var, correlation_id_var.set(self.correlation_id)))
        if self.generation_id:
            self._tokens.append((generation_id_var, generation_id_var.set(self.generation_id)))
        if self.extra_context:
            merged = {**extra_context_var.get(), **self.extra_context}
            self._tokens.append((extra_context_var, extra_context_var.set(merged)))

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore previous context"""
        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens = []


def trace_async(event_prefix: str):
    """
    Decorator for tracing async functions.

    Usage:
        @trace_async("wireframe.generation")
        async def generate(...):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)

            start_time = datetime.now(timezone.utc)

            logger.debug(
                f"{event_prefix}.started",
                extra={"function": func.__name__}
            )

            try:
                result = await func(*args, **kwargs)

                duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

                logger.performance(
                    f"{event_prefix}.completed",
                    duration_ms=duration_ms,
                    extra={
                        "function": func.__name__,
                        "success": True
                    }
                )

                return result

            except Exception as e:
                duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

                logger.error(
                    f"{event_prefix}.failed",
                    extra={
                        "function": func.__name__,
                        "duration_ms": duration_ms,
                        "error_type": type(e).__name__
                    },
                    exc_info=e
                )
                raise

        return wrapper
    return decorator


"""
LOG EVENT NAMING CONVENTIONS:

Use dot notation: <domain>.<action>.<result>

Examples:
- http.request.received
- llm.request.failed
- wireframe.prompt.built
- wireframe.parse.failed
- wireframe.repair.succeeded
- wireframe.defaults.applied
- wireframe.validation.completed
- workflow.generation.completed
"""
