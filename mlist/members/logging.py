"""
Structured logging for membership operations.

Emits JSON log records carrying component and context information, masks
credentials before they reach a handler, and keeps per-operation outcome
counters.
"""

import logging
import json
import time
import re
from typing import Dict, Any, Optional
from contextlib import contextmanager
from datetime import datetime, timezone
from collections import defaultdict

ROOT_LOGGER_NAME = 'mlist'


class SensitiveDataFilter:
    """Mask credentials in log messages and structured data."""

    SENSITIVE_KEYS = {'password', 'token', 'api_key', 'apikey', 'key', 'secret', 'authorization'}

    def __init__(self):
        self.sensitive_patterns = [
            (re.compile(r'api_?key["\']?\s*[:=]\s*["\']?([^"\'\s&,]+)', re.IGNORECASE), 'api_key=***'),
            (re.compile(r'token["\']?\s*[:=]\s*["\']?([^"\'\s&,]+)', re.IGNORECASE), 'token=***'),
            (re.compile(r'password["\']?\s*[:=]\s*["\']?([^"\'\s&,]+)', re.IGNORECASE), 'password=***'),
            (re.compile(r'secret["\']?\s*[:=]\s*["\']?([^"\'\s&,]+)', re.IGNORECASE), 'secret=***'),
            # Mailchimp keys: 32 hex chars followed by a datacenter suffix
            (re.compile(r'\b[0-9a-f]{32}-[a-z]+[0-9]+\b'), '***'),
        ]

    def filter_message(self, message: str) -> str:
        """Mask sensitive values inside a message string."""
        filtered = message
        for pattern, replacement in self.sensitive_patterns:
            filtered = pattern.sub(replacement, filtered)
        return filtered

    def filter_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Mask sensitive values inside a dictionary, recursively."""
        filtered = {}
        for key, value in data.items():
            if str(key).lower() in self.SENSITIVE_KEYS:
                filtered[key] = '***'
            elif isinstance(value, str):
                filtered[key] = self.filter_message(value)
            elif isinstance(value, dict):
                filtered[key] = self.filter_dict(value)
            else:
                filtered[key] = value
        return filtered


class MemberLogger:
    """Structured logger for a membership component."""

    def __init__(self, component: str):
        self.component = component
        self.logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
        self.context: Dict[str, Any] = {}
        self.filter = SensitiveDataFilter()
        self.operation_stats = defaultdict(lambda: {'total': 0, 'success': 0, 'failure': 0})

    def add_context(self, key: str, value: Any) -> None:
        """Attach context to every subsequent record."""
        self.context[key] = value

    def _build_record(self, message: str, extra: Optional[Dict[str, Any]] = None) -> str:
        record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'component': self.component,
            'message': self.filter.filter_message(message),
            'context': self.filter.filter_dict(self.context.copy())
        }
        if extra:
            record['extra'] = self.filter.filter_dict(extra)
        return json.dumps(record, default=str)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._build_record(message, extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(self._build_record(message, extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(self._build_record(message, extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.error(self._build_record(message, extra))

    @contextmanager
    def time_operation(self, operation_name: str, extra: Optional[Dict[str, Any]] = None):
        """Time a block, log its duration and record the outcome."""
        details = dict(extra or {})
        details['operation'] = operation_name
        start_time = time.time()
        self.debug(f"Starting {operation_name}", details)

        try:
            yield
        except Exception as e:
            details.update({
                'duration_seconds': round(time.time() - start_time, 3),
                'status': 'failure',
                'error': str(e)
            })
            self.record_outcome(operation_name, False)
            self.error(f"Operation {operation_name} failed", details)
            raise

        details.update({
            'duration_seconds': round(time.time() - start_time, 3),
            'status': 'success'
        })
        self.record_outcome(operation_name, True)
        self.debug(f"Operation {operation_name} completed", details)

    @contextmanager
    def scoped_context(self, context: Dict[str, Any]):
        """Temporarily extend the logging context."""
        original_context = self.context.copy()
        self.context.update(context)
        try:
            yield
        finally:
            self.context = original_context

    def record_outcome(self, operation: str, success: bool):
        stats = self.operation_stats[operation]
        stats['total'] += 1
        stats['success' if success else 'failure'] += 1

    def get_operation_stats(self) -> Dict[str, Dict[str, int]]:
        return dict(self.operation_stats)


def configure_member_logging(
    level: str = "INFO",
    format: str = "json",
    output: str = "console",
    filename: Optional[str] = None
) -> logging.Logger:
    """
    Install handlers on the ``mlist`` logger.

    Args:
        level: Log level name
        format: ``json`` emits records as-is, ``standard`` prefixes time, name and level
        output: ``console``, ``file`` or ``both``
        filename: Log file path, required for file output

    Returns:
        The configured root ``mlist`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    if format == "json":
        formatter = logging.Formatter('%(message)s')
    else:
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if output in ("console", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if output in ("file", "both") and filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
