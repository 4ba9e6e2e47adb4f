"""Audit logging of Confluence API traffic as JSON lines."""

import copy
import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from requests import PreparedRequest, Response

from ..models.constants import (
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_MAX_SIZE_MB,
    REDACTED,
    SENSITIVE_KEY_FRAGMENTS,
)

logger = logging.getLogger("mcp-confluence.utils.request_logging")


def _is_sensitive_key(key: Any) -> bool:
    lowered = str(key).lower()
    return any(fragment in lowered for fragment in SENSITIVE_KEY_FRAGMENTS)


def _redact(value: Any) -> Any:
    """Replace sensitive values in place, recursing through dicts and lists."""
    if isinstance(value, dict):
        for key in list(value.keys()):
            if _is_sensitive_key(key):
                value[key] = REDACTED
            else:
                value[key] = _redact(value[key])
    elif isinstance(value, list):
        for index, item in enumerate(value):
            value[index] = _redact(item)
    return value


class RequestAuditLogger:
    """Append-only JSON-lines log of API requests, responses and errors.

    The file is trimmed to the trailing half of its lines whenever it grows
    past ``max_size_bytes``. The trim is by line count, so the resulting size
    is approximate.
    """

    def __init__(
        self,
        log_file: str | Path = DEFAULT_LOG_FILE,
        max_size_bytes: int = DEFAULT_LOG_MAX_SIZE_MB * 1024 * 1024,
    ) -> None:
        self.log_file = Path(log_file).resolve()
        self.max_size_bytes = max_size_bytes
        # Hooks fire from body-enrichment worker threads
        self._lock = threading.Lock()

    @staticmethod
    def sanitize(data: Any) -> Any:
        """Return a deep copy of ``data`` with sensitive fields redacted."""
        if data is None:
            return None
        return _redact(copy.deepcopy(data))

    def log_request(
        self,
        method: str | None,
        url: str,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> None:
        self._write(
            {
                "timestamp": self._timestamp(),
                "type": "REQUEST",
                "method": (method or "unknown").upper(),
                "url": url,
                "params": self.sanitize(params) or {},
                "data": self.sanitize(data),
            }
        )

    def log_response(
        self,
        method: str | None,
        url: str,
        status: int,
        data: Any = None,
        duration_ms: int | None = None,
    ) -> None:
        self._write(
            {
                "timestamp": self._timestamp(),
                "type": "RESPONSE",
                "method": (method or "unknown").upper(),
                "url": url,
                "status": status,
                "data": self.sanitize(data),
                "duration": f"{duration_ms}ms" if duration_ms is not None else None,
            }
        )

    def log_error(self, method: str | None, url: str, error: Exception) -> None:
        response = getattr(error, "response", None)
        error_entry: dict[str, Any] = {"message": str(error)}
        if response is not None:
            error_entry["status"] = response.status_code
            error_entry["statusText"] = response.reason
            error_entry["data"] = self.sanitize(_response_payload(response))

        self._write(
            {
                "timestamp": self._timestamp(),
                "type": "ERROR",
                "method": (method or "unknown").upper(),
                "url": url,
                "error": error_entry,
            }
        )

    @staticmethod
    def _timestamp() -> str:
        return datetime.now(timezone.utc).isoformat()

    def _trim_if_needed(self) -> None:
        if not self.log_file.exists():
            return
        if self.log_file.stat().st_size <= self.max_size_bytes:
            return

        lines = self.log_file.read_text(encoding="utf-8").splitlines()
        keep = len(lines) // 2
        kept_lines = lines[-keep:] if keep else []
        self.log_file.write_text(
            "".join(f"{line}\n" for line in kept_lines), encoding="utf-8"
        )
        logger.debug(f"Trimmed audit log {self.log_file} to {keep} lines")

    def _write(self, entry: dict[str, Any]) -> None:
        line = json.dumps(
            {key: value for key, value in entry.items() if value is not None},
            ensure_ascii=False,
            default=str,
        )
        try:
            with self._lock:
                self.log_file.parent.mkdir(parents=True, exist_ok=True)
                self._trim_if_needed()
                with open(self.log_file, "a", encoding="utf-8") as f:
                    f.write(line + "\n")
        except OSError as e:
            # Audit logging must never break a tool call
            logger.error(f"Failed to write audit log entry: {e}")


def _request_payload(request: PreparedRequest) -> Any:
    body = request.body
    if not body:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        return json.loads(body)
    except ValueError:
        return body


def _response_payload(response: Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def make_response_hook(audit_logger: RequestAuditLogger):
    """Build a requests response hook writing to ``audit_logger``."""

    def log_exchange(response: Response, *args, **kwargs) -> None:
        try:
            request: PreparedRequest = response.request
            method = request.method or "GET"
            split = urlsplit(request.url or "")
            url = f"{split.scheme}://{split.netloc}{split.path}"
            params = dict(parse_qsl(split.query))
            elapsed_ms = int(response.elapsed.total_seconds() * 1000)

            audit_logger.log_request(method, url, params, _request_payload(request))
            if response.status_code >= 400:
                audit_logger.log_error(
                    method,
                    url,
                    _HTTPStatusError(response),
                )
            else:
                audit_logger.log_response(
                    method,
                    url,
                    response.status_code,
                    _response_payload(response),
                    elapsed_ms,
                )
        except Exception as e:  # noqa: BLE001 - hooks must not break requests
            logger.debug(f"Failed to log request: {e}")

    return log_exchange


class _HTTPStatusError(Exception):
    """Error stand-in carrying a failed response for the audit log."""

    def __init__(self, response: Response) -> None:
        super().__init__(f"{response.status_code} {response.reason}")
        self.response = response


def install_request_logging(session, audit_logger: RequestAuditLogger) -> None:
    """Install the audit logging hook on a requests session.

    Args:
        session: A requests.Session object to add logging to
        audit_logger: Destination for the logged exchanges
    """
    hooks = session.hooks.setdefault("response", [])

    # Avoid duplicate hooks for the same log file
    for hook in hooks:
        if getattr(hook, "audit_log_file", None) == audit_logger.log_file:
            return

    hook = make_response_hook(audit_logger)
    hook.audit_log_file = audit_logger.log_file
    hooks.append(hook)
    logger.debug(f"Audit logging installed on session ({audit_logger.log_file})")
