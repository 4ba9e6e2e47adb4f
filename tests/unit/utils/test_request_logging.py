"""Tests for the request audit logger."""

import json
import threading
from datetime import timedelta
from unittest.mock import MagicMock

import pytest
import requests

from mcp_confluence.utils.request_logging import (
    RequestAuditLogger,
    install_request_logging,
    make_response_hook,
)


def _read_entries(log_path):
    return [json.loads(line) for line in log_path.read_text().splitlines()]


def _make_response(method="GET", url="https://test.atlassian.net/wiki/api/v2/spaces?limit=10",
                   status=200, body=b'{"results": []}', request_body=None):
    request = requests.Request(method, url, data=request_body).prepare()
    response = requests.Response()
    response.request = request
    response.status_code = status
    response.reason = "OK" if status < 400 else "Not Found"
    response._content = body
    response.elapsed = timedelta(milliseconds=150)
    return response


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs" / "audit.log"


@pytest.fixture
def audit_logger(log_path):
    return RequestAuditLogger(log_path)


class TestSanitize:
    def test_redacts_sensitive_keys_at_any_depth(self):
        data = {
            "title": "Page",
            "apiToken": "secret-value",
            "nested": {"Authorization": "Basic abc", "items": [{"password": "x"}]},
        }

        sanitized = RequestAuditLogger.sanitize(data)

        assert sanitized["title"] == "Page"
        assert sanitized["apiToken"] == "[REDACTED]"
        assert sanitized["nested"]["Authorization"] == "[REDACTED]"
        assert sanitized["nested"]["items"][0]["password"] == "[REDACTED]"

    @pytest.mark.parametrize("key", ["apiToken", "APITOKEN", "apitoken", "x-api-token"])
    def test_api_token_redacted_in_any_case(self, key, tmp_path):
        log_path = tmp_path / "audit.log"
        RequestAuditLogger(log_path).log_request(
            "POST", "https://example.com/api", data={key: "s3cr3t-value"}
        )

        line = log_path.read_text()
        assert "s3cr3t-value" not in line
        assert json.loads(line)["data"] == {key: "[REDACTED]"}

    def test_does_not_mutate_input(self):
        data = {"secret": "value"}

        RequestAuditLogger.sanitize(data)

        assert data == {"secret": "value"}

    def test_passes_through_non_containers(self):
        assert RequestAuditLogger.sanitize(None) is None
        assert RequestAuditLogger.sanitize("plain text") == "plain text"


class TestRequestAuditLogger:
    def test_log_request_writes_json_line(self, audit_logger, log_path):
        audit_logger.log_request(
            "get", "https://example.com/api", {"limit": 10}, {"apiToken": "t"}
        )

        [entry] = _read_entries(log_path)
        assert entry["type"] == "REQUEST"
        assert entry["method"] == "GET"
        assert entry["url"] == "https://example.com/api"
        assert entry["params"] == {"limit": 10}
        assert entry["data"] == {"apiToken": "[REDACTED]"}
        assert "timestamp" in entry

    def test_log_response_records_status_and_duration(self, audit_logger, log_path):
        audit_logger.log_response("POST", "https://example.com/api", 201, {"id": "1"}, 42)

        [entry] = _read_entries(log_path)
        assert entry["type"] == "RESPONSE"
        assert entry["status"] == 201
        assert entry["duration"] == "42ms"
        assert entry["data"] == {"id": "1"}

    def test_log_error_without_response(self, audit_logger, log_path):
        audit_logger.log_error("GET", "https://example.com/api", ConnectionError("refused"))

        [entry] = _read_entries(log_path)
        assert entry["type"] == "ERROR"
        assert entry["error"] == {"message": "refused"}

    def test_entries_are_appended(self, audit_logger, log_path):
        audit_logger.log_request("GET", "https://example.com/1")
        audit_logger.log_request("POST", "https://example.com/2")

        entries = _read_entries(log_path)
        assert [e["method"] for e in entries] == ["GET", "POST"]

    def test_trims_to_trailing_half_when_oversized(self, log_path):
        log_path.parent.mkdir(parents=True)
        log_path.write_text("".join(f'{{"line": {i}}}\n' for i in range(10)))
        audit_logger = RequestAuditLogger(log_path, max_size_bytes=10)

        audit_logger.log_request("GET", "https://example.com/api")

        lines = log_path.read_text().splitlines()
        assert len(lines) == 6
        assert json.loads(lines[0]) == {"line": 5}
        assert json.loads(lines[-1])["type"] == "REQUEST"

    def test_no_trim_below_threshold(self, log_path):
        log_path.parent.mkdir(parents=True)
        log_path.write_text('{"line": 0}\n{"line": 1}\n')
        audit_logger = RequestAuditLogger(log_path)

        audit_logger.log_request("GET", "https://example.com/api")

        assert len(log_path.read_text().splitlines()) == 3

    def test_write_failure_does_not_raise(self, tmp_path, caplog):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        audit_logger = RequestAuditLogger(blocker / "audit.log")

        audit_logger.log_request("GET", "https://example.com/api")

        assert "Failed to write audit log entry" in caplog.text

    def test_concurrent_writes_keep_lines_intact(self, log_path):
        audit_logger = RequestAuditLogger(log_path, max_size_bytes=4096)

        def write_many(worker):
            for i in range(50):
                audit_logger.log_request("GET", f"https://example.com/{worker}/{i}")

        threads = [threading.Thread(target=write_many, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        entries = _read_entries(log_path)
        assert entries
        assert all(entry["type"] == "REQUEST" for entry in entries)
        assert entries[-1]["url"].startswith("https://example.com/")


class TestResponseHook:
    def test_logs_request_and_response(self, audit_logger, log_path):
        hook = make_response_hook(audit_logger)

        hook(_make_response())

        request_entry, response_entry = _read_entries(log_path)
        assert request_entry["type"] == "REQUEST"
        assert request_entry["url"] == "https://test.atlassian.net/wiki/api/v2/spaces"
        assert request_entry["params"] == {"limit": "10"}
        assert response_entry["type"] == "RESPONSE"
        assert response_entry["status"] == 200
        assert response_entry["duration"] == "150ms"
        assert response_entry["data"] == {"results": []}

    def test_request_body_is_sanitized(self, audit_logger, log_path):
        hook = make_response_hook(audit_logger)

        hook(
            _make_response(
                method="POST",
                request_body=json.dumps({"title": "T", "token": "abc"}),
            )
        )

        request_entry = _read_entries(log_path)[0]
        assert request_entry["data"] == {"title": "T", "token": "[REDACTED]"}

    def test_error_status_logged_as_error(self, audit_logger, log_path):
        hook = make_response_hook(audit_logger)

        hook(_make_response(status=404, body=b'{"message": "No space"}'))

        _, error_entry = _read_entries(log_path)
        assert error_entry["type"] == "ERROR"
        assert error_entry["error"]["status"] == 404
        assert error_entry["error"]["statusText"] == "Not Found"
        assert error_entry["error"]["data"] == {"message": "No space"}

    def test_hook_handles_errors_gracefully(self, audit_logger):
        hook = make_response_hook(audit_logger)
        mock_response = MagicMock()
        mock_response.request = None

        # Should not raise an exception
        hook(mock_response)


class TestInstallRequestLogging:
    def test_adds_hook(self, audit_logger):
        mock_session = MagicMock()
        mock_session.hooks = {"response": []}

        install_request_logging(mock_session, audit_logger)

        assert len(mock_session.hooks["response"]) == 1

    def test_no_duplicate_hooks(self, audit_logger):
        mock_session = MagicMock()
        mock_session.hooks = {"response": []}

        install_request_logging(mock_session, audit_logger)
        install_request_logging(mock_session, audit_logger)

        assert len(mock_session.hooks["response"]) == 1
