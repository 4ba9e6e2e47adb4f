"""
Constants and default values shared across the server.

This module centralizes defaults for pagination, caching, timeouts and
audit logging, providing a single source of truth for magic numbers.
"""

#
# Pagination defaults
#
DEFAULT_CONTENT_LIMIT = 25
DEFAULT_SPACE_LIMIT = 50
DEFAULT_START = 0

# Page size used when scanning all spaces for a key
SPACE_LOOKUP_PAGE_SIZE = 100

#
# Client defaults
#
DEFAULT_REQUEST_TIMEOUT = 30
DEFAULT_SPACE_CACHE_TTL = 60 * 60

# Fan-out workers for per-page body enrichment
BODY_ENRICHMENT_MAX_WORKERS = 8

#
# Body representations
#
BODY_FORMAT_STORAGE = "storage"
BODY_FORMAT_VIEW = "view"

#
# Audit log defaults
#
DEFAULT_LOG_FILE = "confluence-mcp.log"
DEFAULT_LOG_MAX_SIZE_MB = 3
REDACTED = "[REDACTED]"
SENSITIVE_KEY_FRAGMENTS = (
    "password",
    "token",
    "authorization",
    "auth",
    "key",
    "secret",
)
