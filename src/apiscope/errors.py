"""Error types for apiscope.

Error code scheme:

    METADATA_UNAVAILABLE  -- a module or type key cannot be resolved in the catalog
    MALFORMED_SNAPSHOT    -- a snapshot document is structurally invalid
    INVALID_CONFIG        -- a render-options file has unknown keys or bad values

Failures are scoped to the single request that raised them; nothing in the
core retries.  Classification never raises (exotic metadata maps to the
"unknown" kind) and extension lookups return empty results rather than
errors.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Error code constants
# ---------------------------------------------------------------------------

METADATA_UNAVAILABLE = "METADATA_UNAVAILABLE"
MALFORMED_SNAPSHOT = "MALFORMED_SNAPSHOT"
INVALID_CONFIG = "INVALID_CONFIG"

DESCRIPTIONS: dict[str, str] = {
    METADATA_UNAVAILABLE: "requested module or type is not in the catalog",
    MALFORMED_SNAPSHOT: "snapshot document is invalid",
    INVALID_CONFIG: "render options are invalid",
}

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ApiScopeError(RuntimeError):
    """Base class for apiscope errors carrying a stable error code."""

    def __init__(self, message: str, code: str) -> None:
        if code not in DESCRIPTIONS:
            raise ValueError(f"Unknown apiscope error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class MetadataUnavailableError(ApiScopeError, LookupError):
    """Raised when the catalog cannot resolve a module or type key."""

    def __init__(self, key: str, what: str = "type") -> None:
        super().__init__(f"{what} not found in catalog: {key}", METADATA_UNAVAILABLE)
        self.key = key
        self.what = what


class SnapshotError(ApiScopeError, ValueError):
    """Raised when a snapshot document cannot be turned into a catalog."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        if path:
            message = f"{path}: {message}"
        super().__init__(message, MALFORMED_SNAPSHOT)
        self.path = path


class ConfigError(ApiScopeError, ValueError):
    """Raised when a render-options file fails validation."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message, INVALID_CONFIG)
        self.suggestion = suggestion
