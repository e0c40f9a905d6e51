"""Well-known guard names."""

DEFAULT_GUARD = "web"
API_GUARD = "api"
