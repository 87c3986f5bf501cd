"""Admin console HTTP API."""
