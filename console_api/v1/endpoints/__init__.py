"""Routers for /api/v1."""
