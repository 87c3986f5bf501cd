"""Glowform storefront core: orders, stock reconciliation and inventory statistics."""

__version__ = "1.0.0"
