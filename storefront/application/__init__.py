"""Application layer: services, query helpers, DTOs and screen state."""
