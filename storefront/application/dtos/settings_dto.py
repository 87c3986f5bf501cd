"""Application DTOs for site settings."""

from pydantic import BaseModel, Field


class SiteSettingUpdateRequest(BaseModel):
    """Request DTO for a single setting edit."""

    value: str = Field(..., description="New value, stored as text")

    model_config = {"frozen": True}
