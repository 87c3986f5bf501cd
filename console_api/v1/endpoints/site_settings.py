"""Site settings endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from storefront.application.dtos import SiteSettingUpdateRequest
from storefront.application.services import SiteSettingsService

from console_api.deps import get_site_settings_service

router = APIRouter(prefix="/site-settings", tags=["site-settings"])


@router.get("", response_model=Dict[str, str])
async def get_site_settings(
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> Dict[str, str]:
    return await service.get_site_settings()


@router.put("", response_model=Dict[str, str])
async def upsert_site_settings(
    updates: Dict[str, Any] = Body(..., description="Setting keys and their new values"),
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> Dict[str, str]:
    """Create or replace several settings at once."""
    return await service.update_site_settings(updates)


@router.patch("/{key}", response_model=Dict[str, str])
async def update_site_setting(
    key: str,
    request: SiteSettingUpdateRequest,
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> Dict[str, str]:
    """Edit one existing setting; unknown keys answer 404."""
    return await service.update_site_setting(key, request.value)
