"""
Site settings API routes.

Static paths (/settings/site) are declared before /settings/{key} so they
are not captured by the key route.
"""
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from storefront.dependencies import get_settings_service
from storefront.models import Setting, SettingCreate
from storefront.services import SettingsService

router = APIRouter(tags=["settings"])


@router.get("/settings", response_model=List[Setting])
async def list_settings(
    category: Optional[str] = Query(None),
    settings: SettingsService = Depends(get_settings_service),
) -> List[Setting]:
    return await settings.list_settings(category)


@router.get("/settings/site")
async def get_site_settings(
    settings: SettingsService = Depends(get_settings_service),
) -> Dict[str, Dict[str, Optional[str]]]:
    """Site settings as a key to value map under "settings"."""
    return {"settings": await settings.get_site_settings()}


@router.get("/site-settings")
async def get_public_site_settings(
    settings: SettingsService = Depends(get_settings_service),
) -> Dict[str, Optional[str]]:
    """Site settings keyed without the "site." prefix, for the storefront frontend."""
    return await settings.get_site_settings(strip_prefix=True)


@router.get("/settings/{key}", response_model=Setting)
async def get_setting(
    key: str = Path(..., min_length=1),
    settings: SettingsService = Depends(get_settings_service),
) -> Setting:
    setting = await settings.get_setting(key)
    if not setting:
        raise HTTPException(status_code=404, detail=f"Setting '{key}' not found")
    return setting


@router.post("/settings")
async def save_settings(
    response: Response,
    payload: Dict[str, Any] = Body(...),
    settings: SettingsService = Depends(get_settings_service),
) -> Union[Setting, Dict[str, Any]]:
    """
    Upsert settings.

    Body is either a single setting ({"key": ..., "value": ...}) or a batch
    ({"settings": {"site.name": "...", ...}}), where each key's category is
    the part before the first dot. A single setting answers 201 when it was
    created and 200 when it replaced an existing value.
    """
    batch = payload.get("settings")
    if "settings" in payload and not isinstance(batch, dict):
        raise HTTPException(status_code=422, detail="'settings' must be an object of key/value pairs")
    try:
        if batch is not None:
            saved = await settings.upsert_many(batch)
            return {"message": "Settings updated successfully", "settings": saved}
        setting, created = await settings.upsert_setting(SettingCreate.model_validate(payload))
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_context=False))
    response.status_code = 201 if created else 200
    return setting


@router.delete("/settings/{key}", status_code=204)
async def delete_setting(
    key: str = Path(..., min_length=1),
    settings: SettingsService = Depends(get_settings_service),
) -> Response:
    if not await settings.delete_setting(key):
        raise HTTPException(status_code=404, detail=f"Setting '{key}' not found")
    return Response(status_code=204)


@router.get("/payment-settings")
async def get_payment_settings(
    settings: SettingsService = Depends(get_settings_service),
) -> Dict[str, Optional[str]]:
    """Payment settings keyed by their full "payment.<name>" key."""
    return await settings.get_payment_settings()


@router.post("/payment-settings")
async def save_payment_settings(
    payload: Dict[str, Any] = Body(...),
    settings: SettingsService = Depends(get_settings_service),
) -> Dict[str, Any]:
    """Store payment options (UPI id, bank details, ...) under the payment namespace."""
    try:
        saved = await settings.save_payment_settings(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_context=False))
    return {"message": "Payment settings updated successfully", "settings": saved}
