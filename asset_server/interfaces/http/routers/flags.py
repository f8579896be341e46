"""Inspection endpoint for the flag values currently in force."""

from fastapi import APIRouter, Depends

from asset_server.interfaces.http.deps import get_flags
from asset_server.modules.flags import FlagSnapshot

router = APIRouter(tags=["flags"])


@router.get("/_flags", summary="Current flag values")
async def current_flags(flags: FlagSnapshot = Depends(get_flags)) -> dict:
    return flags.to_public()
