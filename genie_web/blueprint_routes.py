"""Blueprint generation routes. Prefix: /api/blueprints"""

from typing import List

from fastapi import APIRouter, Depends

from genie.blueprint import PRESETS, generate_blueprint
from genie.models.blueprint import Blueprint, BlueprintRequest, DifficultyPreset
from .auth_deps import get_current_principal


router = APIRouter(prefix="/api/blueprints", tags=["blueprints"])


@router.get("/presets", response_model=List[DifficultyPreset])
async def list_presets() -> List[DifficultyPreset]:
    return PRESETS


@router.post("", response_model=Blueprint, dependencies=[Depends(get_current_principal)])
async def create_blueprint(body: BlueprintRequest) -> Blueprint:
    """Split question_count across the requested difficulty percentages."""
    return generate_blueprint(body)
