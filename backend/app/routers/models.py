from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from engine.api import Model, ModelRegistry
from engine.contracts.model_meta import DemandInfo, Indicator, ModelInfo, Sector

from ..dependencies import get_model, get_registry
from ..services import model_service

router = APIRouter()


@router.get("/models", response_model=List[ModelInfo], summary="List the available models")
def list_models(registry: ModelRegistry = Depends(get_registry)):
    return model_service.list_models(registry)


@router.get("/{model}/sectors", response_model=List[Sector])
def list_sectors(m: Model = Depends(get_model)):
    return model_service.list_sectors(m)


@router.get("/{model}/sectors/{sector_id:path}", response_model=Sector)
def get_sector(sector_id: str, m: Model = Depends(get_model)):
    return model_service.get_sector(m, sector_id)


@router.get("/{model}/indicators", response_model=List[Indicator])
def list_indicators(m: Model = Depends(get_model)):
    return model_service.list_indicators(m)


@router.get("/{model}/demands", response_model=List[DemandInfo])
def list_demands(m: Model = Depends(get_model)):
    return model_service.list_demand_infos(m)
