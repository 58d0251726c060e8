from typing import List

from engine.api import Model, ModelRegistry
from engine.contracts.model_meta import DemandInfo, Indicator, ModelInfo, Sector

from ..exceptions import UnknownSectorError


def list_models(registry: ModelRegistry) -> List[ModelInfo]:
    return [m.info() for m in registry.models()]


def list_sectors(model: Model) -> List[Sector]:
    return list(model.sectors)


def get_sector(model: Model, sector_id: str) -> Sector:
    sector = model.sector(sector_id)
    if sector is None:
        raise UnknownSectorError(model.id, sector_id)
    return sector


def list_indicators(model: Model) -> List[Indicator]:
    return list(model.indicators)


def list_demand_infos(model: Model) -> List[DemandInfo]:
    return list(model.demand_infos)
