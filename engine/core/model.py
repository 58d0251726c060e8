from __future__ import annotations

"""Input-output model: identity, metadata lists and its matrix cache."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from engine.contracts.model_meta import DemandInfo, Indicator, ModelInfo, Sector
from engine.core.matrix import DqiGrid, Matrix
from engine.io.readers.metadata_reader import read_demand_infos, read_indicators, read_sectors
from engine.runtime.caches.model_cache import ModelCache


@dataclass
class Model:
    """An input-output model backed by one data folder.

    Each model owns exactly one :class:`ModelCache`; decoded matrices live for
    as long as the model does.
    """

    id: str
    folder: Path
    name: Optional[str] = None
    description: Optional[str] = None
    sectors: List[Sector] = field(default_factory=list)
    indicators: List[Indicator] = field(default_factory=list)
    demand_infos: List[DemandInfo] = field(default_factory=list)
    cache: Optional[ModelCache] = None

    def __post_init__(self) -> None:
        self.folder = Path(self.folder)
        if self.name is None:
            self.name = self.id
        if self.cache is None:
            self.cache = ModelCache(self.folder, label=self.id)
        self.sectors = sorted(self.sectors, key=lambda s: s.index)
        self.indicators = sorted(self.indicators, key=lambda i: i.index)
        self._sector_map: Dict[str, Sector] = {s.id: s for s in self.sectors}

    @classmethod
    def from_folder(cls, model_id: str, folder: Union[str, Path], **kwargs) -> "Model":
        """Create a model and read its metadata tables from ``folder``."""
        folder = Path(folder)
        return cls(
            id=model_id,
            folder=folder,
            sectors=read_sectors(folder),
            indicators=read_indicators(folder),
            demand_infos=read_demand_infos(folder),
            **kwargs,
        )

    def matrix(self, name: str) -> Matrix:
        return self.cache.get_matrix(name)

    def dqi_grid(self, name: str) -> DqiGrid:
        return self.cache.get_dqi_grid(name)

    def sector(self, sector_id: str) -> Optional[Sector]:
        return self._sector_map.get(sector_id)

    def sector_ids(self) -> List[str]:
        """Sector IDs in index order."""
        return [s.id for s in self.sectors]

    def indicator_ids(self) -> List[str]:
        """Indicator IDs in index order."""
        return [i.id for i in self.indicators]

    def info(self) -> ModelInfo:
        return ModelInfo(id=self.id, name=self.name or self.id, description=self.description)
