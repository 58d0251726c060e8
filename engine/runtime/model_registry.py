"""Registry of the models found under a data root.

Every sub-folder of the data root is one model; its folder name is the model id.
Models are created once and kept for the life of the process.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

from engine.contracts.errors import UnknownModelError
from engine.core.model import Model


logger = logging.getLogger(__name__)


class ModelRegistry:
    def __init__(self, models: Iterable[Model] = ()):
        self._models: Dict[str, Model] = {}
        for m in models:
            self.add(m)

    @classmethod
    def from_data_root(cls, data_root: Union[str, Path]) -> "ModelRegistry":
        root = Path(data_root)
        reg = cls()
        if not root.is_dir():
            logger.warning("Data root %s does not exist; no models registered", root)
            return reg

        for folder in sorted(p for p in root.iterdir() if p.is_dir()):
            if folder.name.startswith("."):
                continue
            reg.add(Model.from_folder(folder.name, folder))
        logger.info("Registered %d model(s) from %s: %s", len(reg), root, ", ".join(reg.ids()))
        return reg

    def add(self, model: Model) -> None:
        if model.id in self._models:
            raise ValueError(f"Duplicate model id: {model.id}")
        self._models[model.id] = model

    def get(self, model_id: str) -> Model:
        model = self._models.get(model_id)
        if model is None:
            raise UnknownModelError(model_id)
        return model

    def ids(self) -> List[str]:
        return list(self._models)

    def models(self) -> List[Model]:
        return list(self._models.values())

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._models

    def __len__(self) -> int:
        return len(self._models)
