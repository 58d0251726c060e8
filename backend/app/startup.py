"""FastAPI startup registration.

Keep import-time side effects out of routers/modules. Model discovery and any
other initialization should be registered here.
"""

from __future__ import annotations

from fastapi import FastAPI

from engine.api import ModelRegistry

from .adapters.io.environment import get_data_root


def register_startup(app: FastAPI) -> None:
    """Register startup hooks on the provided FastAPI app."""

    @app.on_event("startup")
    async def _load_model_registry() -> None:
        # A registry injected by create_app() (tests, embedding) wins.
        if getattr(app.state, "registry", None) is None:
            app.state.registry = ModelRegistry.from_data_root(get_data_root())
