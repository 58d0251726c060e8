"""FastAPI dependencies shared by routers."""

from __future__ import annotations

from fastapi import Request

from engine.api import Model, ModelRegistry


def get_registry(request: Request) -> ModelRegistry:
    return request.app.state.registry


def get_model(model: str, request: Request) -> Model:
    """Resolve the ``{model}`` path parameter (raises UnknownModelError)."""
    return get_registry(request).get(model)
