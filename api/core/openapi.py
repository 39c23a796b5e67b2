"""
OpenAPI document helpers.

Routes describe their error statuses with `error_responses`. FastAPI's default
422 entries are dropped because request validation failures are served as 400
(see `core/errors.py`).
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel


class MessageBody(BaseModel):
    message: str


def error_responses(descriptions: dict[int, str]) -> dict[int | str, dict[str, Any]]:
    return {
        status_code: {"model": MessageBody, "description": description}
        for status_code, description in descriptions.items()
    }


def install_openapi(app: FastAPI) -> None:
    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        for path_item in schema.get("paths", {}).values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)
        component_schemas = schema.get("components", {}).get("schemas", {})
        component_schemas.pop("HTTPValidationError", None)
        component_schemas.pop("ValidationError", None)
        app.openapi_schema = schema
        return schema

    app.openapi = openapi
