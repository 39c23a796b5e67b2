"""
Request body validation.

Each operation declares a pydantic schema (see `<feature>/schemas.py`) that
lists its allowed fields and their constraints. `validate_body` evaluates that
schema once against the raw JSON body, before any query is issued.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import INVALID_REQUEST_MESSAGE, InvalidRequest

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Ids are Postgres `integer` (int4) columns.
MAX_ROW_ID = 2_147_483_647


class RequestSchema(BaseModel):
    """
    Base for request bodies: keys outside the declared fields are rejected.
    """

    model_config = ConfigDict(extra="forbid")


def validate_body(
    schema: type[SchemaT],
    body: Any,
    *,
    message: str = INVALID_REQUEST_MESSAGE,
    messages: dict[str, str] | None = None,
) -> SchemaT:
    """
    Parse `body` with `schema` or raise `InvalidRequest`.

    `messages` maps a pydantic error type (e.g. "string_too_long") to a more
    specific client message; the first matching error wins.
    """
    if not isinstance(body, dict):
        raise InvalidRequest(message)
    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        for error in exc.errors():
            specific = (messages or {}).get(error["type"])
            if specific:
                raise InvalidRequest(specific) from exc
        raise InvalidRequest(message) from exc


def is_blank(value: str | None) -> bool:
    return not (value or "").strip()
