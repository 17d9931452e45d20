# kanban/core/schemas.py
from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def format_timestamp(value):
    """Render stored datetimes as ISO-8601 UTC with microseconds, e.g. 2026-01-02T03:04:05.678901Z."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="microseconds") + "Z"
    return value


Timestamp = Annotated[str, BeforeValidator(format_timestamp)]


class CamelModel(BaseModel):
    """JSON uses camelCase (projectId, createdAt); Python attributes stay snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """Strict record read from a row; unexpected shapes fail validation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="forbid",
    )
