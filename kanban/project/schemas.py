# kanban/project/schemas.py
from pydantic import Field

from kanban.core.schemas import CamelModel, RecordModel, Timestamp


class ProjectBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class ProjectCreate(ProjectBase):
    pass


class ProjectUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class ProjectOut(RecordModel):
    id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    created_at: Timestamp
    updated_at: Timestamp
