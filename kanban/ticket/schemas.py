# kanban/ticket/schemas.py
import enum

from pydantic import Field

from kanban.core.schemas import CamelModel, RecordModel, Timestamp


class TicketStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TicketPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TicketBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: TicketStatus | None = None
    priority: TicketPriority | None = None


class TicketCreate(TicketBase):
    project_id: str = Field(..., min_length=1, max_length=36)


class TicketUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: TicketStatus | None = None
    priority: TicketPriority | None = None
    project_id: str | None = Field(default=None, min_length=1, max_length=36)


class TicketOut(RecordModel):
    id: str
    title: str = Field(..., min_length=1, max_length=255)
    description: str
    status: TicketStatus
    project_id: str
    priority: TicketPriority
    created_at: Timestamp
    updated_at: Timestamp
