# kanban/ticket/models.py
from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from kanban.core.database import Base, UTCDateTime


class Ticket(Base):
    __tablename__ = "tickets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="todo", index=True)
    # advisory reference only, no foreign key constraint
    project_id: Mapped[str] = mapped_column("projectId", String(36), nullable=False, index=True)
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    created_at: Mapped[datetime] = mapped_column("createdAt", UTCDateTime, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column("updatedAt", UTCDateTime, nullable=False)
