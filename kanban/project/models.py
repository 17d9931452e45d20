# kanban/project/models.py
from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from kanban.core.database import Base, UTCDateTime


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column("createdAt", UTCDateTime, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column("updatedAt", UTCDateTime, nullable=False)
