# kanban/project/services.py
import logging
import uuid
from datetime import timedelta

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from kanban.core.database import utcnow
from kanban.core.errors import translate_storage_errors
from kanban.project.models import Project
from kanban.project.schemas import ProjectCreate, ProjectOut, ProjectUpdate
from kanban.ticket.models import Ticket

logger = logging.getLogger(__name__)


@translate_storage_errors
def list_projects(db: Session) -> list[ProjectOut]:
    stmt = select(Project).order_by(Project.created_at.desc(), Project.id.desc())
    return [ProjectOut.model_validate(p) for p in db.scalars(stmt)]


@translate_storage_errors
def get_project(db: Session, project_id: str) -> ProjectOut | None:
    db_project = db.get(Project, project_id)
    if not db_project:
        return None
    return ProjectOut.model_validate(db_project)


@translate_storage_errors
def create_project(db: Session, payload: ProjectCreate) -> ProjectOut:
    now = utcnow()
    db_project = Project(
        id=str(uuid.uuid4()),
        name=payload.name,
        description=payload.description or "",
        created_at=now,
        updated_at=now,
    )
    db.add(db_project)
    db.commit()
    db.refresh(db_project)
    logger.info("Created project %s", db_project.id)
    return ProjectOut.model_validate(db_project)


@translate_storage_errors
def update_project(db: Session, project_id: str, payload: ProjectUpdate) -> ProjectOut | None:
    # locked read so a concurrent update cannot merge over a stale copy
    db_project = db.scalars(
        select(Project).where(Project.id == project_id).with_for_update()
    ).first()
    if not db_project:
        db.rollback()
        return None
    for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_project, field, value)
    # updatedAt strictly advances even when the clock has not moved
    db_project.updated_at = max(utcnow(), db_project.updated_at + timedelta(microseconds=1))
    db.commit()
    db.refresh(db_project)
    return ProjectOut.model_validate(db_project)


@translate_storage_errors
def delete_project(db: Session, project_id: str) -> bool:
    """Delete a project together with its tickets. False when the id is unknown."""
    result = db.execute(delete(Project).where(Project.id == project_id))
    if result.rowcount == 0:
        db.rollback()
        return False
    removed = db.execute(delete(Ticket).where(Ticket.project_id == project_id)).rowcount
    db.commit()
    logger.info("Deleted project %s and %d ticket(s)", project_id, removed)
    return True
